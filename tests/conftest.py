import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from src.core.config import get_settings
from src.core.domain_models import LegoSet
from src.core.file_manager import clear_cache

# The three-set fixture used across the query and summary tests
FIXTURE_SETS = [
    {"name": "Alpha", "theme": "X", "pieces": 150, "packagingType": "BOX", "tags": ["a"]},
    {"name": "Beta", "theme": "X", "pieces": 600, "packagingType": "NOT_SPECIFIED", "tags": None},
    {"name": "gamma", "theme": "Y", "pieces": 50, "packagingType": "BAG", "tags": ["a", "b"]},
]


@pytest.fixture(autouse=True)
def _fresh_cache() -> Iterator[None]:
    """Every test starts from an empty loader cache and default settings."""
    clear_cache()
    get_settings.cache_clear()
    yield
    clear_cache()
    get_settings.cache_clear()


@pytest.fixture
def fixture_file(tmp_path: Path) -> Path:
    path = tmp_path / "brickset.json"
    path.write_text(json.dumps(FIXTURE_SETS), encoding="utf-8")
    return path


@pytest.fixture
def fixture_sets() -> list[LegoSet]:
    return [LegoSet.model_validate(raw) for raw in FIXTURE_SETS]


@pytest.fixture
def bundled_fixture(fixture_file: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configured data file at the fixture."""
    monkeypatch.setenv("BRICKSET_DATA_FILE", str(fixture_file))
    get_settings.cache_clear()
    return fixture_file
