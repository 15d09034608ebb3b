"""JSON record storage with read-once caching.

Handles all file I/O for typed record collections.
Each file is parsed at most once per process; later reads reuse the cached tuple.
"""

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import TypeVar

import polars as pl
from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from src.core.config import get_settings
from src.core.domain_models import BRICKSET_SCHEMA, LegoSet

RecordT = TypeVar("RecordT", bound=BaseModel)


def read_json_records(path: Path, model: type[RecordT]) -> tuple[RecordT, ...]:
    """Read a JSON array file into an ordered tuple of records.

    Args:
        path: JSON file containing a top-level array of objects
        model: Pydantic model each array element is validated against

    Returns:
        Records in source order

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
        pydantic.ValidationError: If the content is not a JSON array of compatible objects
    """
    # Resolve so that relative and absolute spellings share one cache entry
    return _read_cached(Path(path).resolve(), model)


@lru_cache(maxsize=None)
def _read_cached(path: Path, model: type[RecordT]) -> tuple[RecordT, ...]:
    if not path.exists():
        logger.error(f"File not found: {path}")
        raise FileNotFoundError(f"No JSON file found: {path}")

    logger.debug(f"Reading {path}")
    raw = path.read_bytes()

    adapter = TypeAdapter(list[model])  # type: ignore[valid-type]
    try:
        records = adapter.validate_json(raw)
    except ValidationError as e:
        logger.error(f"Failed to parse {path.name} as {model.__name__} records: {e}")
        raise

    logger.info(f"Read {len(records)} {model.__name__} records from {path.name}")
    return tuple(records)


def clear_cache() -> None:
    """Forget every cached file so the next read hits the disk again."""
    _read_cached.cache_clear()


def get_lego_sets() -> tuple[LegoSet, ...]:
    """Return the configured LEGO set collection, loading it on first use."""
    return read_json_records(get_settings().data_file, LegoSet)


def records_to_frame(records: Iterable[LegoSet]) -> pl.DataFrame:
    """Convert LEGO sets into a Polars DataFrame with BRICKSET_SCHEMA."""
    rows = [record.to_row() for record in records]
    return pl.DataFrame(rows, schema=BRICKSET_SCHEMA)
