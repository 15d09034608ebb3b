from enum import Enum

import polars as pl
from pydantic import BaseModel, ConfigDict, Field

# --- Constants & Schemas ---

# Polars Schema for the grouped reports.
# Tags are stored as a sorted list so the frame is deterministic.
BRICKSET_SCHEMA = {
    "number": pl.Utf8,
    "name": pl.Utf8,
    "year": pl.Int64,
    "theme": pl.Utf8,
    "subtheme": pl.Utf8,
    "pieces": pl.Int64,
    "packaging_type": pl.Utf8,
    "tags": pl.List(pl.Utf8),
}


# --- Enums ---


class PackagingType(str, Enum):
    """How a set is packaged. NOT_SPECIFIED is a regular value, not a missing one."""

    BOX = "BOX"
    BAG = "BAG"
    POLYBAG = "POLYBAG"
    BLISTER_PACK = "BLISTER_PACK"
    FOIL_PACK = "FOIL_PACK"
    BUCKET = "BUCKET"
    TUB = "TUB"
    CANISTER = "CANISTER"
    PLASTIC_BOX = "PLASTIC_BOX"
    SHRINK_WRAPPED = "SHRINK_WRAPPED"
    TAG = "TAG"
    OTHER = "OTHER"
    NOT_SPECIFIED = "NOT_SPECIFIED"

    @classmethod
    def _missing_(cls, value: object) -> "PackagingType | None":
        """Accept Brickset display labels such as 'Not specified' or 'Blister pack'."""
        if not isinstance(value, str):
            return None
        key = value.strip().upper().replace(" ", "_").replace("-", "_")
        return cls.__members__.get(key)

    @property
    def is_specified(self) -> bool:
        return self is not PackagingType.NOT_SPECIFIED


# --- Domain Models ---


class LegoSet(BaseModel):
    """
    A single LEGO set as published by Brickset.

    Design Choice:
    - theme, packaging_type and tags are Optional; Brickset omits them for some sets.
    - tags is a frozenset: order carries no meaning and the model is immutable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    theme: str | None = None
    pieces: int = Field(ge=0)
    packaging_type: PackagingType | None = Field(default=None, alias="packagingType")
    tags: frozenset[str] | None = None

    # Catalogue metadata
    number: str | None = None
    year: int | None = None
    subtheme: str | None = None

    def has_tag(self, tag: str) -> bool:
        """Case-sensitive tag lookup; sets without tags never match."""
        return self.tags is not None and tag in self.tags

    def to_row(self) -> dict[str, object]:
        """Flatten into a row matching BRICKSET_SCHEMA."""
        return {
            "number": self.number,
            "name": self.name,
            "year": self.year,
            "theme": self.theme,
            "subtheme": self.subtheme,
            "pieces": self.pieces,
            "packaging_type": self.packaging_type.value if self.packaging_type else None,
            "tags": sorted(self.tags) if self.tags is not None else None,
        }
