"""Grouped reports over the LEGO set collection using Polars."""

from collections.abc import Sequence

import polars as pl
from loguru import logger

from src.core.domain_models import LegoSet
from src.core.file_manager import get_lego_sets, records_to_frame


def _load_frame(sets: Sequence[LegoSet] | None) -> pl.DataFrame:
    return records_to_frame(get_lego_sets() if sets is None else sets)


def average_pieces_by_theme(sets: Sequence[LegoSet] | None = None) -> pl.DataFrame:
    """Mean piece count per theme.

    Sets without a theme are left out.

    Returns:
        DataFrame with columns theme, set_count, average_pieces sorted by theme
    """
    df_sets = _load_frame(sets)
    df_themed = df_sets.filter(pl.col("theme").is_not_null())
    dropped_count = df_sets.height - df_themed.height
    if dropped_count > 0:
        logger.debug(f"Skipped {dropped_count} sets without a theme")

    return (
        df_themed.group_by("theme")
        .agg(
            pl.len().cast(pl.Int64).alias("set_count"),
            pl.col("pieces").mean().alias("average_pieces"),
        )
        .sort("theme")
    )


def count_by_packaging(sets: Sequence[LegoSet] | None = None) -> pl.DataFrame:
    """Number of sets per packaging type; unknown packaging is reported as null."""
    return (
        _load_frame(sets)
        .group_by("packaging_type")
        .agg(pl.len().cast(pl.Int64).alias("set_count"))
        .sort(["set_count", "packaging_type"], descending=[True, False], nulls_last=True)
    )


def tag_frequencies(sets: Sequence[LegoSet] | None = None) -> pl.DataFrame:
    """Number of sets per tag, most frequent first."""
    return (
        _load_frame(sets)
        .select("tags")
        .explode("tags")
        .drop_nulls("tags")
        .rename({"tags": "tag"})
        .group_by("tag")
        .agg(pl.len().cast(pl.Int64).alias("set_count"))
        .sort(["set_count", "tag"], descending=[True, False])
    )
