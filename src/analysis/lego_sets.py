"""Read-only queries over the LEGO set collection.

Every function accepts an optional sequence of sets; when omitted the
bundled Brickset collection is used. None of them mutate their input.
"""

from collections.abc import Sequence

from src.core.domain_models import LegoSet
from src.core.file_manager import get_lego_sets


class NoMatchingSetsError(ValueError):
    """Raised when an aggregate is undefined because no set matched."""


def _resolve(sets: Sequence[LegoSet] | None) -> Sequence[LegoSet]:
    return get_lego_sets() if sets is None else sets


def _print_lines(lines: Sequence[str]) -> None:
    for line in lines:
        print(line)


def count_sets_with_tag(tag: str, sets: Sequence[LegoSet] | None = None) -> int:
    """Number of sets carrying `tag` (exact, case-sensitive)."""
    return sum(1 for lego_set in _resolve(sets) if lego_set.has_tag(tag))


def max_pieces(sets: Sequence[LegoSet] | None = None) -> int:
    """Largest piece count, or 0 for an empty collection."""
    return max((lego_set.pieces for lego_set in _resolve(sets)), default=0)


def names_sorted(sets: Sequence[LegoSet] | None = None) -> list[str]:
    return sorted(lego_set.name for lego_set in _resolve(sets))


def print_names_sorted(sets: Sequence[LegoSet] | None = None) -> None:
    """Print all set names in alphabetical order, one per line."""
    _print_lines(names_sorted(sets))


def names_with_pieces_between(
    low: int = 100, high: int = 500, sets: Sequence[LegoSet] | None = None
) -> list[str]:
    """Names of sets with low <= pieces <= high, in reverse alphabetical order."""
    return sorted(
        (lego_set.name for lego_set in _resolve(sets) if low <= lego_set.pieces <= high),
        reverse=True,
    )


def print_names_with_pieces_between(
    low: int = 100, high: int = 500, sets: Sequence[LegoSet] | None = None
) -> None:
    _print_lines(names_with_pieces_between(low, high, sets))


def names_starting_with(letter: str = "B", sets: Sequence[LegoSet] | None = None) -> list[str]:
    """Names whose first character is `letter` (exact case), alphabetically.

    Sets with an empty name never match.
    """
    if len(letter) != 1:
        raise ValueError(f"Expected a single character, got: {letter!r}")
    return sorted(
        lego_set.name for lego_set in _resolve(sets) if lego_set.name[:1] == letter
    )


def print_names_starting_with(
    letter: str = "B", sets: Sequence[LegoSet] | None = None
) -> None:
    _print_lines(names_starting_with(letter, sets))


def count_specified_packaging(sets: Sequence[LegoSet] | None = None) -> int:
    """Number of sets whose packaging type is known and not NOT_SPECIFIED."""
    return sum(
        1
        for lego_set in _resolve(sets)
        if lego_set.packaging_type is not None and lego_set.packaging_type.is_specified
    )


def average_pieces(theme: str, sets: Sequence[LegoSet] | None = None) -> float:
    """Mean piece count of the sets in `theme`.

    Raises:
        NoMatchingSetsError: If no set belongs to the theme
    """
    pieces = [lego_set.pieces for lego_set in _resolve(sets) if lego_set.theme == theme]
    if not pieces:
        raise NoMatchingSetsError(f"No LEGO sets found for theme: {theme!r}")
    return sum(pieces) / len(pieces)
