"""Unit-name classification for CSS numeric values."""

from __future__ import annotations

__all__ = [
    "CANONICAL_UNITS",
    "VIEWPORT_UNITS",
    "is_canonical",
    "is_viewport_unit",
    "normalize_unit",
]

# Base units that numeric resolution ultimately reduces to.
CANONICAL_UNITS: frozenset[str] = frozenset({"px", "deg", "s", "hz", "dppx", "number", "fr"})

VIEWPORT_UNITS: frozenset[str] = frozenset({"vw", "vh", "vmin", "vmax"})


def normalize_unit(unit: str) -> str:
    """Return the lower-cased, stripped form of a unit identifier."""
    return unit.strip().lower()


def is_canonical(unit: str) -> bool:
    """Case-insensitive check of a raw unit string against ``CANONICAL_UNITS``."""
    return unit.lower() in CANONICAL_UNITS


def is_viewport_unit(unit: str) -> bool:
    return unit.lower() in VIEWPORT_UNITS
