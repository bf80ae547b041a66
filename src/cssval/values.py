"""Parse and format single numeric component values."""

from __future__ import annotations

import re

from pydantic import ValidationError as PydanticValidationError

from cssval.errors import ParseError
from cssval.models import UnitValue

__all__ = ["format_unit_value", "parse_unit_value", "try_parse_unit_value"]

# CSS <number> followed by an optional identifier unit or a percent sign.
_NUMBER_RE = re.compile(
    r"""
    ^(?P<number>[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?)
    (?P<unit>%|[a-zA-Z]+)?$
    """,
    re.VERBOSE,
)


def parse_unit_value(token: str) -> UnitValue:
    """Parse a dimension, percentage or number literal.

    ``"50vw"`` becomes ``UnitValue(50.0, "vw")``, ``"25%"`` becomes unit
    ``percent`` and a bare ``"3"`` becomes unit ``number``.

    Raises:
        ParseError: If ``token`` is not a numeric literal (keywords and
            function calls included).
    """
    match = _NUMBER_RE.match(token.strip())
    if match is None:
        raise ParseError(f"Not a numeric component value: {token!r}")

    unit = match.group("unit")
    if unit is None:
        unit = "number"
    elif unit == "%":
        unit = "percent"

    try:
        return UnitValue(value=float(match.group("number")), unit=unit)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid unit value {token!r}:\n{e}") from e


def try_parse_unit_value(token: str) -> UnitValue | None:
    """Like :func:`parse_unit_value`, but returns None for non-numeric tokens."""
    try:
        return parse_unit_value(token)
    except ParseError:
        return None


def format_unit_value(value: UnitValue) -> str:
    """Serialize a unit value back to CSS text, e.g. ``400px`` or ``50%``."""
    # Shortest round-trip form; integral values print without ".0".
    number = repr(value.value)
    if number.endswith(".0"):
        number = number[:-2]
    if value.unit == "number":
        return number
    if value.unit == "percent":
        return f"{number}%"
    return f"{number}{value.unit}"
