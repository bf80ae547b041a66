"""Map logical axis keywords to physical axes."""

from __future__ import annotations

from typing import Literal, Protocol

from cssval.errors import InvalidAxisError, MissingContextError

PhysicalAxis = Literal["x", "y"]

PHYSICAL_AXES: frozenset[str] = frozenset({"x", "y"})
LOGICAL_AXES: frozenset[str] = frozenset({"block", "inline"})


class WritingModeContext(Protocol):
    """Anything exposing a computed ``writing_mode`` value."""

    writing_mode: str


def normalize_axis(axis: str, computed_style: WritingModeContext | None = None) -> PhysicalAxis:
    """Resolve ``axis`` to ``"x"`` or ``"y"``.

    Physical axes are returned as-is without consulting ``computed_style``.
    Logical axes follow the writing mode: in ``horizontal-tb`` the block axis
    is vertical and the inline axis horizontal, and the other way round in
    vertical writing modes.

    Raises:
        MissingContextError: ``axis`` is logical and ``computed_style`` is None.
        InvalidAxisError: ``axis`` is not x, y, block or inline.
    """
    if axis in PHYSICAL_AXES:
        return axis  # type: ignore[return-value]

    if axis not in LOGICAL_AXES:
        raise InvalidAxisError(f"Invalid axis {axis!r}")

    if computed_style is None:
        raise MissingContextError(
            f"Normalizing the logical axis {axis!r} requires the computed style of the source"
        )

    horizontal = computed_style.writing_mode == "horizontal-tb"
    if axis == "block":
        return "y" if horizontal else "x"
    return "x" if horizontal else "y"
