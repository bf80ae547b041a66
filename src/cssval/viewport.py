"""Resolve viewport-relative lengths against known viewport dimensions."""

from __future__ import annotations

import math

from cssval.models import UnitValue, ViewportContext
from cssval.warning_policy import WarningPolicy, emit_warning


def _scaled(value: UnitValue, dimension: float, unit: str) -> UnitValue | None:
    magnitude = value.value * dimension / 100
    # Overflow past float range has no CSS representation.
    if not math.isfinite(magnitude):
        return None
    return UnitValue(value=magnitude, unit=unit)


def resolve_viewport_unit(
    value: UnitValue,
    context: ViewportContext,
    *,
    warning_policy: WarningPolicy | None = None,
) -> UnitValue | None:
    """Convert a ``vw``/``vh``/``vmin``/``vmax`` value to the viewport's unit.

    Returns None when the value is not in a viewport unit, when either
    viewport dimension is unknown, or when the product overflows; callers keep
    the original value then.

    ``vmin`` and ``vmax`` always carry the viewport width's unit, even when the
    height magnitude is the one selected. A ``W02`` diagnostic is emitted when
    that makes a difference.
    """
    if not isinstance(value, UnitValue):
        return None

    if not context.is_complete:
        return None
    width = context.viewport_width
    height = context.viewport_height

    if value.unit == "vw":
        return _scaled(value, width.value, width.unit)

    if value.unit == "vh":
        return _scaled(value, height.value, height.unit)

    if value.unit in ("vmin", "vmax"):
        if width.unit != height.unit:
            emit_warning(
                "W02",
                f"{value.unit} compares viewport width ({width.unit}) and height "
                f"({height.unit}) in different units; reporting {width.unit}",
                policy=warning_policy,
            )
        pick = min if value.unit == "vmin" else max
        return _scaled(value, pick(width.value, height.value), width.unit)

    return None
