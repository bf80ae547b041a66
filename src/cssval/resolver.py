"""Resolve a whole property value against a context."""

from __future__ import annotations

from cssval.axis import PhysicalAxis, normalize_axis
from cssval.models import ResolveContext, UnitValue
from cssval.tokenizer import split_into_component_values
from cssval.units import CANONICAL_UNITS, VIEWPORT_UNITS
from cssval.values import try_parse_unit_value
from cssval.viewport import resolve_viewport_unit
from cssval.warning_policy import WarningPolicy, emit_warning

# Units on UnitValue are lower-case already.
_RESOLVABLE_UNITS: frozenset[str] = CANONICAL_UNITS | VIEWPORT_UNITS | {"percent"}


def resolve_components(
    text: str,
    context: ResolveContext,
    *,
    warning_policy: WarningPolicy | None = None,
) -> list[str | UnitValue]:
    """Tokenize ``text`` and resolve each numeric component.

    Keywords and function calls come back as strings. Numeric components come
    back as UnitValue, converted to the viewport's unit when they use a
    viewport unit and the viewport is known, unchanged otherwise.
    """
    resolved: list[str | UnitValue] = []
    for token in split_into_component_values(text, warning_policy=warning_policy):
        value = try_parse_unit_value(token)
        if value is None:
            resolved.append(token)
            continue

        if value.unit not in _RESOLVABLE_UNITS:
            emit_warning(
                "W03",
                f"Unit {value.unit!r} in {token!r} is not resolved; passing it through",
                policy=warning_policy,
            )

        result = resolve_viewport_unit(value, context.viewport, warning_policy=warning_policy)
        resolved.append(value if result is None else result)
    return resolved


def resolve_axis(axis: str, context: ResolveContext) -> PhysicalAxis:
    """Normalize ``axis`` using the context's computed style."""
    return normalize_axis(axis, context.computed_style)
