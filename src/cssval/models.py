"""Pydantic v2 models for unit values and resolution context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cssval.units import CANONICAL_UNITS, normalize_unit

WRITING_MODES: frozenset[str] = frozenset(
    {
        "horizontal-tb",
        "vertical-rl",
        "vertical-lr",
        "sideways-rl",
        "sideways-lr",
    }
)


class UnitValue(BaseModel):
    """A numeric magnitude paired with a unit identifier."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    value: float
    unit: str

    @field_validator("unit")
    @classmethod
    def _normalize_unit(cls, v: str) -> str:
        v = normalize_unit(v)
        if not v:
            raise ValueError("unit must be a non-empty identifier")
        return v


class ViewportContext(BaseModel):
    """Viewport dimensions, each already expressed in a canonical unit."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    viewport_width: UnitValue | None = None
    viewport_height: UnitValue | None = None

    @field_validator("viewport_width", "viewport_height")
    @classmethod
    def _check_canonical(cls, v: UnitValue | None) -> UnitValue | None:
        if v is not None and v.unit not in CANONICAL_UNITS:
            raise ValueError(
                f"viewport dimension must use a canonical unit, got {v.unit!r} "
                f"(canonical: {sorted(CANONICAL_UNITS)})"
            )
        return v

    @property
    def is_complete(self) -> bool:
        return self.viewport_width is not None and self.viewport_height is not None


class ComputedStyle(BaseModel):
    """The subset of computed style needed to map logical axes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    writing_mode: str = "horizontal-tb"

    @field_validator("writing_mode")
    @classmethod
    def _check_writing_mode(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in WRITING_MODES:
            raise ValueError(f"Unknown writing mode {v!r} (known: {sorted(WRITING_MODES)})")
        return v


class ResolveContext(BaseModel):
    """Top-level context document consumed by the resolver and the CLI."""

    model_config = ConfigDict(extra="forbid")

    version: str
    computed_style: ComputedStyle | None = None
    viewport: ViewportContext = Field(default_factory=ViewportContext)
