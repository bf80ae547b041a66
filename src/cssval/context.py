"""YAML loading and version checking for resolution context documents."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from cssval.errors import ParseError
from cssval.models import ComputedStyle, ResolveContext, UnitValue, ViewportContext
from cssval.units import VIEWPORT_UNITS
from cssval.values import parse_unit_value

SUPPORTED_VERSION = (0, 1)


def _make_yaml() -> YAML:
    """Create a ruamel.yaml safe loader that errors on duplicate keys."""
    yml = YAML(typ="safe")
    yml.allow_duplicate_keys = False
    return yml


def _read_source_text(source: str | Path) -> str:
    """Read context YAML from a path or treat the input as raw YAML text."""
    if isinstance(source, Path):
        try:
            return source.read_text(encoding="utf-8")
        except OSError as e:
            raise ParseError(f"Cannot read file: {e}") from e
    return source


def load_context(source: str | Path) -> ResolveContext:
    """Load a resolution context from a YAML string or file path.

    Args:
        source: YAML string or path to a context file.

    Returns:
        Schema-validated ResolveContext.

    Raises:
        ParseError: On YAML syntax errors, schema violations, or version mismatches.
    """
    text = _read_source_text(source)
    try:
        data = _make_yaml().load(text)
    except YAMLError as e:
        raise ParseError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("Top-level YAML value must be a mapping")

    version = data.get("version")
    if version is None:
        raise ParseError("Missing required field: version")
    data["version"] = str(version)
    _check_version(data["version"])

    try:
        return ResolveContext(**data)
    except PydanticValidationError as e:
        raise ParseError(f"Schema validation failed:\n{e}") from e


def parse_dimension(raw: str) -> UnitValue:
    """Parse a viewport dimension given on the command line, e.g. ``800px``.

    Bare numbers are taken as pixels.
    """
    value = parse_unit_value(raw)
    if value.unit == "number":
        return UnitValue(value=value.value, unit="px")
    if value.unit in VIEWPORT_UNITS:
        raise ParseError(f"Viewport dimension cannot itself be viewport-relative: {raw!r}")
    return value


def build_context(
    *,
    writing_mode: str | None = None,
    viewport_width: str | None = None,
    viewport_height: str | None = None,
    base: ResolveContext | None = None,
) -> ResolveContext:
    """Overlay explicitly given settings on an optional loaded context."""
    if base is None:
        base = ResolveContext(version="{}.{}".format(*SUPPORTED_VERSION))

    computed_style = base.computed_style
    viewport = base.viewport
    try:
        if writing_mode is not None:
            computed_style = ComputedStyle(writing_mode=writing_mode)
        if viewport_width is not None or viewport_height is not None:
            viewport = ViewportContext(
                viewport_width=(
                    parse_dimension(viewport_width)
                    if viewport_width is not None
                    else viewport.viewport_width
                ),
                viewport_height=(
                    parse_dimension(viewport_height)
                    if viewport_height is not None
                    else viewport.viewport_height
                ),
            )
    except PydanticValidationError as e:
        raise ParseError(f"Invalid context setting:\n{e}") from e

    return base.model_copy(update={"computed_style": computed_style, "viewport": viewport})


def _check_version(version: str) -> None:
    """Validate version string compatibility."""
    parts = version.split(".")
    if len(parts) != 2:
        raise ParseError(f"Invalid version format: {version!r}")

    try:
        major = int(parts[0])
        minor = int(parts[1])
    except ValueError:
        raise ParseError(f"Invalid version format: {version!r}")

    if (major, minor) > SUPPORTED_VERSION:
        raise ParseError(
            f"Unsupported version: {version!r} (latest supported is "
            "{}.{})".format(*SUPPORTED_VERSION)
        )
