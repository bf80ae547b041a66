"""Click CLI entry point for cssval."""

from __future__ import annotations

import json
from pathlib import Path

import click

from cssval import __version__
from cssval.context import build_context, load_context
from cssval.errors import CssValError
from cssval.models import WRITING_MODES, ResolveContext, UnitValue
from cssval.resolver import resolve_axis, resolve_components
from cssval.tokenizer import split_into_component_values
from cssval.values import format_unit_value
from cssval.warning_policy import WarningPolicy, parse_code_list


def _build_warning_policy(
    warn_as_error: str | None, suppress_warning: str | None
) -> WarningPolicy | None:
    """Parse CLI warning options into a WarningPolicy, or None if unset."""
    if warn_as_error is None and suppress_warning is None:
        return None
    try:
        wae = parse_code_list(warn_as_error) if warn_as_error else frozenset()
        sup = parse_code_list(suppress_warning) if suppress_warning else frozenset()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return WarningPolicy(warn_as_error=wae, suppress=sup)


def _load_cli_context(
    context_file: Path | None,
    writing_mode: str | None = None,
    viewport_width: str | None = None,
    viewport_height: str | None = None,
) -> ResolveContext:
    base = load_context(context_file) if context_file is not None else None
    return build_context(
        writing_mode=writing_mode,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        base=base,
    )


def _component_to_json(component: str | UnitValue) -> object:
    if isinstance(component, UnitValue):
        return component.model_dump()
    return component


def _component_to_text(component: str | UnitValue) -> str:
    if isinstance(component, UnitValue):
        return format_unit_value(component)
    return component


_context_option = click.option(
    "--context",
    "context_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML context file with computed style and viewport dimensions.",
)

_format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)


@click.group()
@click.version_option(version=__version__, prog_name="cssval")
def main() -> None:
    """cssval: CSS component-value tokenizing and unit resolution."""


@main.command()
@click.argument("value")
@_format_option
def split(value: str, output_format: str = "text") -> None:
    """Split VALUE into top-level component values."""
    try:
        tokens = split_into_component_values(value)
    except CssValError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(tokens))
    else:
        for token in tokens:
            click.echo(token)


@main.command()
@click.argument("axis_name", metavar="AXIS")
@_context_option
@click.option(
    "--writing-mode",
    type=click.Choice(sorted(WRITING_MODES)),
    default=None,
    help="Writing mode used for logical axes; overrides the context file.",
)
def axis(axis_name: str, context_file: Path | None, writing_mode: str | None = None) -> None:
    """Normalize AXIS (x, y, block or inline) to a physical axis."""
    try:
        context = _load_cli_context(context_file, writing_mode=writing_mode)
        click.echo(resolve_axis(axis_name, context))
    except CssValError as e:
        raise click.ClickException(str(e))


@main.command()
@click.argument("value")
@_context_option
@click.option(
    "--viewport-width",
    type=str,
    default=None,
    help="Viewport width, e.g. 800px. Bare numbers are pixels.",
)
@click.option(
    "--viewport-height",
    type=str,
    default=None,
    help="Viewport height, e.g. 600px. Bare numbers are pixels.",
)
@_format_option
@click.option(
    "--warn-as-error",
    "warn_as_error",
    type=str,
    default=None,
    help="Comma-separated codes or names to treat as errors (e.g. W01,mixed-viewport-units).",
)
@click.option(
    "--suppress-warning",
    "suppress_warning",
    type=str,
    default=None,
    help="Comma-separated codes or names to suppress (e.g. unresolved-unit).",
)
def resolve(
    value: str,
    context_file: Path | None,
    viewport_width: str | None = None,
    viewport_height: str | None = None,
    output_format: str = "text",
    warn_as_error: str | None = None,
    suppress_warning: str | None = None,
) -> None:
    """Resolve viewport-relative units in VALUE."""
    warning_policy = _build_warning_policy(warn_as_error, suppress_warning)

    try:
        context = _load_cli_context(
            context_file,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
        )
        components = resolve_components(value, context, warning_policy=warning_policy)
    except CssValError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps([_component_to_json(c) for c in components]))
    else:
        click.echo(" ".join(_component_to_text(c) for c in components))
