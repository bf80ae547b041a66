"""Diagnostic codes raised while splitting and resolving component values."""

from __future__ import annotations

import warnings
from dataclasses import dataclass

from cssval.errors import DiagnosticError


@dataclass(frozen=True)
class Diagnostic:
    """A registered diagnostic: stable code, slug name and one-line summary."""

    code: str
    name: str
    summary: str

    @property
    def label(self) -> str:
        return f"{self.code} {self.name}"


DIAGNOSTICS: dict[str, Diagnostic] = {
    d.code: d
    for d in (
        Diagnostic(
            "W01",
            "unbalanced-parentheses",
            "a component value ends with open or stray parentheses; it runs to end of input",
        ),
        Diagnostic(
            "W02",
            "mixed-viewport-units",
            "vmin/vmax compared width and height in different units; the width unit is reported",
        ),
        Diagnostic(
            "W03",
            "unresolved-unit",
            "a numeric value uses a unit that is neither canonical nor viewport-relative",
        ),
    )
}

KNOWN_CODES: frozenset[str] = frozenset(DIAGNOSTICS)

_CODES_BY_NAME: dict[str, str] = {d.name: d.code for d in DIAGNOSTICS.values()}


class CssValWarning(UserWarning):
    """Warning carrying the registered diagnostic that produced it."""

    def __init__(self, diagnostic: Diagnostic, detail: str) -> None:
        self.diagnostic = diagnostic
        self.code = diagnostic.code
        super().__init__(f"[{diagnostic.label}] {detail}")


@dataclass(frozen=True)
class WarningPolicy:
    """Codes to escalate to errors and codes to drop."""

    warn_as_error: frozenset[str] = frozenset()
    suppress: frozenset[str] = frozenset()


def emit_warning(code: str, detail: str, *, policy: WarningPolicy | None = None) -> None:
    """Report diagnostic ``code`` about a specific value.

    Suppressed codes are dropped and escalated codes raise ``DiagnosticError``;
    anything else is issued as a ``CssValWarning``.

    Raises:
        KeyError: ``code`` is not registered in ``DIAGNOSTICS``.
    """
    diagnostic = DIAGNOSTICS[code]
    if policy is not None:
        if code in policy.suppress:
            return
        if code in policy.warn_as_error:
            raise DiagnosticError(f"[{diagnostic.label}] {detail}")

    warnings.warn(CssValWarning(diagnostic, detail), stacklevel=3)


def resolve_code(token: str) -> str:
    """Map a W-code or diagnostic name (any case) to its W-code.

    Raises ``ValueError`` for anything not in the registry.
    """
    key = token.strip()
    if key.upper() in DIAGNOSTICS:
        return key.upper()
    if key.lower() in _CODES_BY_NAME:
        return _CODES_BY_NAME[key.lower()]
    known = ", ".join(d.label for d in DIAGNOSTICS.values())
    raise ValueError(f"Unknown warning code: {token!r} (known: {known})")


def parse_code_list(raw: str) -> frozenset[str]:
    """Parse ``"W01,mixed-viewport-units"``-style lists into W-codes."""
    return frozenset(resolve_code(token) for token in raw.split(",") if token.strip())
