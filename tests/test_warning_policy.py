"""Tests for the diagnostic registry and policy handling."""

from __future__ import annotations

import warnings

import pytest

from cssval.errors import DiagnosticError
from cssval.warning_policy import (
    DIAGNOSTICS,
    KNOWN_CODES,
    CssValWarning,
    WarningPolicy,
    emit_warning,
    parse_code_list,
    resolve_code,
)


class TestRegistry:
    def test_codes_and_names(self):
        assert {code: d.name for code, d in DIAGNOSTICS.items()} == {
            "W01": "unbalanced-parentheses",
            "W02": "mixed-viewport-units",
            "W03": "unresolved-unit",
        }

    def test_known_codes_follow_registry(self):
        assert KNOWN_CODES == frozenset(DIAGNOSTICS)

    def test_label(self):
        assert DIAGNOSTICS["W02"].label == "W02 mixed-viewport-units"


class TestResolveCode:
    @pytest.mark.parametrize(
        "token, code",
        [
            ("W01", "W01"),
            ("w03", "W03"),
            ("unbalanced-parentheses", "W01"),
            (" Mixed-Viewport-Units ", "W02"),
        ],
    )
    def test_code_or_name(self, token, code):
        assert resolve_code(token) == code

    def test_unknown_lists_registry(self):
        with pytest.raises(ValueError, match="Unknown warning code.*W99.*W03 unresolved-unit"):
            resolve_code("W99")


class TestParseCodeList:
    def test_mixed_codes_and_names(self):
        assert parse_code_list("W01, unresolved-unit") == frozenset({"W01", "W03"})

    def test_empty_entries_skipped(self):
        assert parse_code_list(" ,W02,,") == frozenset({"W02"})

    def test_empty_string(self):
        assert parse_code_list("") == frozenset()

    def test_unknown_entry_rejected(self):
        with pytest.raises(ValueError, match="'vmin-rounding'"):
            parse_code_list("W01,vmin-rounding")


class TestEmitWarning:
    def test_warning_carries_diagnostic(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            emit_warning("W03", "Unit 'em' in '2em' is not resolved")
        assert len(w) == 1
        assert issubclass(w[0].category, CssValWarning)
        assert w[0].message.diagnostic is DIAGNOSTICS["W03"]
        assert str(w[0].message) == "[W03 unresolved-unit] Unit 'em' in '2em' is not resolved"

    def test_suppressed_code_dropped(self):
        policy = WarningPolicy(suppress=frozenset({"W01"}))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            emit_warning("W01", "calc(1px", policy=policy)
        assert len(w) == 0

    def test_escalated_code_raises_with_label(self):
        policy = WarningPolicy(warn_as_error=parse_code_list("mixed-viewport-units"))
        with pytest.raises(DiagnosticError, match=r"\[W02 mixed-viewport-units\] vmin"):
            emit_warning("W02", "vmin compared px and number", policy=policy)

    def test_other_codes_unaffected_by_policy(self):
        policy = WarningPolicy(suppress=frozenset({"W02"}), warn_as_error=frozenset({"W03"}))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            emit_warning("W01", "calc(1px", policy=policy)
        assert [x.message.code for x in w] == ["W01"]

    def test_unregistered_code(self):
        with pytest.raises(KeyError):
            emit_warning("W42", "nothing")
