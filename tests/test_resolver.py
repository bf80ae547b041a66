"""Tests for whole-value resolution."""

import warnings

import pytest

from cssval.errors import InvalidAxisError, MissingContextError
from cssval.models import ComputedStyle, ResolveContext, UnitValue
from cssval.resolver import resolve_axis, resolve_components
from cssval.warning_policy import CssValWarning, WarningPolicy


@pytest.fixture
def context(viewport):
    return ResolveContext(version="0.1", viewport=viewport)


class TestResolveComponents:
    def test_mixed_value(self, context):
        assert resolve_components("auto 50vw calc(10vh + 1px) 10vmin", context) == [
            "auto",
            UnitValue(value=400, unit="px"),
            "calc(10vh + 1px)",
            UnitValue(value=60, unit="px"),
        ]

    def test_non_viewport_units_pass_through(self, context):
        assert resolve_components("10px 50% 2", context) == [
            UnitValue(value=10, unit="px"),
            UnitValue(value=50, unit="percent"),
            UnitValue(value=2, unit="number"),
        ]

    def test_without_viewport(self):
        ctx = ResolveContext(version="0.1")
        assert resolve_components("50vw", ctx) == [UnitValue(value=50, unit="vw")]

    def test_empty_value(self, context):
        assert resolve_components("   ", context) == []

    def test_unknown_unit_warns_w03(self, context):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            result = resolve_components("2em", context)
        assert result == [UnitValue(value=2, unit="em")]
        assert len(w) == 1
        assert issubclass(w[0].category, CssValWarning)
        assert w[0].message.code == "W03"

    def test_w03_suppressed(self, context):
        policy = WarningPolicy(suppress=frozenset({"W03"}))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            resolve_components("2em 3rem", context, warning_policy=policy)
        assert len(w) == 0

    def test_units_not_renormalized(self, context, monkeypatch):
        def fail(unit):
            raise AssertionError(f"normalize_unit called again for {unit!r}")

        monkeypatch.setattr("cssval.units.normalize_unit", fail)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            result = resolve_components("50VW 2EM 10px", context)
        assert result == [
            UnitValue(value=400, unit="px"),
            UnitValue(value=2, unit="em"),
            UnitValue(value=10, unit="px"),
        ]
        assert [x.message.code for x in w] == ["W03"]


class TestResolveAxis:
    def test_uses_computed_style(self):
        ctx = ResolveContext(version="0.1", computed_style=ComputedStyle(writing_mode="vertical-rl"))
        assert resolve_axis("block", ctx) == "x"
        assert resolve_axis("inline", ctx) == "y"

    def test_physical_without_style(self):
        assert resolve_axis("y", ResolveContext(version="0.1")) == "y"

    def test_logical_without_style(self):
        with pytest.raises(MissingContextError):
            resolve_axis("inline", ResolveContext(version="0.1"))

    def test_invalid(self):
        with pytest.raises(InvalidAxisError):
            resolve_axis("z", ResolveContext(version="0.1"))
