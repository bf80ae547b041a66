"""Shared fixtures for cssval tests."""

import pytest

from cssval.models import ComputedStyle, UnitValue, ViewportContext


@pytest.fixture
def viewport():
    return ViewportContext(
        viewport_width=UnitValue(value=800, unit="px"),
        viewport_height=UnitValue(value=600, unit="px"),
    )


@pytest.fixture
def horizontal_style():
    return ComputedStyle(writing_mode="horizontal-tb")


@pytest.fixture
def vertical_style():
    return ComputedStyle(writing_mode="vertical-rl")


@pytest.fixture
def context_yaml():
    return """\
version: "0.1"
computed_style:
  writing_mode: vertical-rl
viewport:
  viewport_width: {value: 800, unit: px}
  viewport_height: {value: 600, unit: px}
"""
