"""Tests for the dual y-axis plan and theme palettes."""

from __future__ import annotations

import pytest

from analysis.axes import plan_axes
from analysis.theme import DARK, LIGHT, palette_for_theme
from analysis.vocabulary import MetricFamily

pytestmark = pytest.mark.unit


def test_score_axis_is_ascending_with_name_at_end() -> None:
    score_axis, _ = plan_axes()
    assert score_axis.index == 0
    assert score_axis.family is MetricFamily.magnitude
    assert score_axis.inverse is False
    assert score_axis.name_location == "end"


def test_rank_axis_is_inverted_with_name_at_start() -> None:
    """Rank 1 is best, so the rank axis is drawn inverted."""

    _, rank_axis = plan_axes()
    assert rank_axis.index == 1
    assert rank_axis.family is MetricFamily.rank
    assert rank_axis.inverse is True
    assert rank_axis.name_location == "start"


def test_theme_changes_colors_only() -> None:
    """Light and dark axes differ only in styling."""

    light = plan_axes(LIGHT)
    dark = plan_axes(DARK)
    for light_axis, dark_axis in zip(light, dark):
        assert (light_axis.index, light_axis.inverse, light_axis.name) == (
            dark_axis.index,
            dark_axis.inverse,
            dark_axis.name,
        )
    assert light[0].text_color == "#333333"
    assert dark[0].text_color == "#ffffff"
    assert dark[1].grid_color == "#2a2a2a"


def test_palette_lookup_falls_back_to_light() -> None:
    assert palette_for_theme("dark") is DARK
    assert palette_for_theme(" Dark ") is DARK
    assert palette_for_theme("sepia") is LIGHT
    assert palette_for_theme(None) is LIGHT
    assert LIGHT.series_colors == DARK.series_colors
