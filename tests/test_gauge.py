"""Tests for charts.gauge."""

import pytest

from analyzer.risk import TIER_COLORS
from charts.gauge import arc_path, circumference, dash_offset, format_percentage, gauge_geometry


def test_dash_offset_end_points():
    c = circumference(80)
    assert dash_offset(0) == c
    assert dash_offset(100) == 0


def test_dash_offset_decreasing():
    offsets = [dash_offset(p) for p in range(0, 101)]
    assert all(a > b for a, b in zip(offsets, offsets[1:]))


def test_arc_path():
    assert arc_path(50) == "M 110 30 A 80 80 0 0 1 190 110"
    assert arc_path(100) == "M 110 30 A 80 80 0 1 1 110 190"
    assert arc_path(0, size=200, radius=50).startswith("M 100 50 A 50 50 0 0 1 ")


def test_format_percentage():
    assert format_percentage(65) == "65%"
    assert format_percentage(65.0) == "65%"
    assert format_percentage(12.5) == "12.5%"


class TestGaugeGeometry:
    def test_defaults(self):
        g = gauge_geometry(65, size=200)
        assert g["circumference"] == pytest.approx(2 * 3.141592653589793 * 80)
        assert g["dash_array"] == g["circumference"]
        assert g["dash_offset"] == pytest.approx(g["circumference"] * 0.35)
        assert g["rotation"] == -90
        assert g["center"] == (100, 100)
        assert g["text"] == "65%"
        assert g["label"] == "Medium Risk"
        assert g["text_position"] == (100, 115)
        assert g["label_position"] == (100, 145)

    @pytest.mark.parametrize("value,tier", [(10, "low"), (50, "medium"), (90, "high")])
    def test_color_follows_tier(self, value, tier):
        assert gauge_geometry(value)["color"] == TIER_COLORS[tier]

    def test_color_override(self):
        assert gauge_geometry(90, color="#123456")["color"] == "#123456"

    def test_background_is_full_arc(self):
        g = gauge_geometry(30)
        assert g["background_path"] == arc_path(100)
