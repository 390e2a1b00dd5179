"""Tests for charts.heatmap."""

import math

import pytest

from charts.heatmap import MARGIN, heatmap_geometry, text_color, value_extent
from charts.theme import THEME


@pytest.fixture
def cells():
    return [
        {"x": "Finance", "y": "Data", "value": 10, "tooltip": "low"},
        {"x": "Retail", "y": "Data", "value": 20},
        {"x": "Finance", "y": "Strategy", "value": 30},
        {"x": "Retail", "y": "Strategy", "value": 90},
    ]


def test_value_extent():
    assert value_extent([30, 10, 90]) == (10, 90)
    assert value_extent([math.nan, 5]) == (5, 5)
    lo, hi = value_extent([])
    assert math.isnan(lo) and math.isnan(hi)


def test_text_color_switches_above_midpoint():
    assert text_color(90, (10, 90)) == THEME["heatmap"]["light_text"]
    assert text_color(50, (10, 90)) == THEME["heatmap"]["dark_text"]
    assert text_color(51, (10, 90)) == THEME["heatmap"]["light_text"]


class TestHeatmapGeometry:
    def test_bands(self, cells):
        g = heatmap_geometry(cells, width=600, height=500)
        assert g["inner_width"] == 600 - MARGIN["left"] - MARGIN["right"]
        assert g["inner_height"] == 500 - MARGIN["top"] - MARGIN["bottom"]
        assert g["x_categories"] == ["Finance", "Retail"]
        assert g["y_categories"] == ["Data", "Strategy"]
        retail = g["cells"][1]
        assert retail["x"] == 240
        assert retail["width"] == pytest.approx(216)
        assert retail["text_position"] == pytest.approx((240 + 108, 85.5))

    def test_colors_span_extent(self, cells):
        g = heatmap_geometry(cells, color_scheme=["#000000", "#ffffff"])
        assert g["extent"] == (10, 90)
        assert g["cells"][0]["fill"] == "#000000"
        assert g["cells"][3]["fill"] == "#ffffff"
        assert g["cells"][3]["text_color"] == THEME["heatmap"]["light_text"]
        assert g["cells"][0]["text_color"] == THEME["heatmap"]["dark_text"]

    def test_text_and_tooltip(self, cells):
        g = heatmap_geometry(cells)
        assert g["cells"][0]["text"] == "10%"
        assert g["cells"][0]["tooltip"] == "low"
        assert g["cells"][1]["tooltip"] is None

    def test_legend(self, cells):
        legend = heatmap_geometry(cells, width=600)["legend"]
        assert legend["x"] == 600 - 50 - 120
        assert legend["y"] == 20
        assert legend["title"] == "Automation Risk (%)"
        assert [label for _, _, label in legend["ticks"]] == ["20%", "40%", "60%", "80%"]

    def test_empty(self):
        g = heatmap_geometry([])
        assert g["cells"] == []
        assert g["legend"]["ticks"] == []
