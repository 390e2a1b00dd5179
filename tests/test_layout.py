"""Tests for charts.layout: responsive sizing and the geometry dispatcher."""

import pytest

from charts.layout import CHART_KINDS, compute_geometry, responsive_size
from charts.radar import radar_rows_from_skills
from dashboard import page_data


class TestResponsiveSize:
    def test_bubble_caps_height(self):
        assert responsive_size("bubble", 400) == (400, 320)
        assert responsive_size("bubble", 1000) == (1000, 500)

    def test_heatmap_and_trend_keep_aspect(self):
        assert responsive_size("heatmap", 300) == (300, 250)
        assert responsive_size("trend", 350) == (350, 200)
        assert responsive_size("trend", 700, height=450) == (700, 450)

    def test_bar_keeps_height(self):
        assert responsive_size("bar", 800) == (800, 300)

    def test_fixed_size_kinds(self):
        assert responsive_size("radar", 900) == (500, 500)
        assert responsive_size("gauge", 900, width=200) == (200, 220)


class TestComputeGeometry:
    def test_bubble(self):
        g = compute_geometry("bubble", page_data.BUBBLE_DATA, 400)
        assert g["width"] == 400
        assert g["height"] == 320

    def test_trend_recomputes_per_width(self):
        narrow = compute_geometry("trend", page_data.FUTURE_PROJECTIONS, 350)
        wide = compute_geometry("trend", page_data.FUTURE_PROJECTIONS, 700)
        assert narrow["width"] == 350
        assert wide["inner_width"] > narrow["inner_width"]

    def test_gauge(self):
        g = compute_geometry("gauge", 65, 900, width=200)
        assert g["size"] == 200
        assert g["text"] == "65%"

    def test_radar_options(self):
        categories = [{"category": "Human", "skills": [{"name": "Empathy", "value": 90}]}]
        g = compute_geometry("radar", radar_rows_from_skills(categories), 600, keys=["Human"], index_by="skill")
        assert g["series"][0]["key"] == "Human"

    def test_every_kind_dispatches(self):
        inputs = {
            "bar": [{"label": "A", "value": 10}],
            "bubble": page_data.BUBBLE_DATA,
            "gauge": 40,
            "heatmap": page_data.DOMAIN_SKILLS_HEATMAP,
            "isotype": 50,
            "radar": [{"skill": "x", "A": 10}],
            "timeline": [{"year": 2023, "title": "t", "description": "d"}],
            "trend": page_data.FUTURE_PROJECTIONS,
        }
        options = {"radar": {"keys": ["A"], "index_by": "skill"}}
        for kind in CHART_KINDS:
            assert compute_geometry(kind, inputs[kind], 600, **options.get(kind, {}))

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            compute_geometry("pie", [], 600)
