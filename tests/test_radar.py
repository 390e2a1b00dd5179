"""Tests for charts.radar."""

import math

import pytest

from charts.radar import axis_angle, plot_radius, polar_point, radar_geometry, radar_rows_from_skills


@pytest.fixture
def rows():
    return [
        {"skill": "Empathy", "Human": 100, "AI": 20},
        {"skill": "Data", "Human": 50, "AI": 90},
        {"skill": "Search", "Human": None, "AI": math.nan},
    ]


def test_plot_radius():
    assert plot_radius() == 170
    assert plot_radius(300, 500) == 70


def test_axis_zero_points_up():
    x, y = polar_point(100, axis_angle(0, 4))
    assert x == pytest.approx(0, abs=1e-9)
    assert y == pytest.approx(-100)


def test_axis_quarter_points_right():
    x, y = polar_point(100, axis_angle(1, 4))
    assert x == pytest.approx(100)
    assert y == pytest.approx(0, abs=1e-9)


class TestRadarGeometry:
    def test_axes(self, rows):
        g = radar_geometry(rows, keys=["Human", "AI"], index_by="skill")
        assert [a["label"] for a in g["axes"]] == ["Empathy", "Data", "Search"]
        assert g["axes"][1]["angle"] == pytest.approx(2 * math.pi / 3)
        assert g["axes"][0]["label_position"] == pytest.approx((0, -190), abs=1e-9)

    def test_grid(self, rows):
        g = radar_geometry(rows, keys=["Human"], index_by="skill")
        assert [ring["label"] for ring in g["grid"]] == ["20", "40", "60", "80", "100"]
        assert [ring["radius"] for ring in g["grid"]] == pytest.approx([34, 68, 102, 136, 170])

    def test_series_points(self, rows):
        g = radar_geometry(rows, keys=["Human", "AI"], index_by="skill")
        human, ai = g["series"]
        assert human["key"] == "Human"
        assert [p["radius"] for p in human["points"]] == pytest.approx([170, 85, 0])
        assert [p["value"] for p in ai["points"]] == [20, 90, 0]
        assert human["path"].startswith("M")
        assert human["path"].endswith("Z")
        assert human["path"].count("L") == 2

    def test_colors_cycle(self, rows):
        g = radar_geometry(rows, keys=["Human", "AI"], index_by="skill", colors=["#111111"])
        assert [s["color"] for s in g["series"]] == ["#111111", "#111111"]
        assert [item["y"] for item in g["legend"]] == [0, 25]

    def test_max_value(self, rows):
        g = radar_geometry(rows, keys=["Human"], index_by="skill", max_value=200)
        assert g["series"][0]["points"][0]["radius"] == pytest.approx(85)
        assert g["grid"][-1]["label"] == "200"


def test_radar_rows_from_skills():
    categories = [
        {"category": "Human", "skills": [{"name": "Empathy", "value": 95}, {"name": "Search", "value": 40}]},
        {"category": "AI", "skills": [{"name": "Search", "value": 90}, {"name": "Vision", "value": 80}]},
    ]
    assert radar_rows_from_skills(categories) == [
        {"skill": "Empathy", "Human": 95},
        {"skill": "Search", "Human": 40, "AI": 90},
        {"skill": "Vision", "AI": 80},
    ]
