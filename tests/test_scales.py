"""Tests for charts.scales."""

import math

import pytest

from charts.scales import (
    BandScale,
    ColorScale,
    LinearScale,
    OrdinalScale,
    darken,
    interpolate_color,
    parse_hex,
    tick_increment,
    ticks,
    to_hex,
)


class TestTicks:
    def test_round_steps(self):
        assert ticks(0, 1, 5) == pytest.approx([0, 0.2, 0.4, 0.6, 0.8, 1.0])
        assert ticks(0, 100, 5) == [0, 20, 40, 60, 80, 100]
        assert ticks(0, 87, 10) == [0, 10, 20, 30, 40, 50, 60, 70, 80]

    def test_reversed(self):
        assert ticks(100, 0, 5) == [100, 80, 60, 40, 20, 0]

    def test_degenerate(self):
        assert ticks(5, 5) == [5]
        assert ticks(0, 10, 0) == []

    def test_tick_increment(self):
        assert tick_increment(0, 100, 10) == 10
        assert tick_increment(0, 1, 10) == -10


class TestLinearScale:
    def test_maps_and_inverts(self):
        scale = LinearScale((0, 100), (0, 500))
        assert scale(50) == 250
        assert scale.invert(250) == 50

    def test_inverted_range(self):
        scale = LinearScale((0, 100), (300, 0))
        assert scale(0) == 300
        assert scale(100) == 0

    def test_nice(self):
        assert LinearScale((0, 87)).nice().domain == (0, 90)
        assert LinearScale((0, 87)).nice(5).domain == (0, 100)
        assert LinearScale((2023, 2030)).nice().domain == (2023, 2030)

    def test_clamp(self):
        scale = LinearScale((0, 10), (0, 100), clamp=True)
        assert scale(20) == 100
        assert scale(-5) == 0
        assert math.isnan(scale(math.nan))

    def test_degenerate_domain_maps_to_middle(self):
        assert LinearScale((5, 5), (0, 100))(5) == 50


class TestBandScale:
    def test_step_and_bandwidth(self):
        scale = BandScale(["a", "b", "c", "d"], (0, 400), padding=0.1)
        assert scale.step == 100
        assert scale.bandwidth == pytest.approx(90)
        assert scale("c") == 200
        assert scale.center("a") == pytest.approx(45)

    def test_duplicates_collapse_in_first_seen_order(self):
        scale = BandScale(["b", "a", "b"], (0, 100))
        assert scale.domain == ["b", "a"]

    def test_unknown_category(self):
        scale = BandScale(["a"], (0, 100))
        assert scale("z") is None
        assert scale.center("z") is None


def test_ordinal_scale_cycles():
    scale = OrdinalScale(["a", "b"], ["red", "blue"])
    assert scale("a") == "red"
    assert scale("b") == "blue"
    assert scale("c") == "red"
    assert scale.domain == ["a", "b", "c"]


class TestColors:
    def test_parse_and_format(self):
        assert parse_hex("#fff") == (255, 255, 255)
        assert parse_hex("#9381FF") == (147, 129, 255)
        assert to_hex((147, 129, 255)) == "#9381ff"
        with pytest.raises(ValueError):
            parse_hex("#12")

    def test_interpolate(self):
        assert interpolate_color("#000000", "#ffffff", 0) == "#000000"
        assert interpolate_color("#000000", "#ffffff", 1) == "#ffffff"
        assert interpolate_color("#000000", "#ffffff", 0.5) == "#808080"

    def test_darken(self):
        assert darken("#646464", 1) == "#464646"
        assert darken("#9381FF", 0) == "#9381ff"

    def test_color_scale_clamps(self):
        scale = ColorScale((10, 90), ["#000000", "#ffffff"])
        assert scale(10) == "#000000"
        assert scale(90) == "#ffffff"
        assert scale(200) == "#ffffff"
        assert scale(math.nan) is None
