"""Tests for analyzer.risk: one tier rule shared by every consumer."""

import math

import pytest

from analyzer.risk import (
    TIER_COLORS,
    explanation,
    key_factors,
    matches_tier,
    recommendation,
    risk_color,
    risk_label,
    risk_tier,
)
from charts.gauge import gauge_geometry


def _expected_tier(v):
    if v < 30:
        return "low"
    if v < 70:
        return "medium"
    return "high"


@pytest.mark.parametrize("impact,tier", [
    (0, "low"), (29, "low"), (29.9, "low"),
    (30, "medium"), (69, "medium"), (69.99, "medium"),
    (70, "high"), (100, "high"),
])
def test_thresholds(impact, tier):
    assert risk_tier(impact) == tier


def test_gauge_and_explorer_agree_for_every_impact():
    colors_to_tier = {color: tier for tier, color in TIER_COLORS.items()}
    for tenth in range(0, 1001):
        v = tenth / 10
        expected = _expected_tier(v)
        gauge = gauge_geometry(v)
        assert colors_to_tier[gauge["color"]] == expected
        assert gauge["label"] == risk_label(v)
        assert matches_tier(v, expected)
        assert risk_tier(v) == expected


def test_nan_is_high_everywhere():
    assert risk_tier(math.nan) == "high"
    assert risk_color(math.nan) == TIER_COLORS["high"]
    assert matches_tier(math.nan, "high")
    assert not matches_tier(math.nan, "low")


def test_texts_follow_tier():
    assert risk_label(10) == "Low Risk"
    assert risk_label(50) == "Medium Risk"
    assert risk_label(95) == "High Risk"
    assert "Low automation risk" in explanation(10)
    assert "High automation risk" in explanation(95)
    assert key_factors(95)[0] == "Tasks involve routine, predictable processes"
    assert key_factors(50)[2] == "AI will augment rather than replace"
    assert recommendation(10).startswith("Continue developing expertise")


def test_key_factors_returns_copy():
    factors = key_factors(10)
    factors.append("extra")
    assert "extra" not in key_factors(10)


def test_matches_tier():
    assert matches_tier(10, "all")
    assert matches_tier(10, "low")
    assert not matches_tier(10, "high")
    with pytest.raises(ValueError):
        matches_tier(10, "extreme")
