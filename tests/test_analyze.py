"""Tests for analyzer.analyze pandas summaries."""

import math

import pandas as pd
import pytest

from analyzer.analyze import domain_summary, generate_summary, jobs_to_dataframe, tier_distribution


def _make_job(title, impact, domain, ratio=0.5, skills=None):
    return {
        "title": title,
        "impact": impact,
        "aiWorkloadRatio": ratio,
        "domain": domain,
        "keySkillsToKeep": skills if skills is not None else ["A", "B"],
    }


@pytest.fixture
def df():
    return jobs_to_dataframe([
        _make_job("Bookkeeper", 78, "Finance", 0.74),
        _make_job("Analyst", 50, "Finance", 0.46),
        _make_job("Nurse", 15, "Healthcare", 0.12, skills=["Empathy"]),
        _make_job("Therapist", 10, "Healthcare", 0.08, skills=[]),
        _make_job("Clerk", 95, "Administrative", 0.92),
    ])


def test_jobs_to_dataframe_adds_columns(df):
    assert list(df["risk_tier"]) == ["high", "medium", "low", "low", "high"]
    assert list(df["skill_count"]) == [2, 2, 1, 0, 2]


def test_jobs_to_dataframe_empty():
    assert jobs_to_dataframe([]).empty


def test_domain_summary(df):
    summary = domain_summary(df)
    assert list(summary["domain"]) == ["Administrative", "Finance", "Healthcare"]
    finance = summary[summary["domain"] == "Finance"].iloc[0]
    assert finance["jobs"] == 2
    assert finance["mean_impact"] == pytest.approx(64)
    assert finance["mean_workload_ratio"] == pytest.approx(0.6)


def test_domain_summary_empty():
    summary = domain_summary(pd.DataFrame())
    assert summary.empty
    assert list(summary.columns) == ["domain", "jobs", "mean_impact", "mean_workload_ratio"]


def test_tier_distribution_lists_every_tier(df):
    dist = tier_distribution(df[df["risk_tier"] != "medium"])
    assert dist.to_dict("records") == [
        {"risk_tier": "low", "count": 2},
        {"risk_tier": "medium", "count": 0},
        {"risk_tier": "high", "count": 2},
    ]


def test_nan_impact_counts_as_high():
    df = jobs_to_dataframe([_make_job("Unknown", math.nan, "X")])
    assert list(df["risk_tier"]) == ["high"]


def test_generate_summary(df):
    summary = generate_summary(df)
    assert summary["total_jobs"] == 5
    assert summary["unique_domains"] == 3
    assert summary["mean_impact"] == pytest.approx(49.6)
    assert summary["domains"][0]["domain"] == "Administrative"
