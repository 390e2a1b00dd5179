"""Tests for analyzer.explorer job lookup."""

import math

import pytest

from analyzer.explorer import (
    filter_jobs,
    job_skill_profile,
    list_domains,
    profile_to_radar_rows,
    search_jobs,
    sort_jobs,
    toggle_sort,
)


def _make_job(title="Job", impact=50, domain="Finance", ratio=0.5, **overrides):
    """Helper to build a job record with sensible defaults."""
    job = {
        "title": title,
        "impact": impact,
        "tasks": 100,
        "aiModels": 200,
        "aiWorkloadRatio": ratio,
        "domain": domain,
        "timeToDisruption": "3-5 years",
        "keySkillsToKeep": ["Judgment"],
    }
    job.update(overrides)
    return job


@pytest.fixture
def jobs():
    return [
        _make_job("Bookkeeper", 78, "Finance", 0.74),
        _make_job("Registered Nurse", 15, "Healthcare", 0.12),
        _make_job("Financial Analyst", 50, "Finance", 0.45),
        _make_job("data entry clerk", 95, "Administrative", 0.92),
        _make_job("Therapist", 10, "Healthcare", 0.08),
    ]


def test_search_is_case_insensitive(jobs):
    assert [j["title"] for j in search_jobs(jobs, "NURSE")] == ["Registered Nurse"]
    assert len(search_jobs(jobs, "")) == 5


def test_list_domains_first_seen_order(jobs):
    assert list_domains(jobs) == ["Finance", "Healthcare", "Administrative"]


class TestSortJobs:
    def test_impact_desc_default(self, jobs):
        assert [j["impact"] for j in sort_jobs(jobs)] == [95, 78, 50, 15, 10]

    def test_title_case_insensitive(self, jobs):
        titles = [j["title"] for j in sort_jobs(jobs, "title", "asc")]
        assert titles == ["Bookkeeper", "data entry clerk", "Financial Analyst", "Registered Nurse", "Therapist"]

    def test_workload_ratio_asc(self, jobs):
        assert [j["aiWorkloadRatio"] for j in sort_jobs(jobs, "aiWorkloadRatio", "asc")] == [
            0.08, 0.12, 0.45, 0.74, 0.92,
        ]

    def test_nan_sorts_last_both_ways(self, jobs):
        jobs.append(_make_job("Unknown", math.nan))
        assert sort_jobs(jobs, "impact", "desc")[-1]["title"] == "Unknown"
        assert sort_jobs(jobs, "impact", "asc")[-1]["title"] == "Unknown"

    def test_stable_for_ties(self):
        tied = [_make_job("A", 50), _make_job("B", 50), _make_job("C", 50)]
        assert [j["title"] for j in sort_jobs(tied, "impact", "desc")] == ["A", "B", "C"]

    def test_bad_arguments(self, jobs):
        with pytest.raises(ValueError):
            sort_jobs(jobs, "salary")
        with pytest.raises(ValueError):
            sort_jobs(jobs, "impact", "sideways")


class TestFilterJobs:
    def test_domain_and_tier(self, jobs):
        result = filter_jobs(jobs, domain="Healthcare", tier="low")
        assert [j["title"] for j in result] == ["Registered Nurse", "Therapist"]

    def test_term_and_sort(self, jobs):
        result = filter_jobs(jobs, term="fin", sort_by="title", direction="asc")
        assert [j["title"] for j in result] == ["Financial Analyst"]

    def test_high_tier(self, jobs):
        assert [j["impact"] for j in filter_jobs(jobs, tier="high")] == [95, 78]

    def test_no_match(self, jobs):
        assert filter_jobs(jobs, term="astronaut") == []


class TestToggleSort:
    def test_same_field_flips(self):
        assert toggle_sort("impact", "desc", "impact") == ("impact", "asc")
        assert toggle_sort("impact", "asc", "impact") == ("impact", "desc")

    def test_new_field_starts_descending(self):
        assert toggle_sort("impact", "asc", "title") == ("title", "desc")

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            toggle_sort("impact", "desc", "domain")


def test_skill_profile_formulas():
    profile = job_skill_profile(_make_job(impact=100))
    values = {p["skill"]: p["value"] for p in profile}
    assert values["Technical Knowledge"] == pytest.approx(30)
    assert values["Creative Problem Solving"] == pytest.approx(40)
    assert values["Emotional Intelligence"] == pytest.approx(50)
    assert values["Data Processing"] == pytest.approx(90)
    assert values["Pattern Recognition"] == pytest.approx(95)
    assert values["Decision Making"] == pytest.approx(85)

    low = {p["skill"]: p["value"] for p in job_skill_profile(_make_job(impact=0))}
    assert low["Technical Knowledge"] == 100
    assert low["Data Processing"] == 40
    assert low["Decision Making"] == 25


def test_profile_to_radar_rows():
    rows = profile_to_radar_rows(job_skill_profile(_make_job(impact=50)))
    assert len(rows) == 6
    assert rows[0] == {"skill": "Technical Knowledge", "Human Skills": pytest.approx(65)}
    assert set(rows[3]) == {"skill", "AI Capabilities"}
