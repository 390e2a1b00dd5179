"""Tests for dashboard.html_report."""

import asyncio

import config
from csvdata.loader import load_all
from dashboard.html_report import build_charts, generate_report


def test_build_charts_sections():
    data = asyncio.run(load_all())
    titles = [title for title, _ in build_charts(data)]
    assert titles == [
        "Automation by Sector",
        "Domain & Skill Impact",
        "Job Automation Risk Landscape",
        "Human Skills vs AI Capabilities",
        "Future Projections",
        "AI Adoption Timeline",
        "Generative AI Impact",
        "Reskilling Need",
    ]


def test_build_charts_skips_missing_resources():
    data = {"jobs": [], "augmented_jobs": [], "sectors": [], "skills": [], "timeline": []}
    titles = [title for title, _ in build_charts(data)]
    assert "Automation by Sector" not in titles
    assert "AI Adoption Timeline" not in titles
    assert "Future Projections" in titles


def test_generate_report_writes_file(tmp_path):
    data = asyncio.run(load_all())
    output = tmp_path / "out" / "report.html"
    path = generate_report(data, output=output)
    assert path == output
    html = output.read_text(encoding="utf-8")
    assert "<title>How Fast Will AI Take Your Job?</title>" in html
    assert "Most Exposed Jobs" in html
    assert "Data Entry Clerk" in html
    assert "Prompt Engineer" in html


def test_generate_report_default_location(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "REPORTS_DIR", tmp_path / "reports")
    data = asyncio.run(load_all())
    path = generate_report(data)
    assert path.parent == tmp_path / "reports"
    assert path.name.startswith("report_")


def test_generate_report_without_jobs(tmp_path):
    data = {"jobs": [], "augmented_jobs": [], "sectors": [], "skills": [], "timeline": []}
    assert generate_report(data, output=tmp_path / "r.html") is None
    assert not (tmp_path / "r.html").exists()
