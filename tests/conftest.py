"""Shared test fixtures for the ai-job-impact test suite."""

import pytest

import config


@pytest.fixture(autouse=True)
def local_source_root(monkeypatch):
    """Ensure tests always read the CSVs shipped in data/, never a remote root."""
    monkeypatch.delenv("JOBVIZ_SOURCE_ROOT", raising=False)
    monkeypatch.setattr(config, "SOURCE_ROOT", str(config.BASE_DIR))


@pytest.fixture
def sample_csv_text():
    """Job CSV text with a quoted delimiter in the first title."""
    return 'title,impact,domain\n"Data Entry, Clerk",85,Administrative\nNurse,15,Healthcare\n'


@pytest.fixture
def data_root(tmp_path):
    """A source root with an empty data/ directory to write resources into."""
    (tmp_path / "data").mkdir()
    return tmp_path


@pytest.fixture
def sample_job():
    """Return a sample job record for testing."""
    return {
        "title": "Data Entry Clerk",
        "impact": 95,
        "tasks": 312,
        "aiModels": 1402,
        "aiWorkloadRatio": 0.92,
        "domain": "Administrative",
        "automationLevel": "High",
        "augmentationPotential": "Low",
        "timeToDisruption": "1-2 years",
        "keySkillsToKeep": ["Attention to detail", "Process improvement", "Data validation"],
    }
