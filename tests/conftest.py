"""
Shared fixtures for the jobmatch test suite.

Every test runs with an isolated environment: preferences live under
tmp_path, no backend or jobs file is configured, and log files go to a
throwaway directory.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("JOBMATCH_LOG_DIR", tempfile.mkdtemp(prefix="jobmatch-logs-"))

from jobmatch.models import Job, Salary, UserPreferences  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for key in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "JOBMATCH_JOBS_FILE", "JOBMATCH_RECOMMEND_LIMIT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("JOBMATCH_PREFERENCES", str(tmp_path / "preferences.yaml"))
    yield tmp_path


@pytest.fixture
def make_job():
    """Factory for jobs with sensible defaults; override any field by keyword."""
    counter = {"n": 0}

    def _make(**overrides) -> Job:
        counter["n"] += 1
        fields = {
            "id": f"job-{counter['n']}",
            "title": "Senior Software Engineer",
            "company": "Tech Corp",
            "location": "Singapore",
            "salary": Salary(min=5000, max=8000, period="month"),
            "job_type": ["Full-time"],
            "remote": False,
            "description": "Senior software engineer position",
            "requirements": ["JavaScript", "React", "Node.js"],
            "benefits": ["Health insurance"],
            "posted_date": "2024-01-01",
        }
        fields.update(overrides)
        return Job(**fields)

    return _make


@pytest.fixture
def preferences():
    return UserPreferences(
        job_titles=["Software Engineer", "Developer"],
        city="Singapore",
        country="Singapore",
        remote_work=False,
        minimum_pay=4000,
        pay_period="month",
    )


@pytest.fixture
def ideal_job(make_job):
    return make_job(
        title="Software Engineer",
        location="Singapore",
        remote=True,
        salary=Salary(min=5000, max=6000, period="month"),
    )


@pytest.fixture
def ideal_preferences():
    return UserPreferences(
        job_titles=["Software Engineer"],
        city="Singapore",
        remote_work=True,
        minimum_pay=4000,
        pay_period="month",
    )
