"""Job sources: sample data, local files and the hosted backend."""
import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from jobmatch.filters import JobFilters, apply_filters
from jobmatch.sources import FileSource, MockSource, SupabaseSource, get_sources
from jobmatch.sources.supabase import build_params


def _response(status=200, payload=None):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload if payload is not None else []
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error", response=resp)
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def no_sleep():
    with patch("jobmatch.retry.time.sleep") as sleep:
        yield sleep


class TestMockSource:
    def test_serves_sample_postings(self):
        jobs = MockSource().fetch()

        assert len(jobs) == 8
        assert len({j.id for j in jobs}) == 8
        assert any(j.remote for j in jobs)
        assert any(j.salary is None for j in jobs)


class TestFileSource:
    def test_reads_json_list(self, tmp_path):
        path = tmp_path / "jobs.json"
        path.write_text(json.dumps([
            {"id": "1", "title": "Developer", "company": "A", "location": "Singapore"},
            {"id": "2", "title": "Designer", "company": "B", "location": "Remote", "remote": True},
        ]), encoding="utf-8")

        jobs = FileSource(path).fetch()

        assert [j.title for j in jobs] == ["Developer", "Designer"]
        assert jobs[1].remote is True

    def test_reads_yaml_with_jobs_key(self, tmp_path):
        path = tmp_path / "jobs.yaml"
        path.write_text(
            "jobs:\n"
            "  - id: '1'\n"
            "    title: Data Scientist\n"
            "    company: Analytics Pro\n"
            "    location: Singapore\n"
            "    posted_date: 2025-01-18\n",
            encoding="utf-8",
        )

        jobs = FileSource(path).fetch()

        assert len(jobs) == 1
        assert jobs[0].posted_date == "2025-01-18"
        assert jobs[0].posted_at is not None

    def test_skips_bad_entries(self, tmp_path):
        path = tmp_path / "jobs.json"
        path.write_text(json.dumps([
            "not a job",
            {"id": "2", "title": "Ok", "company": "B", "location": "X", "salary": {"min": "lots"}},
            {"id": "3", "title": "Fine", "company": "C", "location": "Y"},
        ]), encoding="utf-8")

        assert [j.id for j in FileSource(path).fetch()] == ["3"]

    def test_missing_or_broken_file_yields_nothing(self, tmp_path):
        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")

        assert FileSource(tmp_path / "missing.json").fetch() == []
        assert FileSource(broken).fetch() == []


class TestSupabaseSource:
    ROW = {
        "id": "abc",
        "title": "Backend Developer",
        "company_name": "StartupXYZ",
        "location": "Singapore",
        "salary_min": 5500,
        "salary_max": 8500,
        "salary_period": "month",
        "job_type": ["Full-time"],
        "remote_allowed": False,
        "posted_date": "2025-01-19T00:00:00Z",
        "status": "active",
    }

    def test_fetch_maps_rows(self, no_sleep):
        source = SupabaseSource("https://example.supabase.co/", "anon-key")
        with patch("jobmatch.sources.supabase.requests.get", return_value=_response(payload=[self.ROW])) as get:
            jobs = source.fetch(JobFilters(query="backend"))

        assert [j.company for j in jobs] == ["StartupXYZ"]
        assert jobs[0].salary.max == 8500
        url = get.call_args.args[0]
        kwargs = get.call_args.kwargs
        assert url == "https://example.supabase.co/rest/v1/job_postings"
        assert kwargs["headers"]["apikey"] == "anon-key"
        assert kwargs["params"]["status"] == "eq.active"
        assert kwargs["timeout"] == 15.0

    def test_retries_transient_errors(self, no_sleep):
        source = SupabaseSource("https://example.supabase.co", "k")
        responses = [_response(503), _response(payload=[self.ROW])]
        with patch("jobmatch.sources.supabase.requests.get", side_effect=responses) as get:
            jobs = source.fetch()

        assert len(jobs) == 1
        assert get.call_count == 2
        assert no_sleep.call_count == 1

    def test_client_errors_fail_fast_to_empty(self, no_sleep):
        source = SupabaseSource("https://example.supabase.co", "bad-key")
        with patch("jobmatch.sources.supabase.requests.get", return_value=_response(401)) as get:
            assert source.fetch() == []

        assert get.call_count == 1
        no_sleep.assert_not_called()

    def test_connection_failure_gives_up_after_three_attempts(self, no_sleep):
        source = SupabaseSource("https://example.supabase.co", "k")
        with patch(
            "jobmatch.sources.supabase.requests.get",
            side_effect=requests.ConnectionError("down"),
        ) as get:
            assert source.fetch() == []

        assert get.call_count == 3

    def test_unexpected_payload_is_empty(self, no_sleep):
        source = SupabaseSource("https://example.supabase.co", "k")
        with patch("jobmatch.sources.supabase.requests.get", return_value=_response(payload={"message": "?"})):
            assert source.fetch() == []


class TestBuildParams:
    def test_defaults(self):
        params = build_params(None)

        assert params == {
            "select": "*",
            "status": "eq.active",
            "order": "posted_date.desc",
            "limit": "100",
        }

    def test_pushes_filters(self):
        params = build_params(JobFilters(query="react, node", location="Jurong", remote=True, company="Acme"))

        assert params["or"] == (
            "(title.ilike.*react  node*,company_name.ilike.*react  node*,description.ilike.*react  node*)"
        )
        assert params["location"] == "ilike.*Jurong*"
        assert params["remote_allowed"] == "eq.true"
        assert params["company_name"] == "ilike.*Acme*"

    def test_query_searches_same_fields_as_local_filter(self, make_job):
        job = make_job(title="Chef", company="Acme Kitchens", description="Cook meals")
        filters = JobFilters(query="acme")

        assert apply_filters([job], filters) == [job]
        assert "company_name.ilike.*acme*" in build_params(filters)["or"]

    def test_home_market_location_not_sent(self):
        assert "location" not in build_params(JobFilters(location="Singapore"))


class TestGetSources:
    def test_falls_back_to_mock(self):
        sources = get_sources(lambda key: "")

        assert [type(s) for s in sources] == [MockSource]

    def test_configured_sources(self, tmp_path):
        env = {
            "JOBMATCH_JOBS_FILE": str(tmp_path / "jobs.json"),
            "SUPABASE_URL": "https://example.supabase.co",
            "SUPABASE_ANON_KEY": "k",
        }

        sources = get_sources(lambda key: env.get(key, ""))

        assert [type(s) for s in sources] == [FileSource, SupabaseSource]
