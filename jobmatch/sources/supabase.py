"""Active job postings from the hosted backend's REST interface."""
from __future__ import annotations

import requests

from jobmatch.filters import DEFAULT_LOCATION, JobFilters
from jobmatch.log import get_logger
from jobmatch.models import Job
from jobmatch.retry import retry
from jobmatch.sources.base import JobSource

log = get_logger(__name__)

TABLE = "job_postings"
MAX_ROWS = 100


def _ilike(value: str) -> str:
    # PostgREST wildcards; commas and parens would break an or=() group
    cleaned = value.strip().replace(",", " ").replace("(", " ").replace(")", " ")
    return f"*{cleaned}*"


def build_params(filters: JobFilters | None) -> dict[str, str]:
    """Query parameters for the filters the backend can evaluate itself."""
    params: dict[str, str] = {
        "select": "*",
        "status": "eq.active",
        "order": "posted_date.desc",
        "limit": str(MAX_ROWS),
    }
    if filters is None:
        return params

    if filters.query.strip():
        pattern = _ilike(filters.query)
        params["or"] = f"(title.ilike.{pattern},company_name.ilike.{pattern},description.ilike.{pattern})"
    location = filters.location.strip()
    if location and location.lower() != DEFAULT_LOCATION:
        params["location"] = f"ilike.{_ilike(location)}"
    if filters.remote is not None:
        params["remote_allowed"] = f"eq.{str(filters.remote).lower()}"
    if filters.company.strip():
        params["company_name"] = f"ilike.{_ilike(filters.company)}"
    return params


class SupabaseSource(JobSource):
    name = "supabase"

    def __init__(self, url: str, api_key: str, timeout: float = 15.0) -> None:
        self.endpoint = f"{url.rstrip('/')}/rest/v1/{TABLE}"
        self.api_key = api_key
        self.timeout = timeout

    @retry(max_attempts=3, base_delay=1.5)
    def _get(self, params: dict[str, str]) -> list[dict]:
        r = requests.get(
            self.endpoint,
            params=params,
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {self.api_key}",
                "Accept": "application/json",
            },
            timeout=self.timeout,
        )
        r.raise_for_status()
        data = r.json()
        if not isinstance(data, list):
            raise ValueError(f"unexpected response shape: {type(data).__name__}")
        return data

    def fetch(self, filters: JobFilters | None = None) -> list[Job]:
        try:
            rows = self._get(build_params(filters))
        except (requests.RequestException, OSError, ValueError) as exc:
            log.error("Fetching %s failed: %s", TABLE, exc)
            return []
        jobs = [Job.from_record(row) for row in rows if isinstance(row, dict)]
        log.info("Backend returned %d active postings", len(jobs))
        return jobs
