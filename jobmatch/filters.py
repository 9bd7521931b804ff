"""Compose job search filters and sort orders over fetched postings."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from jobmatch.log import get_logger
from jobmatch.matching import convert_to_monthly_salary, rank_jobs_by_match
from jobmatch.models import Job, UserPreferences

log = get_logger(__name__)

# The board's home market; searching it is the same as not filtering.
DEFAULT_LOCATION = "singapore"

DATE_POSTED_WINDOWS: dict[str, timedelta] = {
    "today": timedelta(days=1),
    "3days": timedelta(days=3),
    "week": timedelta(days=7),
    "month": timedelta(days=30),
}

SORT_ORDERS: tuple[str, ...] = ("relevance", "date")
_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class SalaryRange:
    """Monthly pay bracket; max=None means open-ended."""
    min: float
    max: float | None = None
    label: str = ""

    def contains(self, monthly: float) -> bool:
        if monthly < self.min:
            return False
        return self.max is None or monthly <= self.max


SALARY_RANGES: list[SalaryRange] = [
    SalaryRange(2000, 4000, "S$2,000 - S$4,000"),
    SalaryRange(4000, 6000, "S$4,000 - S$6,000"),
    SalaryRange(5000, 8000, "S$5,000 - S$8,000"),
    SalaryRange(8000, 12000, "S$8,000 - S$12,000"),
    SalaryRange(10000, 15000, "S$10,000 - S$15,000"),
    SalaryRange(15000, 20000, "S$15,000 - S$20,000"),
    SalaryRange(20000, None, "S$20,000+"),
]


def salary_range_from_label(label: str) -> SalaryRange | None:
    wanted = label.strip().lower()
    for bracket in SALARY_RANGES:
        if bracket.label.lower() == wanted:
            return bracket
    return None


@dataclass
class JobFilters:
    query: str = ""
    location: str = ""
    remote: bool | None = None
    salary: SalaryRange | None = None
    job_type: list[str] = field(default_factory=list)
    company: str = ""
    date_posted: str | None = None

    def is_empty(self) -> bool:
        return self == JobFilters()


def _matches(job: Job, f: JobFilters, threshold: datetime | None) -> bool:
    query = f.query.strip().lower()
    if query and not any(
        query in text.lower() for text in (job.title, job.company, job.description)
    ):
        return False

    location = f.location.strip().lower()
    if location and location != DEFAULT_LOCATION and location not in job.location.lower():
        return False

    if f.remote is not None and job.remote != f.remote:
        return False

    if f.salary is not None:
        if job.salary is None or not f.salary.contains(convert_to_monthly_salary(job.salary)):
            return False

    if f.job_type and not set(f.job_type) & set(job.job_type):
        return False

    company = f.company.strip().lower()
    if company and company not in job.company.lower():
        return False

    if threshold is not None:
        posted = job.posted_at
        if posted is None or posted < threshold:
            return False

    return True


def apply_filters(jobs: list[Job], filters: JobFilters | None, now: datetime | None = None) -> list[Job]:
    """Keep the jobs that satisfy every criterion set on *filters*."""
    if filters is None or filters.is_empty():
        return list(jobs)

    threshold = None
    if filters.date_posted:
        window = DATE_POSTED_WINDOWS.get(filters.date_posted)
        if window is None:
            log.warning("Unknown date_posted filter %r ignored", filters.date_posted)
        else:
            now = now or datetime.now(timezone.utc)
            if now.tzinfo is None:
                now = now.replace(tzinfo=timezone.utc)
            threshold = now - window

    result = [j for j in jobs if _matches(j, filters, threshold)]
    log.info("Filters kept %d of %d jobs", len(result), len(jobs))
    return result


def sort_jobs(jobs: list[Job], sort_by: str, preferences: UserPreferences | None) -> list[Job]:
    if sort_by == "relevance" and preferences is not None:
        return [m.job for m in rank_jobs_by_match(jobs, preferences)]
    if sort_by == "date":
        return sorted(
            jobs,
            key=lambda j: j.posted_at or _UNDATED,
            reverse=True,
        )
    return list(jobs)
