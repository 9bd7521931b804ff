"""
Matching pipeline.

Runs: load preferences → fetch from sources → filter → rank → recommend → report.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from jobmatch.config import get_env
from jobmatch.filters import JobFilters, apply_filters, sort_jobs
from jobmatch.log import get_logger
from jobmatch.matching import calculate_job_match, get_job_recommendations, rank_jobs_by_match
from jobmatch.models import Job, JobMatchScore, UserPreferences
from jobmatch.preferences import load_preferences
from jobmatch.report import build_report, write_report
from jobmatch.sources import JobSource, get_sources

log = get_logger(__name__)


def _fetch_source(source: JobSource, filters: JobFilters | None) -> list[Job]:
    try:
        jobs = source.fetch(filters)
    except Exception as exc:
        log.error("[%s] FAILED: %s", source.name, exc)
        return []
    log.info("[%s] returned %d jobs", source.name, len(jobs))
    return jobs


def collect_jobs(sources: list[JobSource], filters: JobFilters | None = None) -> list[Job]:
    """Fetch from every source in parallel; first occurrence of an id wins.

    Jobs without an id are never treated as duplicates.
    """
    if not sources:
        return []
    results: dict[int, list[Job]] = {}
    with ThreadPoolExecutor(max_workers=len(sources)) as pool:
        futures = {pool.submit(_fetch_source, src, filters): i for i, src in enumerate(sources)}
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    seen: set[str] = set()
    jobs: list[Job] = []
    # source registration order, not completion order, decides duplicates
    for i in range(len(sources)):
        for job in results.get(i, []):
            if job.id and job.id in seen:
                continue
            seen.add(job.id)
            jobs.append(job)
    log.info("Total unique jobs: %d", len(jobs))
    return jobs


def _order_matches(
    jobs: list[Job], preferences: UserPreferences | None, sort_by: str
) -> list[JobMatchScore]:
    if sort_by == "relevance" and preferences is not None:
        return rank_jobs_by_match(jobs, preferences)
    return [calculate_job_match(job, preferences) for job in sort_jobs(jobs, sort_by, preferences)]


def run(
    *,
    filters: JobFilters | None = None,
    sort_by: str = "relevance",
    limit: int = 5,
    write: bool = True,
    preferences_file: Path | None = None,
    sources: list[JobSource] | None = None,
    report_dir: Path | None = None,
) -> dict[str, Any]:
    preferences = load_preferences(preferences_file)
    if preferences is None:
        log.warning("No saved preferences — results are not personalized")

    sources = sources if sources is not None else get_sources(get_env)
    all_jobs = collect_jobs(sources, filters)
    filtered = apply_filters(all_jobs, filters)

    ranked = _order_matches(filtered, preferences, sort_by)
    recommendations = get_job_recommendations(filtered, preferences, limit=limit)

    report_content = build_report(ranked, recommendations, preferences)
    report_path = write_report(report_content, report_dir) if write else None

    log.info(
        "Run complete — found=%d, filtered=%d, recommended=%d",
        len(all_jobs), len(filtered), len(recommendations),
    )
    return {
        "jobs_found": len(all_jobs),
        "filtered_count": len(filtered),
        "recommended_count": len(recommendations),
        "personalized": preferences is not None,
        "report_path": str(report_path) if report_path else None,
        "ranked": ranked,
        "recommendations": recommendations,
    }
