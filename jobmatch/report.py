"""Markdown report of ranked jobs and personalized recommendations."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jobmatch.config import REPORTS_DIR
from jobmatch.log import get_logger
from jobmatch.matching import get_match_label, get_match_percentage, should_show_badge
from jobmatch.models import Job, JobMatchScore, UserPreferences
from jobmatch.utils import create_company_link

log = get_logger(__name__)

_TABLE_ROWS = 20


def _clip(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def _salary_text(job: Job) -> str:
    s = job.salary
    if s is None:
        return "—"
    return f"{s.currency}{s.min:,.0f}–{s.max:,.0f}/{s.period}"


def _badge(match: JobMatchScore) -> str:
    if not should_show_badge(match):
        return "—"
    return f"{get_match_percentage(match.score)}% ({get_match_label(match.score)})"


def _preferences_summary(prefs: UserPreferences) -> str:
    parts: list[str] = []
    if prefs.job_titles:
        parts.append("titles: " + ", ".join(prefs.job_titles))
    place = ", ".join(p for p in (prefs.city, prefs.country) if p)
    if place:
        parts.append(f"location: {place}")
    if prefs.remote_work is not None:
        parts.append("remote" if prefs.remote_work else "office-based")
    if prefs.minimum_pay and prefs.pay_period:
        parts.append(f"min pay: {prefs.minimum_pay:,.0f}/{prefs.pay_period}")
    return " | ".join(parts) or "none set"


def build_report(
    ranked: list[JobMatchScore],
    recommendations: list[JobMatchScore],
    preferences: UserPreferences | None,
) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [f"# Job Matches — {date}", ""]

    if preferences is None:
        lines.append("_No saved preferences: jobs are listed without match scores._")
    else:
        lines.append(f"**Preferences:** {_preferences_summary(preferences)}")
    lines.append("")
    lines.append(f"**{len(ranked)}** jobs ranked | **{len(recommendations)}** recommended")
    lines.append("")

    if recommendations:
        lines.append("## Recommended for you")
        lines.append("")
        for m in recommendations:
            job = m.job
            link = create_company_link(job.company_id, job.company)
            lines.append(f"### {job.title} @ {job.company}")
            lines.append(f"- **Match:** {_badge(m)}")
            lines.append(f"- **Location:** {job.location}{' (remote)' if job.remote else ''}")
            lines.append(f"- **Salary:** {_salary_text(job)}")
            if m.match_reasons:
                lines.append(f"- **Why:** {', '.join(m.match_reasons[:3])}")
            lines.append(f"- **Company:** /companies/{link}")
            lines.append("")

    if ranked:
        lines.append("---")
        lines.append("")
        lines.append("## All Results")
        lines.append("")
        lines.append("| # | Role | Company | Location | Salary | Match | Posted |")
        lines.append("|--:|------|---------|----------|--------|-------|--------|")
        for i, m in enumerate(ranked[:_TABLE_ROWS], 1):
            job = m.job
            lines.append(
                f"| {i} | {_clip(job.title, 40)} | {_clip(job.company, 22)} | "
                f"{_clip(job.location.split(',')[0], 18)} | {_salary_text(job)} | "
                f"{_badge(m)} | {job.posted_date or '—'} |"
            )
        if len(ranked) > _TABLE_ROWS:
            lines.append("")
            lines.append(f"_{len(ranked) - _TABLE_ROWS} more not shown._")
        lines.append("")

    log.info("Built report: %d ranked, %d recommended", len(ranked), len(recommendations))
    return "\n".join(lines)


def write_report(content: str, directory: Path | None = None) -> Path:
    directory = directory or REPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    path = directory / f"matches_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
