"""Score, rank and recommend jobs against a user's saved preferences.

Points model (out of 100, normalized to 0..1):
  - job title match                    40
  - location match (city or country)   25
  - remote preference                  15 (remote) / 10 (office)
  - salary                             20 (meets) / 10 (within 80%)
"""
from __future__ import annotations

from jobmatch.log import get_logger
from jobmatch.models import Job, JobMatchScore, Salary, UserPreferences

log = get_logger(__name__)

MAX_POINTS = 100
NEUTRAL_SCORE = 0.5
RECOMMEND_MIN_SCORE = 0.3

TITLE_POINTS = 40
LOCATION_POINTS = 25
REMOTE_POINTS = 15
OFFICE_POINTS = 10
SALARY_POINTS = 20
SALARY_CLOSE_POINTS = 10
SALARY_CLOSE_RATIO = 0.8

HOURS_PER_DAY = 8
WORKING_DAYS_PER_MONTH = 22
WEEKS_PER_MONTH = 4.33
MONTHS_PER_YEAR = 12

REASON_TITLE = "Matches your preferred job titles"
REASON_LOCATION = "Located in your preferred area"
REASON_REMOTE = "Remote work available"
REASON_OFFICE = "Office-based work as preferred"
REASON_SALARY = "Meets your salary expectations"
REASON_SALARY_CLOSE = "Close to your salary range"


def _norm(s: str | None) -> str:
    return (s or "").strip().lower()


def convert_to_monthly_salary(salary: Salary | None) -> float:
    """Monthly equivalent of the salary's minimum figure."""
    if salary is None:
        return 0.0
    amount = salary.min
    if salary.period == "hour":
        return amount * HOURS_PER_DAY * WORKING_DAYS_PER_MONTH
    if salary.period == "day":
        return amount * WORKING_DAYS_PER_MONTH
    if salary.period == "week":
        return amount * WEEKS_PER_MONTH
    if salary.period == "year":
        return amount / MONTHS_PER_YEAR
    return amount


def _title_matches(job_title: str, preferred_titles: list[str]) -> bool:
    title = _norm(job_title)
    if not title:
        return False
    for preferred in preferred_titles:
        wanted = _norm(preferred)
        if wanted and (wanted in title or title in wanted):
            return True
    return False


def _location_matches(job_location: str, prefs: UserPreferences) -> bool:
    location = _norm(job_location)
    return any(
        place and place in location
        for place in (_norm(prefs.city), _norm(prefs.country))
    )


def calculate_job_match(job: Job, preferences: UserPreferences | None) -> JobMatchScore:
    if preferences is None:
        return JobMatchScore(job=job, score=NEUTRAL_SCORE, match_reasons=[], scored=False)

    points = 0
    reasons: list[str] = []

    if preferences.job_titles and _title_matches(job.title, preferences.job_titles):
        points += TITLE_POINTS
        reasons.append(REASON_TITLE)

    if (preferences.city or preferences.country) and _location_matches(job.location, preferences):
        points += LOCATION_POINTS
        reasons.append(REASON_LOCATION)

    if preferences.remote_work is True and job.remote:
        points += REMOTE_POINTS
        reasons.append(REASON_REMOTE)
    elif preferences.remote_work is False and not job.remote:
        points += OFFICE_POINTS
        reasons.append(REASON_OFFICE)

    if preferences.minimum_pay and preferences.pay_period and job.salary is not None:
        job_monthly = convert_to_monthly_salary(job.salary)
        wanted_monthly = convert_to_monthly_salary(
            Salary(
                min=preferences.minimum_pay,
                max=preferences.minimum_pay,
                period=preferences.pay_period,
            )
        )
        if job_monthly >= wanted_monthly:
            points += SALARY_POINTS
            reasons.append(REASON_SALARY)
        elif job_monthly >= wanted_monthly * SALARY_CLOSE_RATIO:
            points += SALARY_CLOSE_POINTS
            reasons.append(REASON_SALARY_CLOSE)

    score = min(max(points / MAX_POINTS, 0.0), 1.0)
    return JobMatchScore(job=job, score=score, match_reasons=reasons)


def _posted_timestamp(job: Job) -> float:
    """Sortable posting time; unknown dates sort after every real one."""
    posted = job.posted_at
    return posted.timestamp() if posted is not None else float("-inf")


def rank_jobs_by_match(jobs: list[Job], preferences: UserPreferences | None) -> list[JobMatchScore]:
    """Score every job; best score first, newest posting first among ties."""
    scored = [calculate_job_match(job, preferences) for job in jobs]
    # Two stable passes: secondary key first, then primary.
    scored.sort(key=lambda m: _posted_timestamp(m.job), reverse=True)
    scored.sort(key=lambda m: m.score, reverse=True)
    log.debug("Ranked %d jobs (personalized=%s)", len(scored), preferences is not None)
    return scored


def get_job_recommendations(
    jobs: list[Job], preferences: UserPreferences | None, limit: int = 5
) -> list[JobMatchScore]:
    ranked = rank_jobs_by_match(jobs, preferences)
    return [m for m in ranked if m.score > RECOMMEND_MIN_SCORE][: max(limit, 0)]


def get_match_percentage(score: float) -> int:
    # round half up; round() would give banker's rounding
    return int(score * 100 + 0.5)


def get_match_label(score: float) -> str:
    if score >= 0.8:
        return "Excellent match"
    if score >= 0.6:
        return "Good match"
    if score >= 0.4:
        return "Fair match"
    return "Basic match"


def get_match_color(score: float) -> str:
    if score >= 0.8:
        return "green"
    if score >= 0.6:
        return "blue"
    if score >= 0.4:
        return "yellow"
    return "gray"


def should_show_badge(match: JobMatchScore) -> bool:
    """Only matches computed against real preferences get a badge."""
    return match.scored
