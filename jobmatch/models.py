"""Data models for job postings, user preferences and match results."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

PAY_PERIODS: tuple[str, ...] = ("hour", "day", "week", "month", "year")
DEFAULT_CURRENCY = "S$"

_SECONDS_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")


def _as_list(value: Any) -> list[str]:
    """Backend rows store some list columns as newline-separated text."""
    if not value:
        return []
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    return [str(v) for v in value]


def parse_posted_date(raw: str | None) -> datetime | None:
    """ISO date or datetime; naive values are taken as UTC."""
    if not raw:
        return None
    text = raw.strip().replace("Z", "+00:00")
    # fromisoformat on 3.10 only takes 3 or 6 fraction digits
    text = _SECONDS_FRACTION.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text)
    try:
        posted = datetime.fromisoformat(text)
    except ValueError:
        return None
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)
    return posted


@dataclass(frozen=True)
class Salary:
    min: float
    max: float
    period: str = "month"
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Salary | None:
        if not data or data.get("min") is None:
            return None
        low = float(data["min"])
        high = float(data["max"]) if data.get("max") is not None else low
        return cls(
            min=low,
            max=high,
            period=data.get("period") or "month",
            currency=data.get("currency") or DEFAULT_CURRENCY,
        )

    def to_dict(self) -> dict:
        return {
            "min": self.min,
            "max": self.max,
            "period": self.period,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class Job:
    id: str
    title: str
    company: str
    location: str
    salary: Salary | None = None
    job_type: list[str] = field(default_factory=list)
    remote: bool = False
    description: str = ""
    requirements: list[str] = field(default_factory=list)
    benefits: list[str] = field(default_factory=list)
    posted_date: str = ""
    easy_apply: bool = False
    company_id: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Job:
        """Build a Job from a mock-data dict or a job_postings row."""
        salary_data = record.get("salary")
        if not isinstance(salary_data, Mapping):
            salary_data = {
                "min": record.get("salary_min"),
                "max": record.get("salary_max"),
                "period": record.get("salary_period"),
                "currency": record.get("salary_currency"),
            }

        remote = record.get("remote")
        if remote is None:
            remote = record.get("remote_allowed", False)

        return cls(
            id="" if record.get("id") is None else str(record["id"]),
            title=record.get("title") or "",
            company=record.get("company") or record.get("company_name") or "",
            location=record.get("location") or "",
            salary=Salary.from_dict(salary_data),
            job_type=_as_list(record.get("jobType") or record.get("job_type")),
            remote=bool(remote),
            description=record.get("description") or "",
            requirements=_as_list(record.get("requirements")),
            benefits=_as_list(record.get("benefits")),
            posted_date=str(record.get("postedDate") or record.get("posted_date") or ""),
            easy_apply=bool(record.get("easyApply") or record.get("easy_apply")),
            company_id=record.get("company_id") or record.get("companyId"),
        )

    @property
    def posted_at(self) -> datetime | None:
        return parse_posted_date(self.posted_date)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "salary": self.salary.to_dict() if self.salary else None,
            "job_type": list(self.job_type),
            "remote": self.remote,
            "description": self.description,
            "requirements": list(self.requirements),
            "benefits": list(self.benefits),
            "posted_date": self.posted_date,
            "easy_apply": self.easy_apply,
            "company_id": self.company_id,
        }


@dataclass
class UserPreferences:
    """One record per user, maintained through upserts."""
    job_titles: list[str] = field(default_factory=list)
    city: str | None = None
    country: str | None = None
    postcode: str | None = None
    remote_work: bool | None = None
    minimum_pay: float | None = None
    pay_period: str | None = None
    onboarding_completed: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> UserPreferences:
        data = data or {}
        pay_period = data.get("pay_period") or None
        if pay_period is not None and pay_period not in PAY_PERIODS:
            raise ValueError(
                f"pay_period must be one of {', '.join(PAY_PERIODS)}; got {pay_period!r}"
            )
        minimum_pay = data.get("minimum_pay")
        remote_work = data.get("remote_work")
        return cls(
            job_titles=_as_list(data.get("job_titles")),
            city=data.get("city") or None,
            country=data.get("country") or None,
            postcode=data.get("postcode") or None,
            remote_work=None if remote_work is None else bool(remote_work),
            minimum_pay=float(minimum_pay) if minimum_pay not in (None, "") else None,
            pay_period=pay_period,
            onboarding_completed=bool(data.get("onboarding_completed", False)),
        )

    def to_dict(self) -> dict:
        return {
            "job_titles": list(self.job_titles),
            "city": self.city,
            "country": self.country,
            "postcode": self.postcode,
            "remote_work": self.remote_work,
            "minimum_pay": self.minimum_pay,
            "pay_period": self.pay_period,
            "onboarding_completed": self.onboarding_completed,
        }


@dataclass
class JobMatchScore:
    job: Job
    score: float
    match_reasons: list[str] = field(default_factory=list)
    # False for the neutral result produced when no preferences exist
    scored: bool = True

    def to_dict(self) -> dict:
        return {
            "job": self.job.to_dict(),
            "score": round(self.score, 2),
            "match_reasons": list(self.match_reasons),
            "scored": self.scored,
        }
