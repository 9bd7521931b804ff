"""Record parsing for jobs and preferences."""
import pytest

from jobmatch.models import Job, JobMatchScore, Salary, UserPreferences, parse_posted_date


def test_job_from_frontend_record():
    job = Job.from_record({
        "id": "2",
        "title": "Full Stack Developer",
        "company": "GREEN SOLAR",
        "location": "Remote",
        "salary": {"min": 5000, "max": 6000, "period": "month", "currency": "S$"},
        "jobType": ["Full-time"],
        "remote": True,
        "postedDate": "2025-01-23",
        "easyApply": True,
    })

    assert job.salary == Salary(min=5000, max=6000, period="month", currency="S$")
    assert job.job_type == ["Full-time"]
    assert job.remote is True
    assert job.easy_apply is True
    assert job.posted_at.year == 2025


def test_job_from_backend_row():
    job = Job.from_record({
        "id": 17,
        "title": "DevOps Engineer",
        "company_name": "CloudTech",
        "company_id": "42",
        "location": "Singapore",
        "salary_min": 7000,
        "salary_max": None,
        "salary_period": "month",
        "job_type": ["Full-time"],
        "remote_allowed": False,
        "requirements": "Docker\nKubernetes\n",
        "posted_date": "2025-01-17T08:00:00+00:00",
    })

    assert job.id == "17"
    assert job.company == "CloudTech"
    assert job.company_id == "42"
    assert job.salary == Salary(min=7000, max=7000, period="month", currency="S$")
    assert job.requirements == ["Docker", "Kubernetes"]
    assert job.remote is False


def test_job_without_salary():
    job = Job.from_record({"id": "x", "title": "Tutor", "company": "T", "location": "SG"})

    assert job.salary is None
    assert job.posted_at is None


def test_null_id_is_blank():
    job = Job.from_record({"id": None, "title": "Tutor", "company": "T", "location": "SG"})

    assert job.id == ""
    assert Job.from_record({"id": 42, "title": "t", "company": "c", "location": "l"}).id == "42"


def test_unparseable_posted_date():
    job = Job(id="1", title="t", company="c", location="l", posted_date="last tuesday")

    assert job.posted_at is None


@pytest.mark.parametrize(
    "raw, microsecond",
    [
        ("2025-01-19T10:20:33.12+00:00", 120000),
        ("2025-01-19T10:20:33.5Z", 500000),
        ("2025-01-19T10:20:33.12345+00:00", 123450),
        ("2025-01-19T10:20:33.1234567+00:00", 123456),
    ],
)
def test_posted_date_with_backend_fractions(raw, microsecond):
    posted = parse_posted_date(raw)

    assert posted is not None
    assert posted.microsecond == microsecond
    assert posted.utcoffset().total_seconds() == 0


def test_preferences_from_dict_ignores_unknown_keys():
    prefs = UserPreferences.from_dict({
        "job_titles": ["Developer"],
        "city": "Singapore",
        "minimum_pay": "4000",
        "pay_period": "month",
        "user_id": "abc",
    })

    assert prefs.minimum_pay == 4000.0
    assert prefs.remote_work is None
    assert prefs.onboarding_completed is False


def test_preferences_reject_bad_pay_period():
    with pytest.raises(ValueError, match="pay_period"):
        UserPreferences.from_dict({"pay_period": "fortnight"})


def test_match_score_to_dict(make_job):
    match = JobMatchScore(job=make_job(), score=0.8512, match_reasons=["x"])

    data = match.to_dict()

    assert data["score"] == 0.85
    assert data["scored"] is True
    assert data["job"]["title"] == "Senior Software Engineer"
