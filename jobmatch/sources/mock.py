"""Built-in sample postings, used when no backend or file is configured."""
from __future__ import annotations

from jobmatch.filters import JobFilters
from jobmatch.log import get_logger
from jobmatch.models import Job
from jobmatch.sources.base import JobSource

log = get_logger(__name__)


def _monthly(low: int, high: int) -> dict:
    return {"min": low, "max": high, "period": "month", "currency": "S$"}


SAMPLE_POSTINGS: list[dict] = [
    {
        "id": "1",
        "title": "Science/Math Tutors Needed (Part Time/Full Time)",
        "company": "Premium Tutors",
        "location": "Singapore",
        "jobType": ["Part-time", "Freelance"],
        "remote": False,
        "description": "Provide high-quality tutoring to students across various levels.",
        "requirements": ["Bachelor's degree in Science/Math", "Teaching experience preferred"],
        "benefits": ["Flexible schedule", "Competitive rates"],
        "postedDate": "2025-01-24",
        "easyApply": True,
    },
    {
        "id": "2",
        "title": "Full Stack Developer",
        "company": "GREEN SOLAR CONSULTANT PTE. LTD.",
        "location": "Remote",
        "salary": _monthly(5000, 6000),
        "jobType": ["Full-time"],
        "remote": True,
        "description": "Work on web applications using modern technologies.",
        "requirements": ["3+ years experience", "React, Node.js", "Git proficiency"],
        "benefits": ["Health insurance", "Work from home"],
        "postedDate": "2025-01-23",
        "easyApply": True,
    },
    {
        "id": "3",
        "title": "Full Stack Developer (PHP/Laravel) - Hybrid",
        "company": "USEA Pte Ltd",
        "location": "Singapore 388410",
        "salary": _monthly(2800, 3600),
        "jobType": ["Full-time"],
        "remote": False,
        "description": "Full stack role with PHP and the Laravel framework, hybrid arrangement.",
        "requirements": ["PHP/Laravel expertise", "API development"],
        "benefits": ["Hybrid work", "Career growth opportunities"],
        "postedDate": "2025-01-22",
        "easyApply": True,
    },
    {
        "id": "4",
        "title": "Senior Software Engineer",
        "company": "TechCorp Singapore",
        "location": "Singapore CBD",
        "salary": _monthly(8000, 12000),
        "jobType": ["Full-time"],
        "remote": False,
        "description": "Lead technical initiatives and mentor junior developers.",
        "requirements": ["5+ years experience", "System architecture"],
        "benefits": ["Medical coverage", "Bonus scheme"],
        "postedDate": "2025-01-21",
        "easyApply": False,
    },
    {
        "id": "5",
        "title": "Frontend Developer - React Specialist",
        "company": "Digital Solutions Hub",
        "location": "Singapore",
        "salary": _monthly(4500, 7000),
        "jobType": ["Full-time", "Contract"],
        "remote": True,
        "description": "Build responsive user interfaces with React.",
        "requirements": ["React expertise", "TypeScript"],
        "benefits": ["Remote work", "Stock options"],
        "postedDate": "2025-01-20",
        "easyApply": True,
    },
    {
        "id": "6",
        "title": "Backend Developer - Node.js",
        "company": "StartupXYZ",
        "location": "Singapore",
        "salary": _monthly(5500, 8500),
        "jobType": ["Full-time"],
        "remote": False,
        "description": "Build scalable backend systems and APIs on Node.js.",
        "requirements": ["Node.js/Express", "MongoDB/PostgreSQL"],
        "benefits": ["Startup equity", "Team lunches"],
        "postedDate": "2025-01-19",
        "easyApply": True,
    },
    {
        "id": "7",
        "title": "Data Scientist",
        "company": "Analytics Pro",
        "location": "Singapore",
        "salary": _monthly(6000, 9000),
        "jobType": ["Full-time"],
        "remote": True,
        "description": "Analyze complex datasets and build machine learning models.",
        "requirements": ["Python/R", "Machine Learning", "SQL"],
        "benefits": ["Remote work", "Conference budget"],
        "postedDate": "2025-01-18",
        "easyApply": False,
    },
    {
        "id": "8",
        "title": "DevOps Engineer",
        "company": "CloudTech Solutions",
        "location": "Singapore",
        "salary": _monthly(7000, 10000),
        "jobType": ["Full-time"],
        "remote": False,
        "description": "Manage cloud infrastructure and CI/CD pipelines.",
        "requirements": ["Docker/Kubernetes", "AWS/Azure"],
        "benefits": ["Cloud certifications", "Training budget"],
        "postedDate": "2025-01-17",
        "easyApply": True,
    },
]


class MockSource(JobSource):
    name = "mock"

    def fetch(self, filters: JobFilters | None = None) -> list[Job]:
        log.info("MockSource serving %d sample postings", len(SAMPLE_POSTINGS))
        return [Job.from_record(r) for r in SAMPLE_POSTINGS]
