from __future__ import annotations

from abc import ABC, abstractmethod

from jobmatch.filters import JobFilters
from jobmatch.models import Job


class JobSource(ABC):
    name = "source"

    @abstractmethod
    def fetch(self, filters: JobFilters | None = None) -> list[Job]:
        """Return postings; failures are logged and yield an empty list."""
