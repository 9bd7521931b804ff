"""Postings exported to a local JSON or YAML file."""
from __future__ import annotations

import json
from pathlib import Path

import yaml

from jobmatch.filters import JobFilters
from jobmatch.log import get_logger
from jobmatch.models import Job
from jobmatch.sources.base import JobSource

log = get_logger(__name__)


class FileSource(JobSource):
    name = "file"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def _load(self) -> list:
        text = self.path.read_text(encoding="utf-8")
        if self.path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
        # exports are either a bare list or {"jobs": [...]}
        if isinstance(data, dict):
            data = data.get("jobs", [])
        return data or []

    def fetch(self, filters: JobFilters | None = None) -> list[Job]:
        try:
            records = self._load()
        except (OSError, ValueError, yaml.YAMLError) as exc:
            log.error("Could not read jobs from %s: %s", self.path, exc)
            return []

        jobs: list[Job] = []
        for i, record in enumerate(records):
            if not isinstance(record, dict):
                log.warning("Skipping entry %d in %s: not a mapping", i, self.path.name)
                continue
            try:
                jobs.append(Job.from_record(record))
            except (TypeError, ValueError) as exc:
                log.warning("Skipping entry %d in %s: %s", i, self.path.name, exc)
        log.info("Loaded %d jobs from %s", len(jobs), self.path.name)
        return jobs
