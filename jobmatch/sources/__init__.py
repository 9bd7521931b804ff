from .base import JobSource
from .file import FileSource
from .mock import MockSource
from .supabase import SupabaseSource

from jobmatch.log import get_logger

log = get_logger(__name__)

__all__ = ["JobSource", "FileSource", "MockSource", "SupabaseSource", "get_sources"]


def get_sources(env_getter) -> list[JobSource]:
    sources: list[JobSource] = []

    jobs_file = env_getter("JOBMATCH_JOBS_FILE")
    if jobs_file:
        sources.append(FileSource(jobs_file))
        log.info("Registered source: file (%s)", jobs_file)

    url, key = env_getter("SUPABASE_URL"), env_getter("SUPABASE_ANON_KEY")
    if url and key:
        sources.append(SupabaseSource(url, key))
        log.info("Registered source: hosted backend")

    if not sources:
        sources.append(MockSource())
        log.info("No job source configured — using sample postings")

    return sources
