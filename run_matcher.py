#!/usr/bin/env python3
"""Entry point: print today's recommendations and write the Markdown report."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobmatch.config import ensure_dirs, preferences_path, recommend_limit
from jobmatch.log import get_logger

log = get_logger(__name__)


def _check_setup() -> bool:
    """Return True when no preferences have been saved yet."""
    if not preferences_path().exists():
        print()
        print("  No preferences found. Results will not be personalized.")
        print("  Save some first:")
        print('    python -m jobmatch preferences set --title "Software Engineer" --city Singapore')
        print()
        return True
    return False


if __name__ == "__main__":
    _check_setup()
    ensure_dirs()

    from jobmatch.recommend import run

    result = run(limit=recommend_limit(), write=True)
    log.info("Run complete.")
    log.info("  Jobs found: %d", result["jobs_found"])
    log.info("  After filters: %d", result["filtered_count"])
    log.info("  Recommended: %d", result["recommended_count"])
    if result["report_path"]:
        log.info("  Report: %s", result["report_path"])
