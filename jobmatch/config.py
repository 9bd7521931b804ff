"""Paths and environment configuration."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from jobmatch.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
DATA_DIR: Path = ROOT_DIR / "data"
REPORTS_DIR: Path = ROOT_DIR / "reports"

DEFAULT_RECOMMEND_LIMIT = 5


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def preferences_path() -> Path:
    """Location of the preferences YAML; JOBMATCH_PREFERENCES overrides it."""
    override = get_env("JOBMATCH_PREFERENCES")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "preferences.yaml"


def recommend_limit() -> int:
    raw = get_env("JOBMATCH_RECOMMEND_LIMIT")
    if not raw:
        return DEFAULT_RECOMMEND_LIMIT
    try:
        return max(int(raw), 0)
    except ValueError:
        log.warning("Ignoring invalid JOBMATCH_RECOMMEND_LIMIT=%r", raw)
        return DEFAULT_RECOMMEND_LIMIT


def ensure_dirs() -> None:
    for d in (CONFIG_DIR, DATA_DIR, REPORTS_DIR):
        d.mkdir(parents=True, exist_ok=True)
