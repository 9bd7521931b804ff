"""Load and upsert the user's matching preferences (YAML on disk)."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from jobmatch.config import preferences_path
from jobmatch.log import get_logger
from jobmatch.models import UserPreferences

log = get_logger(__name__)

_HEADER = (
    "# ============================================================\n"
    "# Job matching preferences\n"
    "# Edit freely; `jobmatch preferences set` merges over this file\n"
    "# ============================================================\n\n"
)


def _read_raw(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"{path} is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def load_preferences(path: Path | None = None) -> UserPreferences | None:
    """Stored preferences, or None when the user has not saved any yet."""
    path = path or preferences_path()
    if not path.exists():
        log.debug("No preferences at %s", path)
        return None
    return UserPreferences.from_dict(_read_raw(path))


def write_preferences(prefs: UserPreferences, path: Path | None = None) -> Path:
    path = path or preferences_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    body = yaml.dump(prefs.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)
    path.write_text(_HEADER + body, encoding="utf-8")
    log.info("Preferences written → %s", path)
    return path


def upsert_preferences(updates: Mapping[str, Any], path: Path | None = None) -> UserPreferences:
    """Merge *updates* over the stored record, creating it when absent.

    Keys whose value is None are left untouched, so callers can pass only the
    fields the user actually changed.
    """
    path = path or preferences_path()
    merged = _read_raw(path)
    merged.update({k: v for k, v in updates.items() if v is not None})
    prefs = UserPreferences.from_dict(merged)
    write_preferences(prefs, path)
    return prefs


def complete_onboarding(path: Path | None = None) -> UserPreferences:
    return upsert_preferences({"onboarding_completed": True}, path)
