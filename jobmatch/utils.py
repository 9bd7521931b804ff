"""Company slug and link helpers used when rendering job listings."""
from __future__ import annotations

import re

UNKNOWN_COMPANY = "unknown-company"

_UUID_PREFIX = re.compile(
    r"^([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})-(.+)$"
)
_NUMERIC_PREFIX = re.compile(r"^(\d+)-(.+)$")
_COMPANY_PREFIX = re.compile(r"^company-(.+)$")


def create_company_slug(name: str | None) -> str:
    if not name or not isinstance(name, str):
        return UNKNOWN_COMPANY
    slug = name.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = slug.strip("-")
    return slug or UNKNOWN_COMPANY


def create_company_link(company_id: str | None, company_name: str) -> str:
    """`<id>-<slug>` when the company id is known, else `company-<slug>`."""
    slug = create_company_slug(company_name)
    if company_id and company_id.strip() and company_id not in ("undefined", "null"):
        return f"{company_id}-{slug}"
    return f"company-{slug}"


def extract_company_id(slug_param: str | None) -> tuple[str | None, str]:
    """Split a company link back into (id, slug)."""
    if not slug_param:
        return None, UNKNOWN_COMPANY

    for pattern in (_UUID_PREFIX, _NUMERIC_PREFIX):
        m = pattern.match(slug_param)
        if m:
            return m.group(1), m.group(2)

    m = _COMPANY_PREFIX.match(slug_param)
    if m:
        return None, m.group(1)

    return None, slug_param


def slug_to_search_pattern(slug: str) -> str:
    return slug.replace("-", " ").strip()
