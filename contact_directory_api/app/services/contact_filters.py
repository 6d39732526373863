"""
Filter and pagination contract for the contact listing.

``ContactFilters`` normalizes the raw query string values: string
filters are trimmed (blank means absent) and pagination is clamped
into range.  ``build_predicate`` turns the filters into a ``WHERE``
clause with bound parameters; the same clause feeds both the page
query and the count query so the total always matches the filter.

User input never becomes part of the SQL text.  Substring filters are
bound as ``LIKE`` patterns with ``%``/``_`` escaped, and ``limit`` /
``offset`` are integers validated by FastAPI before they are clamped
and bound.  ``offset`` is capped at ``MAX_SQL_INTEGER`` so an absurdly
large value yields an empty page rather than a driver overflow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_LIMIT = 50
MIN_LIMIT = 1
MAX_LIMIT = 1000
DEFAULT_OFFSET = 0
# Largest value every supported store accepts as a bound integer.
MAX_SQL_INTEGER = 2**63 - 1

LIKE_ESCAPE = "!"

SEARCH_COLUMNS = ("pr.f_name", "pr.l_name", "pr.phone", "pr.phone1", "pr.phone2")


def clamp_limit(limit: Optional[int]) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    return max(MIN_LIMIT, min(MAX_LIMIT, limit))


def clamp_offset(offset: Optional[int]) -> int:
    if offset is None:
        return DEFAULT_OFFSET
    return max(0, min(MAX_SQL_INTEGER, offset))


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim a filter value; empty after trimming counts as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def like_pattern(value: str) -> str:
    """Case‑insensitive substring pattern for ``LOWER(col) LIKE ...``."""
    escaped = (
        value.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _like(column: str, param: str) -> str:
    return f"LOWER({column}) LIKE :{param} ESCAPE '{LIKE_ESCAPE}'"


@dataclass
class ContactFilters:
    """Normalized filters and pagination for ``GET /api/contacts``."""

    search: Optional[str] = None
    province: Optional[str] = None
    state: Optional[str] = None
    location: Optional[str] = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @classmethod
    def from_query(
        cls,
        search: Optional[str] = None,
        province: Optional[str] = None,
        state: Optional[str] = None,
        location: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> "ContactFilters":
        return cls(
            search=clean_text(search),
            province=clean_text(province),
            state=clean_text(state),
            location=clean_text(location),
            limit=clamp_limit(limit),
            offset=clamp_offset(offset),
        )


def build_predicate(filters: ContactFilters, location_id: Optional[int] = None) -> Tuple[str, Dict[str, Any]]:
    """Return ``(where_sql, params)`` for the given filters.

    ``location_id`` is the id the ``location`` filter resolved to.  When
    a location filter is present but resolved to nothing the predicate
    is made unsatisfiable instead of being dropped.
    """
    clauses: List[str] = ["1=1"]
    params: Dict[str, Any] = {}

    if filters.search:
        params["search"] = like_pattern(filters.search)
        clauses.append("(" + " OR ".join(_like(col, "search") for col in SEARCH_COLUMNS) + ")")

    if filters.province:
        params["province"] = like_pattern(filters.province)
        clauses.append(_like("p.province", "province"))

    if filters.state:
        params["state"] = like_pattern(filters.state)
        clauses.append(_like("s.state_name", "state"))

    if filters.location:
        if location_id is None:
            clauses.append("1=0")
        else:
            params["location_id"] = location_id
            clauses.append("pr.location_id = :location_id")

    return " AND ".join(clauses), params
