"""
Resolution of a phone record's display category.

A ``phone_record`` row carries one foreign key per category family
(the base ``location`` table plus seven ``*_cat_info`` tables).  By
convention at most one of them is meaningfully non‑zero, but nothing
enforces it, so the families are checked in a fixed priority order
and the first positive key that resolves to a row wins.

The resolver always returns a label.  Lookup failures are logged and
treated as "no match" for that family; when nothing matches the
sentinel ``UNKNOWN_LABEL`` is returned.  The same label is used as
both the ``location`` and the ``category`` of a contact.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from contact_directory_api.app.core.db import Database

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "Unknown"


@dataclass(frozen=True)
class CategoryFamily:
    """One id → label lookup table and the record key pointing into it."""

    name: str
    table: str
    id_column: str
    label_column: str
    record_key: str

    @property
    def lookup_sql(self) -> str:
        # Identifiers come from CATEGORY_FAMILIES only, never from input.
        return (
            f"SELECT {self.label_column} AS label FROM {self.table} "
            f"WHERE {self.id_column} = :category_id LIMIT 1"
        )

    @property
    def labels_sql(self) -> str:
        return f"SELECT {self.label_column} AS label FROM {self.table}"


# Priority order matters: the first family with a positive key wins.
CATEGORY_FAMILIES: Tuple[CategoryFamily, ...] = (
    CategoryFamily("location", "location", "location_id", "location", "location_id"),
    CategoryFamily("mk", "mk_cat_info", "mk_cat_id", "mk_category", "mk_cat_id"),
    CategoryFamily("md", "md_cat_info", "md_cat_id", "md_category", "md_cat_id"),
    CategoryFamily("muas", "muas_cat_info", "muas_cat_id", "muas_category", "muas_cat_id"),
    CategoryFamily("nrt", "nrt_cat_info", "nrt_cat_id", "nrt_category", "nrt_cat_id"),
    CategoryFamily("field", "field_cat_info", "field_cat_id", "field_category", "field_cat_id"),
    CategoryFamily("medical", "medical_cat_info", "medical_cat_id", "medical_category", "medical_cat_id"),
    CategoryFamily("service", "service_cat_info", "service_cat_id", "service_category", "service_cat_id"),
)


def _as_id(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class CategoryResolver:
    """Looks up category labels through a ``Database`` handle."""

    def __init__(self, db: Database, families: Tuple[CategoryFamily, ...] = CATEGORY_FAMILIES) -> None:
        self.db = db
        self.families = families

    def lookup(self, family: CategoryFamily, category_id: int) -> Optional[str]:
        """Return the label for ``category_id`` in ``family`` or ``None``.

        Store errors are absorbed here and reported as "no match".
        """
        try:
            row = self.db.fetch_one(family.lookup_sql, {"category_id": category_id})
        except SQLAlchemyError:
            logger.warning(
                "Category lookup failed for %s id %s", family.name, category_id, exc_info=True
            )
            return None
        if row is None or row["label"] is None:
            return None
        return str(row["label"])

    def resolve(self, record: Mapping[str, Any]) -> str:
        """Return the display label for a phone record."""
        candidates = [(_as_id(record.get(f.record_key)), f) for f in self.families]
        for category_id, family in candidates:
            if category_id <= 0:
                continue
            label = self.lookup(family, category_id)
            if label is not None:
                return label
        return UNKNOWN_LABEL
