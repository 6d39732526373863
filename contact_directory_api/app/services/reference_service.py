"""
Service layer for reference data and store health.

Provides the location/category label catalogue used by client
filters, the province and state reference tables and a trivial
round‑trip query for the health endpoint.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Set

from sqlalchemy.exc import SQLAlchemyError

from contact_directory_api.app.core.db import Database
from contact_directory_api.app.services.category_resolver import CATEGORY_FAMILIES

logger = logging.getLogger(__name__)


class ReferenceService:
    """Read‑only access to lookup and reference tables."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def list_locations(self) -> List[str]:
        """Return every distinct non‑empty label across the category tables.

        Labels from different tables collapse when their text is equal.
        A table that cannot be read is logged and skipped; the labels of
        the remaining tables are still returned.
        """
        labels: Set[str] = set()
        for family in CATEGORY_FAMILIES:
            try:
                rows = self.db.fetch_all(family.labels_sql)
            except SQLAlchemyError:
                logger.warning("Skipping labels from %s", family.table, exc_info=True)
                continue
            labels.update(str(row["label"]) for row in rows if row["label"])
        return sorted(labels)

    def list_provinces(self) -> List[Dict[str, Any]]:
        return self.db.fetch_all("SELECT * FROM province_info ORDER BY province")

    def list_states(self) -> List[Dict[str, Any]]:
        return self.db.fetch_all("SELECT * FROM state_info ORDER BY state_name")

    def database_available(self) -> bool:
        """Return ``True`` when the store answers a trivial query."""
        try:
            self.db.ping()
        except SQLAlchemyError:
            logger.warning("Database health check failed", exc_info=True)
            return False
        return True
