"""
Service layer for contacts.

Contacts are read from ``phone_record`` joined with the province and
state reference tables, then reshaped into the flat ``Contact``
representation: full name, primary phone, WhatsApp number and the
resolved category label.

All queries are read‑only and use bound parameters.  Category labels
are resolved with one lookup per record (see ``CategoryResolver``).
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from contact_directory_api.app.core.db import Database
from contact_directory_api.app.schemas.contact import Contact
from contact_directory_api.app.services.category_resolver import CategoryResolver, UNKNOWN_LABEL
from contact_directory_api.app.services.contact_filters import (
    ContactFilters,
    LIKE_ESCAPE,
    MAX_SQL_INTEGER,
    build_predicate,
    like_pattern,
)
from contact_directory_api.app.services.phone import format_whatsapp_number, primary_phone

logger = logging.getLogger(__name__)

CONTACT_COLUMNS = """
    pr.record_id,
    pr.rank,
    pr.f_name,
    pr.l_name,
    pr.phone,
    pr.phone1,
    pr.phone2,
    pr.location_id,
    pr.mk_cat_id,
    pr.md_cat_id,
    pr.muas_cat_id,
    pr.nrt_cat_id,
    pr.field_cat_id,
    pr.medical_cat_id,
    pr.service_cat_id,
    pr.province_id,
    pr.state_id,
    p.province,
    s.state_name
"""

CONTACT_SOURCE = """
    FROM phone_record pr
    LEFT JOIN province_info p ON pr.province_id = p.province_id
    LEFT JOIN state_info s ON pr.state_id = s.state_id
"""


def full_name(first: Optional[str], last: Optional[str]) -> str:
    name = f"{first or ''} {last or ''}".strip()
    return name or UNKNOWN_LABEL


class ContactService:
    """Read‑only queries over phone records."""

    def __init__(self, db: Database, resolver: Optional[CategoryResolver] = None) -> None:
        self.db = db
        self.resolver = resolver or CategoryResolver(db)

    def find_location_id(self, name: str) -> Optional[int]:
        """Return the id of the first location whose name contains ``name``.

        Several locations may match; no ordering is applied, so the
        store decides which one comes first.
        """
        return self.db.fetch_value(
            f"SELECT location_id FROM location "
            f"WHERE LOWER(location) LIKE :pattern ESCAPE '{LIKE_ESCAPE}' LIMIT 1",
            {"pattern": like_pattern(name)},
        )

    def list_contacts(self, filters: ContactFilters) -> Tuple[List[Contact], int]:
        """Return one page of contacts and the total matching the filters."""
        location_id = None
        if filters.location:
            location_id = self.find_location_id(filters.location)
            if location_id is None:
                logger.debug("No location matches %r", filters.location)

        where, params = build_predicate(filters, location_id)
        rows = self.db.fetch_all(
            f"SELECT {CONTACT_COLUMNS} {CONTACT_SOURCE} WHERE {where} LIMIT :limit OFFSET :offset",
            {**params, "limit": filters.limit, "offset": filters.offset},
        )
        total = self.db.fetch_value(f"SELECT COUNT(*) AS total {CONTACT_SOURCE} WHERE {where}", params)
        contacts = [self.assemble(row) for row in rows]
        return contacts, int(total or 0)

    def get_contact(self, contact_id: int) -> Optional[Contact]:
        """Return a single contact by ``record_id`` or ``None``."""
        if abs(contact_id) > MAX_SQL_INTEGER:
            # No stored key can be this large; binding it would overflow.
            return None
        row = self.db.fetch_one(
            f"SELECT {CONTACT_COLUMNS} {CONTACT_SOURCE} WHERE pr.record_id = :record_id",
            {"record_id": contact_id},
        )
        if row is None:
            return None
        return self.assemble(row)

    def assemble(self, row: Mapping[str, Any]) -> Contact:
        """Convert a joined ``phone_record`` row to a ``Contact``."""
        label = self.resolver.resolve(row)
        phone = primary_phone(row)
        return Contact(
            id=str(row["record_id"]),
            name=full_name(row.get("f_name"), row.get("l_name")),
            location=label,
            phone=phone,
            whatsapp=format_whatsapp_number(phone),
            rank=str(row.get("rank") or ""),
            category=label,
            province=row.get("province") or "",
            state=row.get("state_name") or "",
        )
