"""
Contact endpoints.

``GET /api/contacts`` returns a filtered, paginated list of contacts
together with the total number of matching records.
``GET /api/contacts/{contact_id}`` returns a single contact.

A non‑numeric ``limit``, ``offset`` or contact id is rejected with
HTTP 400 by the validation handler.  Numeric pagination values out of
range are clamped (``limit`` to 1–1000, ``offset`` to 0–2**63‑1) and
the effective values are echoed back in ``pagination``.  An id beyond
the 64‑bit range is simply not found.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from contact_directory_api.app.core.db import Database, get_db
from contact_directory_api.app.schemas.contact import ContactListResponse, ContactResponse, Pagination
from contact_directory_api.app.services.contact_filters import DEFAULT_LIMIT, DEFAULT_OFFSET, ContactFilters
from contact_directory_api.app.services.contact_service import ContactService

router = APIRouter()


def get_contact_service(db: Database = Depends(get_db)) -> ContactService:
    return ContactService(db)


@router.get("/contacts", response_model=ContactListResponse)
def list_contacts(
    search: Optional[str] = Query(None, description="Substring of first/last name or any phone number"),
    province: Optional[str] = Query(None, description="Substring of the province name"),
    state: Optional[str] = Query(None, description="Substring of the state name"),
    location: Optional[str] = Query(None, description="Substring of a location name"),
    limit: int = Query(DEFAULT_LIMIT, description="Page size, clamped to 1–1000"),
    offset: int = Query(DEFAULT_OFFSET, description="Records to skip, clamped to >= 0"),
    service: ContactService = Depends(get_contact_service),
) -> ContactListResponse:
    """Return a page of contacts matching all supplied filters."""
    filters = ContactFilters.from_query(
        search=search,
        province=province,
        state=state,
        location=location,
        limit=limit,
        offset=offset,
    )
    contacts, total = service.list_contacts(filters)
    return ContactListResponse(
        data=contacts,
        pagination=Pagination(
            total=total,
            limit=filters.limit,
            offset=filters.offset,
            hasMore=filters.offset + len(contacts) < total,
        ),
    )


@router.get("/contacts/{contact_id}", response_model=ContactResponse)
def get_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Retrieve a single contact by record ID.

    Returns HTTP 404 if no record has this ID.
    """
    contact = service.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return ContactResponse(data=contact)
