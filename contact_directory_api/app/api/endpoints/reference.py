"""
Reference data endpoints.

These routes feed the filter pickers of the client: the catalogue of
location/category labels and the province and state tables.
"""

from fastapi import APIRouter, Depends

from contact_directory_api.app.core.db import Database, get_db
from contact_directory_api.app.schemas.reference import LocationListResponse, ReferenceListResponse
from contact_directory_api.app.services.reference_service import ReferenceService

router = APIRouter()


def get_reference_service(db: Database = Depends(get_db)) -> ReferenceService:
    return ReferenceService(db)


@router.get("/locations", response_model=LocationListResponse)
def list_locations(service: ReferenceService = Depends(get_reference_service)) -> LocationListResponse:
    """Return all distinct location and category labels, sorted."""
    return LocationListResponse(data=service.list_locations())


@router.get("/provinces", response_model=ReferenceListResponse)
def list_provinces(service: ReferenceService = Depends(get_reference_service)) -> ReferenceListResponse:
    return ReferenceListResponse(data=service.list_provinces())


@router.get("/states", response_model=ReferenceListResponse)
def list_states(service: ReferenceService = Depends(get_reference_service)) -> ReferenceListResponse:
    return ReferenceListResponse(data=service.list_states())
