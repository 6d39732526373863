"""
Health check endpoint.

Reports whether the relational store answers a trivial query.  An
unreachable store is reported as degraded status (``success: false``,
``database: "disconnected"``) with HTTP 200; the process keeps
serving.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from contact_directory_api.app.core.db import Database, get_db
from contact_directory_api.app.schemas.reference import HealthResponse
from contact_directory_api.app.services.reference_service import ReferenceService

router = APIRouter()


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
def health_check(db: Database = Depends(get_db)) -> HealthResponse:
    if ReferenceService(db).database_available():
        return HealthResponse(
            success=True,
            message="API is running",
            timestamp=_utc_timestamp(),
            database="connected",
        )
    return HealthResponse(
        success=False,
        message="Database unreachable",
        timestamp=_utc_timestamp(),
        database="disconnected",
    )
