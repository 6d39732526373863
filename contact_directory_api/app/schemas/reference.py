"""
Pydantic models for the reference and status endpoints.

Province and state rows are returned as stored, so they are modelled
as plain column → value mappings rather than fixed schemas.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LocationListResponse(BaseModel):
    success: bool = True
    data: List[str] = Field(..., description="Distinct category labels, sorted")


class ReferenceListResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    success: bool
    message: str
    timestamp: str
    database: Optional[str] = Field(None, examples=["connected"])
