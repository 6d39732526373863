"""
Pydantic models for contacts.

A ``Contact`` is the flat representation consumed by the mobile
client.  It is derived per request from a ``phone_record`` row, its
joined province and state names and its resolved category label.
"""

from typing import List

from pydantic import BaseModel, Field


class Contact(BaseModel):
    id: str = Field(..., examples=["42"])
    name: str = Field(..., examples=["John Doe"])
    location: str = Field(..., examples=["Lagos Hub"])
    phone: str = Field("", examples=["08011112222"])
    whatsapp: str = Field("", examples=["2348011112222"])
    rank: str = Field("", examples=["Inspector"])
    category: str = Field(..., description="Same label as ``location``")
    province: str = ""
    state: str = ""


class Pagination(BaseModel):
    total: int
    limit: int
    offset: int
    hasMore: bool = Field(..., description="``offset + len(data) < total``")


class ContactListResponse(BaseModel):
    success: bool = True
    data: List[Contact]
    pagination: Pagination


class ContactResponse(BaseModel):
    success: bool = True
    data: Contact
