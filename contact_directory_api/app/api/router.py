"""
Top‑level API router.

Aggregates the domain routers under a single router which the
application mounts at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import contacts, health, reference

router = APIRouter()

router.include_router(contacts.router, tags=["contacts"])
router.include_router(reference.router, tags=["reference"])
router.include_router(health.router, tags=["health"])
