"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Routers live in ``api/endpoints``, the SQL‑backed
business logic in ``services`` and response models in ``schemas``.
Infrastructure (settings, database engine, logging and error
handlers) lives in ``core``.
"""

from .main import app  # noqa: F401
