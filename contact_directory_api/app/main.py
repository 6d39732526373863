"""
Main entrypoint for the Contact Directory API.

This module assembles the FastAPI application: logging, the pooled
database handle, middleware, exception handlers and the ``/api``
routes.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn contact_directory_api.app.main:app

``create_app`` accepts explicit ``settings`` and ``engine`` arguments
so callers (tests in particular) can swap the store for another one.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database, create_db_engine
from .core.errors import setup_exception_handlers
from .core.headers import add_security_headers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment‑derived
        module settings.
    engine : Optional[Engine]
        Pre‑built SQLAlchemy engine.  When omitted one is created from
        ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    db = Database(engine if engine is not None else create_db_engine(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s (%s)", settings.project_name, settings.api_version, settings.environment)
        if settings.startup_db_check:
            # Raising here aborts startup.
            db.ping()
            logger.info("Database connection verified")
        logger.info("Health check: http://localhost:%s/api/health", settings.port)
        logger.info("Contacts API: http://localhost:%s/api/contacts", settings.port)
        yield
        db.dispose()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.db = db
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.middleware("http")(add_security_headers)

    setup_exception_handlers(app, settings)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.  The
# engine connects lazily, so importing does not touch the store.
app = create_app()
