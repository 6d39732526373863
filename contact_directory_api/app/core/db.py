"""
Relational store integration.

The contact directory reads from an externally owned MySQL schema;
this service never creates, alters or writes tables.  Access goes
through a SQLAlchemy ``Engine`` whose connection pool is the only
resource shared between requests.

The engine is wrapped in a small ``Database`` handle that is created
by ``create_app`` (or passed in by the caller, e.g. tests using an
in‑memory SQLite engine) and stored on ``app.state``.  Route handlers
obtain it through the ``get_db`` dependency, so there is no
module‑level pool.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

from .config import Settings

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """Build the pooled engine described by ``settings``.

    Pool sizing options only apply to server backends; SQLite URLs
    (handy for local experiments) use SQLAlchemy's default pool.
    """
    url = settings.sqlalchemy_url()
    if url.get_backend_name() == "sqlite":
        return create_engine(url)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )


class Database:
    """Explicitly owned handle around the pooled engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Check a connection out of the pool for the duration of a block.

        The connection is returned to the pool on every exit path,
        including when the block raises.
        """
        with self.engine.connect() as conn:
            yield conn

    def fetch_all(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """Run a read query and return its rows as plain dictionaries."""
        with self.connect() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            return [dict(row) for row in result.mappings()]

    def fetch_one(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
        """Run a read query and return its first row, or ``None``."""
        with self.connect() as conn:
            row = conn.execute(text(sql), dict(params or {})).mappings().first()
            return dict(row) if row is not None else None

    def fetch_value(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Run a read query and return the first column of its first row."""
        with self.connect() as conn:
            return conn.execute(text(sql), dict(params or {})).scalar()

    def ping(self) -> None:
        """Round‑trip a trivial query; raises if the store is unreachable."""
        self.fetch_value("SELECT 1")

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connection pool disposed")


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's database handle."""
    return request.app.state.db
