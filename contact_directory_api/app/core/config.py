"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) so local deployments can keep
credentials out of the shell.  Defaults are provided for all fields.
Settings are read once at import time; there is no hot reload.

The relational store is configured either through the individual
``DB_*`` variables or through a single ``DATABASE_URL`` connection
string, which takes precedence when set.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL, make_url

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Contact Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # ``production`` hides exception details from error bodies.  Any
    # other value (``development``, ``staging``...) exposes them in the
    # ``message`` field.
    environment: str = os.getenv("APP_ENV", "production")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    db_host: str = os.getenv("DB_HOST", "localhost")
    db_user: str = os.getenv("DB_USER", "root")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_name: str = os.getenv("DB_NAME", "nahcongov_contacts23")
    db_port: int = int(os.getenv("DB_PORT", "3306"))

    # Full connection string.  When set it overrides the DB_* fields
    # above.  ``mysql://`` URLs are rewritten to the PyMySQL dialect.
    database_url: Optional[str] = os.getenv("DATABASE_URL") or None

    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))
    db_max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "0"))
    db_pool_timeout: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # When enabled, the application refuses to start if the store
    # cannot be reached.  Otherwise /api/health reports degraded status.
    startup_db_check: bool = _env_flag("STARTUP_DB_CHECK")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def sqlalchemy_url(self) -> URL:
        """Return the SQLAlchemy URL for the configured store."""
        if self.database_url:
            url = make_url(self.database_url)
            if url.drivername == "mysql":
                url = url.set(drivername="mysql+pymysql")
            return url
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
