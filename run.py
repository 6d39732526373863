"""Entry point for the Contact Directory API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (or a ``.env`` file in
the working directory); defaults are ``0.0.0.0`` and ``3000``.

Usage:
    python run.py
"""
from uvicorn import Config, Server

from contact_directory_api.app.core.config import settings
from contact_directory_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
