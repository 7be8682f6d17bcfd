"""Entry point serving the Club Manager API with uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``).  Other configuration,
such as ``SECRET_KEY`` and ``DATABASE_URL``, is described in
``club_manager_api/app/core/config.py``.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from club_manager_api.app.core.config import settings
from club_manager_api.app.main import app


def main() -> None:
    """Start the API server and block until it exits."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Club Manager API listening on http://%s:%s", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
