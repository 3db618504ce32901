"""Entry point that serves the invoice dashboard with Uvicorn.

Host and port are read from the environment variables ``HOST`` and
``PORT`` (defaults ``0.0.0.0`` and ``8000``).  Database location,
secret key and log level are configured as described in
``invoice_dashboard.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from invoice_dashboard.app.core.config import settings
from invoice_dashboard.app.main import app


async def main() -> None:
    """Serve the dashboard until interrupted."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%d", settings.project_name, host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
