"""Userdesk API entrypoint."""

from __future__ import annotations

import uvicorn
from loguru import logger

from userdesk_backend.api import create_api
from userdesk_backend.settings import get_settings

app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    logger.info("Starting Userdesk API on {}:{}", config.api_host, config.api_port)
    uvicorn.run(
        "userdesk_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_config=None,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
