"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userdesk_backend.api.errors import register_error_handlers
from userdesk_backend.api.routers import users_router
from userdesk_backend.logger import configure_logging
from userdesk_backend.settings import get_settings


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = get_settings()
    configure_logging(config.log_level)

    app = FastAPI(title="Userdesk API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(users_router)
    return app
