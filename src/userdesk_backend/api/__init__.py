"""API layer: application factory, routers, models and handlers."""

from userdesk_backend.api.app import create_api

__all__ = ["create_api"]
