"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from functools import cache
from typing import Annotated

from fastapi import Depends

from userdesk_backend.api.services import (
    PasswordHasher,
    SqlUserService,
    UserRequestHandlers,
    UserService,
)
from userdesk_backend.database import UserRepository, get_user_repository
from userdesk_backend.settings import BackendSettings, get_settings


@cache
def _build_password_hasher(iterations: int) -> PasswordHasher:
    return PasswordHasher(iterations=iterations)


def get_password_hasher(
    settings: Annotated[BackendSettings, Depends(get_settings)],
) -> PasswordHasher:
    """Return the shared :class:`PasswordHasher` for the configured cost."""

    return _build_password_hasher(settings.password_hash_iterations)


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
    passwords: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """Return the request-scoped :class:`UserService`."""

    return SqlUserService(repository, passwords)


def get_user_handlers(
    users: Annotated[UserService, Depends(get_user_service)],
    passwords: Annotated[PasswordHasher, Depends(get_password_hasher)],
    settings: Annotated[BackendSettings, Depends(get_settings)],
) -> UserRequestHandlers:
    """Assemble :class:`UserRequestHandlers` for the current request."""

    return UserRequestHandlers(
        users, passwords, echo_new_password=settings.echo_new_password
    )


__all__ = ["get_password_hasher", "get_user_handlers", "get_user_service"]
