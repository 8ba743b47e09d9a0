"""FastAPI dependencies for database access."""

from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from userdesk_backend.database.repositories import UserRepository
from userdesk_backend.database.service import DatabaseService
from userdesk_backend.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def _build_database_service(database_url: str) -> DatabaseService:
    """Create one :class:`DatabaseService` per connection string."""
    return DatabaseService(database_url)


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the database service bound to ``settings.database_url``."""
    return _build_database_service(settings.database_url)


def get_session(
    db: Annotated[DatabaseService, Depends(get_database)],
) -> Iterator[Session]:
    """Yield a request-scoped session; committed when the request succeeds."""
    with db.session() as session:
        yield session


def get_user_repository(
    session: Annotated[Session, Depends(get_session)],
) -> UserRepository:
    """Return a :class:`UserRepository` bound to the request session."""
    return UserRepository(session)
