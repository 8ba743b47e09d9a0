"""Database connectivity helpers and configuration objects."""

from userdesk_backend.database.base import BaseSchema
from userdesk_backend.database.dependencies import (
    get_database,
    get_session,
    get_user_repository,
)
from userdesk_backend.database.repositories import UserRepository
from userdesk_backend.database.schemas import UserSchema
from userdesk_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_user_repository",
]
