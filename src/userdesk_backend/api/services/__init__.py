"""Service layer for API-specific business logic."""

from userdesk_backend.api.services.handlers import UserRequestHandlers
from userdesk_backend.api.services.passwords import PasswordHasher
from userdesk_backend.api.services.users import SqlUserService, UserService

__all__ = [
    "PasswordHasher",
    "SqlUserService",
    "UserRequestHandlers",
    "UserService",
]
