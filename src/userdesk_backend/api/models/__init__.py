"""Models used for API request and response payloads."""

from userdesk_backend.api.models.users import (
    PasswordChangeRequest,
    PasswordChangeResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserIdResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "PasswordChangeRequest",
    "PasswordChangeResponse",
    "UserCreateRequest",
    "UserCreateResponse",
    "UserIdResponse",
    "UserResponse",
    "UserUpdateRequest",
]
