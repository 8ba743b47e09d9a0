"""User management endpoints."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends

from userdesk_backend.api.dependencies import get_user_handlers
from userdesk_backend.api.errors import unwrap
from userdesk_backend.api.models import (
    PasswordChangeRequest,
    PasswordChangeResponse,
    UserCreateRequest,
    UserCreateResponse,
    UserIdResponse,
    UserResponse,
    UserUpdateRequest,
)
from userdesk_backend.api.services import UserRequestHandlers

router = APIRouter(prefix="/users", tags=["users"])

HandlersDep = Annotated[UserRequestHandlers, Depends(get_user_handlers)]


@router.get("", response_model=list[UserResponse])
def list_users(handlers: HandlersDep) -> list[UserResponse]:
    """Return every registered user."""

    users = unwrap(handlers.list_users())
    return [UserResponse.model_validate(user, from_attributes=True) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UUID, handlers: HandlersDep) -> UserResponse:
    """Return a single user by identifier."""

    user = unwrap(handlers.get_user(user_id))
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("", response_model=UserCreateResponse)
def create_user(payload: UserCreateRequest, handlers: HandlersDep) -> UserCreateResponse:
    """Create a user after checking the password confirmation and email."""

    created = unwrap(
        handlers.create_user(
            payload.name, payload.email, payload.password, payload.password_confirm
        )
    )
    return UserCreateResponse(**created)


@router.put("/{user_id}", response_model=UserIdResponse)
def update_user(
    user_id: UUID, payload: UserUpdateRequest, handlers: HandlersDep
) -> UserIdResponse:
    """Update a user's name and email."""

    updated = unwrap(handlers.update_user(user_id, payload.name, payload.email))
    return UserIdResponse(**updated)


@router.delete("/{user_id}", response_model=UserIdResponse)
def delete_user(user_id: UUID, handlers: HandlersDep) -> UserIdResponse:
    """Delete a user."""

    deleted = unwrap(handlers.delete_user(user_id))
    return UserIdResponse(**deleted)


@router.post(
    "/{user_id}/change-password",
    response_model=PasswordChangeResponse,
    response_model_exclude_none=True,
)
def change_password(
    user_id: UUID, payload: PasswordChangeRequest, handlers: HandlersDep
) -> PasswordChangeResponse:
    """Replace a user's password after verifying the current one."""

    changed = unwrap(
        handlers.update_password(
            user_id,
            payload.password_old,
            payload.password_new,
            payload.password_new_confirm,
        )
    )
    return PasswordChangeResponse(**changed)
