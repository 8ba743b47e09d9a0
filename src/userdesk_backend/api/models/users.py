"""Pydantic models for user management endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

NAME_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 32


class UserResponse(BaseModel):
    """Public representation of a user account."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    name: str
    email: EmailStr
    created_at: datetime
    updated_at: datetime


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    password_confirm: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            msg = "name must not be empty"
            raise ValueError(msg)
        return value


class UserCreateResponse(BaseModel):
    """Response returned after a successful creation."""

    name: str
    email: EmailStr


class UserUpdateRequest(BaseModel):
    """Payload for updating a user's profile fields."""

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            msg = "name must not be empty"
            raise ValueError(msg)
        return value


class UserIdResponse(BaseModel):
    """Identifier of the user affected by an update or deletion."""

    id: UUID


class PasswordChangeRequest(BaseModel):
    """Payload for changing a user's password."""

    password_old: str
    password_new: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    password_new_confirm: str


class PasswordChangeResponse(BaseModel):
    """Response returned after a successful password change."""

    id: UUID
    message: str
    password_new: str | None = None
