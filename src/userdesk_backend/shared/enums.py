"""Shared enumerations used across the backend."""

from enum import StrEnum
from http import HTTPStatus


class ErrorKind(StrEnum):
    """Kinds of typed errors surfaced to API clients."""

    BAD_REQUEST = "BAD_REQUEST"
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    EMAIL_ALREADY_TAKEN = "EMAIL_ALREADY_TAKEN"
    UNPROCESSABLE_ENTITY = "UNPROCESSABLE_ENTITY"
    SERVER = "SERVER"

    @property
    def status_code(self) -> int:
        return _ERROR_DETAILS[self][0]

    @property
    def code(self) -> str:
        return _ERROR_DETAILS[self][1]

    @property
    def description(self) -> str:
        return _ERROR_DETAILS[self][2]


_ERROR_DETAILS: dict[ErrorKind, tuple[int, str, str]] = {
    ErrorKind.BAD_REQUEST: (
        HTTPStatus.BAD_REQUEST,
        "BAD_REQUEST_ERROR",
        "Bad request",
    ),
    ErrorKind.VALIDATION: (
        HTTPStatus.BAD_REQUEST,
        "VALIDATION_ERROR",
        "Invalid request payload",
    ),
    ErrorKind.NOT_FOUND: (
        HTTPStatus.NOT_FOUND,
        "ROUTE_NOT_FOUND_ERROR",
        "Route not found",
    ),
    ErrorKind.INVALID_PASSWORD: (
        HTTPStatus.FORBIDDEN,
        "INVALID_PASSWORD_ERROR",
        "Invalid password",
    ),
    ErrorKind.EMAIL_ALREADY_TAKEN: (
        HTTPStatus.CONFLICT,
        "EMAIL_ALREADY_TAKEN_ERROR",
        "Email is already registered",
    ),
    ErrorKind.UNPROCESSABLE_ENTITY: (
        HTTPStatus.UNPROCESSABLE_ENTITY,
        "UNPROCESSABLE_ENTITY_ERROR",
        "Unprocessable entity",
    ),
    ErrorKind.SERVER: (
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "SERVER_ERROR",
        "Internal server error",
    ),
}
