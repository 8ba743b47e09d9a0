"""Typed errors, handler results and the shared JSON error stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from userdesk_backend.shared import ErrorKind

T = TypeVar("T")


class TypedError(Exception):
    """Failure carrying an :class:`ErrorKind` and a human-readable message."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str | None = None,
        *,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.kind = kind
        self.message = message or kind.description
        self.details = details
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedError):
            return NotImplemented
        return (self.kind, self.message) == (other.kind, other.message)

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"TypedError({self.kind!s}, {self.message!r})"

    def to_response(self) -> JSONResponse:
        body: dict[str, Any] = {
            "statusCode": self.kind.status_code,
            "error": self.kind.code,
            "description": self.kind.description,
            "message": self.message,
        }
        if self.details:
            body["details"] = self.details
        return JSONResponse(
            status_code=self.kind.status_code, content=jsonable_encoder(body)
        )


def error_responder(kind: ErrorKind, message: str) -> TypedError:
    """Build a :class:`TypedError` of ``kind`` with ``message``."""

    return TypedError(kind, message)


@dataclass(slots=True, frozen=True)
class Success(Generic[T]):
    """Successful handler outcome."""

    value: T


@dataclass(slots=True, frozen=True)
class Failure:
    """Rejected handler outcome."""

    error: TypedError


Result = Success[T] | Failure


def unwrap(result: Result[T]) -> T:
    """Return the success value or raise the failure's :class:`TypedError`."""

    if isinstance(result, Failure):
        raise result.error
    return result.value


async def _typed_error_handler(request: Request, exc: TypedError) -> JSONResponse:
    logger.warning(
        "{} {} rejected: {} ({})",
        request.method,
        request.url.path,
        exc.kind.code,
        exc.message,
    )
    return exc.to_response()


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    error = TypedError(ErrorKind.VALIDATION, "Invalid request", details=details)
    return await _typed_error_handler(request, error)


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        error = TypedError(ErrorKind.NOT_FOUND, "Route not found")
    elif exc.status_code >= 500:
        error = TypedError(ErrorKind.SERVER)
    else:
        error = TypedError(ErrorKind.BAD_REQUEST, str(exc.detail))
    return await _typed_error_handler(request, error)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        "Unhandled error on {} {}", request.method, request.url.path
    )
    return TypedError(ErrorKind.SERVER).to_response()


def register_error_handlers(app: FastAPI) -> None:
    """Attach the shared error stage to ``app``."""

    app.add_exception_handler(TypedError, _typed_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


__all__ = [
    "Failure",
    "Result",
    "Success",
    "TypedError",
    "error_responder",
    "register_error_handlers",
    "unwrap",
]
