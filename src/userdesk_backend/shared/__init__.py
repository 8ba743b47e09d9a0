"""Shared enumerations and cross-cutting helpers for the backend."""

from userdesk_backend.shared.enums import ErrorKind

__all__ = ["ErrorKind"]
