"""Repositories wrapping persistence operations."""

from userdesk_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
