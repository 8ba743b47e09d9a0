"""Repository helpers for working with users."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session, SessionTransaction

from userdesk_backend.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> Sequence[UserSchema]:
        """Return all users ordered by creation time."""
        stmt = select(UserSchema).order_by(UserSchema.created_at, UserSchema.email)
        return self._session.scalars(stmt).all()

    def get_by_id(self, user_id: UUID) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def get_by_email(self, email: str) -> UserSchema | None:
        """Return user entity by user's email."""
        stmt = select(UserSchema).where(UserSchema.email == email)
        return self._session.scalar(stmt)

    def add(self, user: UserSchema) -> UserSchema:
        """Add new user to database."""
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user

    def save(self, user: UserSchema) -> UserSchema:
        """Flush pending changes of an already persisted user."""
        self._session.flush()
        self._session.refresh(user)
        return user

    def delete(self, user: UserSchema) -> None:
        """Remove user from database."""
        self._session.delete(user)
        self._session.flush()

    def savepoint(self) -> SessionTransaction:
        """Open a nested transaction; changes inside roll back on error."""
        return self._session.begin_nested()

    def refresh(self, user: UserSchema) -> None:
        """Reload user attributes from the database."""
        self._session.refresh(user)
