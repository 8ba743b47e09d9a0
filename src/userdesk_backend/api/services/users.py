"""User service interface and its SQLAlchemy implementation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID, uuid4

from loguru import logger
from sqlalchemy.exc import IntegrityError

from userdesk_backend.api.services.passwords import PasswordHasher
from userdesk_backend.database import UserRepository, UserSchema


class UserService(Protocol):
    """Lookups and mutations of user accounts.

    Mutations report success as a boolean instead of raising for expected
    failures such as an unknown id or a duplicate email.
    """

    def get_users(self) -> Sequence[UserSchema]: ...

    def get_user(self, user_id: UUID) -> UserSchema | None: ...

    def get_user_by_email(self, email: str) -> UserSchema | None: ...

    def create_user(self, name: str, email: str, password: str) -> bool: ...

    def update_user(self, user_id: UUID, name: str, email: str) -> bool: ...

    def delete_user(self, user_id: UUID) -> bool: ...

    def update_password(self, user_id: UUID, password: str) -> bool: ...


class SqlUserService:
    """:class:`UserService` backed by the ``users`` table."""

    def __init__(self, repository: UserRepository, passwords: PasswordHasher) -> None:
        self._repository = repository
        self._passwords = passwords

    def get_users(self) -> Sequence[UserSchema]:
        return self._repository.list_all()

    def get_user(self, user_id: UUID) -> UserSchema | None:
        return self._repository.get_by_id(user_id)

    def get_user_by_email(self, email: str) -> UserSchema | None:
        return self._repository.get_by_email(email)

    def create_user(self, name: str, email: str, password: str) -> bool:
        user = UserSchema(
            id=uuid4(),
            name=name,
            email=email,
            password_hash=self._passwords.hash_password(password),
        )
        try:
            with self._repository.savepoint():
                self._repository.add(user)
        except IntegrityError:
            logger.warning("Insert of user with email {} violated a constraint", email)
            return False
        logger.info("Created user {}", user.id)
        return True

    def update_user(self, user_id: UUID, name: str, email: str) -> bool:
        user = self._repository.get_by_id(user_id)
        if user is None:
            return False
        try:
            with self._repository.savepoint():
                user.name = name
                user.email = email
                self._repository.save(user)
        except IntegrityError:
            logger.warning("Update of user {} violated a constraint", user_id)
            self._repository.refresh(user)
            return False
        logger.info("Updated user {}", user_id)
        return True

    def delete_user(self, user_id: UUID) -> bool:
        user = self._repository.get_by_id(user_id)
        if user is None:
            return False
        self._repository.delete(user)
        logger.info("Deleted user {}", user_id)
        return True

    def update_password(self, user_id: UUID, password: str) -> bool:
        user = self._repository.get_by_id(user_id)
        if user is None:
            return False
        user.password_hash = self._passwords.hash_password(password)
        self._repository.save(user)
        logger.info("Updated password of user {}", user_id)
        return True
