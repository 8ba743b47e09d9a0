"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from userdesk_backend.api.dependencies import _build_password_hasher
from userdesk_backend.api.services import PasswordHasher
from userdesk_backend.database import UserSchema
from userdesk_backend.settings import get_settings

TEST_HASH_ITERATIONS = 1_000


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    monkeypatch.setenv("PASSWORD_HASH_ITERATIONS", str(TEST_HASH_ITERATIONS))
    monkeypatch.setenv("ECHO_NEW_PASSWORD", "false")
    get_settings.cache_clear()
    _build_password_hasher.cache_clear()
    yield
    get_settings.cache_clear()
    _build_password_hasher.cache_clear()


class FakeUserService:
    """In-memory :class:`UserService` used to isolate handlers from the database."""

    def __init__(self, passwords: PasswordHasher) -> None:
        self._passwords = passwords
        self.store: dict[UUID, UserSchema] = {}
        self.fail_mutations = False

    def get_users(self) -> Sequence[UserSchema]:
        return list(self.store.values())

    def get_user(self, user_id: UUID) -> UserSchema | None:
        return self.store.get(user_id)

    def get_user_by_email(self, email: str) -> UserSchema | None:
        return next(
            (user for user in self.store.values() if user.email == email), None
        )

    def create_user(self, name: str, email: str, password: str) -> bool:
        if self.fail_mutations:
            return False
        timestamp = datetime.now(UTC)
        user = UserSchema(
            id=uuid4(),
            name=name,
            email=email,
            password_hash=self._passwords.hash_password(password),
            created_at=timestamp,
            updated_at=timestamp,
        )
        self.store[user.id] = user
        return True

    def update_user(self, user_id: UUID, name: str, email: str) -> bool:
        user = self.store.get(user_id)
        if user is None or self.fail_mutations:
            return False
        user.name = name
        user.email = email
        user.updated_at = datetime.now(UTC)
        return True

    def delete_user(self, user_id: UUID) -> bool:
        if self.fail_mutations:
            return False
        return self.store.pop(user_id, None) is not None

    def update_password(self, user_id: UUID, password: str) -> bool:
        user = self.store.get(user_id)
        if user is None or self.fail_mutations:
            return False
        user.password_hash = self._passwords.hash_password(password)
        return True


@pytest.fixture
def passwords() -> PasswordHasher:
    return PasswordHasher(iterations=TEST_HASH_ITERATIONS)


@pytest.fixture
def user_service(passwords: PasswordHasher) -> FakeUserService:
    return FakeUserService(passwords)
