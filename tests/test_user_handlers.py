from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from userdesk_backend.api.errors import Failure, Success, TypedError, unwrap
from userdesk_backend.api.services import UserRequestHandlers
from userdesk_backend.shared import ErrorKind

if TYPE_CHECKING:
    from userdesk_backend.api.services import PasswordHasher


@pytest.fixture
def handlers(user_service, passwords: PasswordHasher) -> UserRequestHandlers:
    return UserRequestHandlers(user_service, passwords)


def _create(handlers: UserRequestHandlers, email: str = "alice@example.com") -> None:
    result = handlers.create_user("Alice", email, "secret1", "secret1")
    assert isinstance(result, Success)


def _error_kind(result) -> ErrorKind:
    assert isinstance(result, Failure)
    return result.error.kind


def test_create_user_returns_name_and_email(handlers, user_service) -> None:
    result = handlers.create_user("Alice", "alice@example.com", "secret1", "secret1")

    assert result == Success({"name": "Alice", "email": "alice@example.com"})
    (user,) = user_service.store.values()
    assert unwrap(handlers.get_user(user.id)).email == "alice@example.com"
    assert user.password_hash != "secret1"


def test_create_user_rejects_password_mismatch(handlers, user_service) -> None:
    result = handlers.create_user("Alice", "alice@example.com", "secret1", "secret2")

    assert _error_kind(result) is ErrorKind.INVALID_PASSWORD
    assert user_service.store == {}


def test_create_user_rejects_taken_email(handlers, user_service) -> None:
    _create(handlers)

    result = handlers.create_user("Other", "alice@example.com", "secret1", "secret1")

    assert result == Failure(
        TypedError(
            ErrorKind.EMAIL_ALREADY_TAKEN,
            "Failed to create user, email is already taken",
        )
    )
    assert len(user_service.store) == 1


def test_create_user_reports_service_failure(handlers, user_service) -> None:
    user_service.fail_mutations = True

    result = handlers.create_user("Alice", "alice@example.com", "secret1", "secret1")

    assert _error_kind(result) is ErrorKind.UNPROCESSABLE_ENTITY


def test_get_unknown_user(handlers) -> None:
    result = handlers.get_user(uuid4())

    assert result == Failure(TypedError(ErrorKind.UNPROCESSABLE_ENTITY, "Unknown user"))


def test_list_users_returns_everything(handlers) -> None:
    _create(handlers, "alice@example.com")
    _create(handlers, "bob@example.com")

    users = unwrap(handlers.list_users())

    assert {user.email for user in users} == {"alice@example.com", "bob@example.com"}


def test_update_user(handlers, user_service) -> None:
    _create(handlers)
    (user,) = user_service.store.values()

    result = handlers.update_user(user.id, "Alicia", "alicia@example.com")

    assert result == Success({"id": user.id})
    assert user.name == "Alicia"
    assert user.email == "alicia@example.com"


def test_update_user_keeps_own_email(handlers, user_service) -> None:
    _create(handlers)
    (user,) = user_service.store.values()

    result = handlers.update_user(user.id, "Alicia", "alice@example.com")

    assert isinstance(result, Success)


def test_update_user_rejects_email_of_another_user(handlers, user_service) -> None:
    _create(handlers, "alice@example.com")
    _create(handlers, "bob@example.com")
    bob = user_service.get_user_by_email("bob@example.com")

    result = handlers.update_user(bob.id, "Bob", "alice@example.com")

    assert _error_kind(result) is ErrorKind.EMAIL_ALREADY_TAKEN
    assert bob.email == "bob@example.com"


def test_update_unknown_user(handlers) -> None:
    result = handlers.update_user(uuid4(), "Nobody", "nobody@example.com")

    assert result == Failure(
        TypedError(ErrorKind.UNPROCESSABLE_ENTITY, "Failed to update user")
    )


def test_delete_user_then_get_fails(handlers, user_service) -> None:
    _create(handlers)
    (user,) = user_service.store.values()

    assert handlers.delete_user(user.id) == Success({"id": user.id})
    assert _error_kind(handlers.get_user(user.id)) is ErrorKind.UNPROCESSABLE_ENTITY


def test_delete_unknown_user(handlers) -> None:
    assert _error_kind(handlers.delete_user(uuid4())) is ErrorKind.UNPROCESSABLE_ENTITY


def test_update_password_success(handlers, user_service, passwords) -> None:
    _create(handlers)
    (user,) = user_service.store.values()

    result = handlers.update_password(user.id, "secret1", "secret9", "secret9")

    assert result == Success(
        {"id": user.id, "message": "password was successfully updated"}
    )
    assert passwords.password_matched("secret9", user.password_hash)
    assert not passwords.password_matched("secret1", user.password_hash)


def test_update_password_echoes_new_password_when_enabled(
    user_service, passwords
) -> None:
    handlers = UserRequestHandlers(user_service, passwords, echo_new_password=True)
    _create(handlers)
    (user,) = user_service.store.values()

    payload = unwrap(handlers.update_password(user.id, "secret1", "secret9", "secret9"))

    assert payload["password_new"] == "secret9"


def test_update_password_rejects_confirmation_mismatch(handlers, user_service) -> None:
    _create(handlers)
    (user,) = user_service.store.values()

    result = handlers.update_password(user.id, "secret1", "secret9", "secret8")

    assert _error_kind(result) is ErrorKind.INVALID_PASSWORD


def test_update_password_rejects_wrong_old_password(
    handlers, user_service, passwords
) -> None:
    _create(handlers)
    (user,) = user_service.store.values()
    stored_hash = user.password_hash

    result = handlers.update_password(user.id, "wrong-one", "secret9", "secret9")

    assert result == Failure(
        TypedError(
            ErrorKind.INVALID_PASSWORD, "Failed to update password, wrong password"
        )
    )
    assert user.password_hash == stored_hash


def test_update_password_unknown_user(handlers) -> None:
    result = handlers.update_password(uuid4(), "secret1", "secret9", "secret9")

    assert result == Failure(TypedError(ErrorKind.UNPROCESSABLE_ENTITY, "Unknown user"))


def test_update_password_reports_server_failure(handlers, user_service) -> None:
    _create(handlers)
    (user,) = user_service.store.values()
    user_service.fail_mutations = True

    result = handlers.update_password(user.id, "secret1", "secret9", "secret9")

    assert _error_kind(result) is ErrorKind.SERVER


def test_service_exceptions_propagate(handlers, user_service, monkeypatch) -> None:
    def boom() -> None:
        raise RuntimeError("database is gone")

    monkeypatch.setattr(user_service, "get_users", boom)

    with pytest.raises(RuntimeError, match="database is gone"):
        handlers.list_users()


def test_unwrap_raises_typed_error() -> None:
    error = TypedError(ErrorKind.SERVER, "boom")

    with pytest.raises(TypedError) as exc_info:
        unwrap(Failure(error))

    assert exc_info.value is error
