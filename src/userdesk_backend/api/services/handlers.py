"""Request handlers for user account management.

Each handler validates its inputs, delegates to a :class:`UserService` and
returns a :class:`Success` or a :class:`Failure` carrying a typed error.
Exceptions raised by the service are left to the application error stage.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from loguru import logger

from userdesk_backend.api.errors import Failure, Result, Success, error_responder
from userdesk_backend.api.services.passwords import PasswordHasher
from userdesk_backend.api.services.users import UserService
from userdesk_backend.database import UserSchema
from userdesk_backend.shared import ErrorKind

PASSWORD_UPDATED_MESSAGE = "password was successfully updated"


def _fail(kind: ErrorKind, message: str) -> Failure:
    logger.debug("Rejected user request: {}", message)
    return Failure(error_responder(kind, message))


class UserRequestHandlers:
    """Stateless handlers for the ``/users`` resource."""

    def __init__(
        self,
        users: UserService,
        passwords: PasswordHasher,
        *,
        echo_new_password: bool = False,
    ) -> None:
        self._users = users
        self._passwords = passwords
        self._echo_new_password = echo_new_password

    def list_users(self) -> Result[Sequence[UserSchema]]:
        return Success(self._users.get_users())

    def get_user(self, user_id: UUID) -> Result[UserSchema]:
        user = self._users.get_user(user_id)
        if user is None:
            return _fail(ErrorKind.UNPROCESSABLE_ENTITY, "Unknown user")
        return Success(user)

    def create_user(
        self, name: str, email: str, password: str, password_confirm: str
    ) -> Result[dict[str, Any]]:
        if password != password_confirm:
            return _fail(
                ErrorKind.INVALID_PASSWORD,
                "Failed to create user, password is not same",
            )

        if self._users.get_user_by_email(email) is not None:
            return _fail(
                ErrorKind.EMAIL_ALREADY_TAKEN,
                "Failed to create user, email is already taken",
            )

        if not self._users.create_user(name, email, password):
            return _fail(ErrorKind.UNPROCESSABLE_ENTITY, "Failed to create user")

        return Success({"name": name, "email": email})

    def update_user(self, user_id: UUID, name: str, email: str) -> Result[dict[str, Any]]:
        # Emails stay unique across updates as well as creates.
        owner = self._users.get_user_by_email(email)
        if owner is not None and owner.id != user_id:
            return _fail(
                ErrorKind.EMAIL_ALREADY_TAKEN,
                "Failed to update user, email is already taken",
            )

        if not self._users.update_user(user_id, name, email):
            return _fail(ErrorKind.UNPROCESSABLE_ENTITY, "Failed to update user")

        return Success({"id": user_id})

    def delete_user(self, user_id: UUID) -> Result[dict[str, Any]]:
        if not self._users.delete_user(user_id):
            return _fail(ErrorKind.UNPROCESSABLE_ENTITY, "Failed to delete user")

        return Success({"id": user_id})

    def update_password(
        self,
        user_id: UUID,
        password_old: str,
        password_new: str,
        password_new_confirm: str,
    ) -> Result[dict[str, Any]]:
        if password_new != password_new_confirm:
            return _fail(
                ErrorKind.INVALID_PASSWORD,
                "Failed to update password, new password is not same",
            )

        user = self._users.get_user(user_id)
        if user is None:
            return _fail(ErrorKind.UNPROCESSABLE_ENTITY, "Unknown user")

        if not self._passwords.password_matched(password_old, user.password_hash):
            return _fail(
                ErrorKind.INVALID_PASSWORD,
                "Failed to update password, wrong password",
            )

        if not self._users.update_password(user_id, password_new):
            return _fail(
                ErrorKind.SERVER, "password is not updated, Something is wrong"
            )

        payload: dict[str, Any] = {"id": user_id, "message": PASSWORD_UPDATED_MESSAGE}
        if self._echo_new_password:
            payload["password_new"] = password_new
        return Success(payload)
