"""SQLAlchemy schemas mapped to database tables."""

from userdesk_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
