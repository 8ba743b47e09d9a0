"""Declarative base for SQLAlchemy models."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Keeps generated constraint names in step with the alembic migrations.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
}


class BaseSchema(DeclarativeBase):
    """Base class for all SQLAlchemy schemas."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
