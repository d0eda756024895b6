"""Base model utilities for SQLAlchemy."""

from enum import Enum
from typing import Type

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy import Enum as SAEnum
from sqlalchemy.sql import func


def enum_column_type(enum_cls: Type[Enum], name: str) -> SAEnum:
    """Store an enum by value (``"take-profit"``), not by member name."""
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        validate_strings=True,
        values_callable=lambda members: [member.value for member in members],
    )


class TimestampMixin:
    """Mixin that adds created_at and updated_at fields to models."""

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="When the record was created",
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
        comment="When the record was last updated",
    )


class IntegerIDMixin:
    """Mixin that adds an autoincrement integer primary key."""

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier",
    )
