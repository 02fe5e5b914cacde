"""SQLAlchemy Declarative Base - shared base class and timestamp columns for all ORM models.

Invariants:
    - All models inherit from Base
    - created_at/updated_at are stamped by the database server, never by the app process

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - eager_defaults: server-generated timestamps come back on flush (no lazy load in async)
"""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all enrollment ORM models."""
    pass


class TimestampMixin:
    """Server-stamped creation/update times."""
    __mapper_args__ = {"eager_defaults": True}

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
