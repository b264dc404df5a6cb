"""Declarative base and shared columns."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from cortex.domain.shared.time import utc_now


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """``created_at`` is indexed because every listing sorts on it."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        index=True,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
    )
