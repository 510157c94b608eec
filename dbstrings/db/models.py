"""SQLAlchemy model for stored localization records."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dbstrings.db.base import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LocalizationRecord(Base):
    __tablename__ = "localization_records"
    __table_args__ = (
        UniqueConstraint(
            "resource_name",
            "resource_culture",
            "content_key",
            name="uq_localization_records_name_culture_key",
        ),
        Index("ix_localization_records_name_culture", "resource_name", "resource_culture"),
    )

    resource_name: Mapped[str] = mapped_column(String(255), nullable=False)
    resource_culture: Mapped[str] = mapped_column(String(32), nullable=False)
    content_key: Mapped[str] = mapped_column(String(255), nullable=False)
    localized_content: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self) -> str:
        return (
            f"LocalizationRecord(resource_name={self.resource_name!r}, "
            f"resource_culture={self.resource_culture!r}, content_key={self.content_key!r})"
        )


__all__ = ["LocalizationRecord"]
