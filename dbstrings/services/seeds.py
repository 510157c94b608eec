"""Bulk loading of translations."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from dbstrings.db.models import LocalizationRecord, utc_now
from dbstrings.domain.models import ResourceEntry
from dbstrings.logging import logger


def ensure_resource_entries(session: Session, entries: Iterable[ResourceEntry]) -> int:
    """Insert or update ``entries`` and commit; returns how many rows changed.

    Resolvers keep serving cached values until their locale is invalidated.
    """

    changed = 0
    for entry in entries:
        stmt = select(LocalizationRecord).where(
            LocalizationRecord.resource_name == entry.resource_name,
            LocalizationRecord.resource_culture == entry.locale,
            LocalizationRecord.content_key == entry.content_key,
        )
        record = session.execute(stmt).scalar_one_or_none()
        if record is None:
            session.add(
                LocalizationRecord(
                    resource_name=entry.resource_name,
                    resource_culture=entry.locale,
                    content_key=entry.content_key,
                    localized_content=entry.localized_content,
                )
            )
            changed += 1
        elif record.localized_content != entry.localized_content:
            record.localized_content = entry.localized_content
            record.updated_at = utc_now()
            changed += 1

    session.commit()
    logger.info("resource_entries_seeded", changed=changed)
    return changed


__all__ = ["ensure_resource_entries"]
