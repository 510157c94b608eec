"""Backing stores for localization records."""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

from sqlalchemy import select

from dbstrings.db.models import LocalizationRecord
from dbstrings.db.session import Database
from dbstrings.domain.models import ResourceEntry
from dbstrings.services.exceptions import DuplicateResourceEntry

ResourcePairs = list[tuple[str, str | None]]


@runtime_checkable
class ResourceStore(Protocol):
    """What the resource cache needs from persistence.

    ``read_all`` returns every ``(content_key, localized_content)`` pair stored
    for exactly ``(resource_name, locale)``, or an empty list. ``insert`` must
    reject a duplicate ``(resource_name, locale, content_key)`` triple by
    raising.
    """

    def read_all(self, resource_name: str, locale: str) -> ResourcePairs: ...

    def insert(self, entry: ResourceEntry) -> None: ...


class SqlAlchemyResourceStore:
    def __init__(self, database: Database) -> None:
        self.database = database

    def read_all(self, resource_name: str, locale: str) -> ResourcePairs:
        stmt = (
            select(LocalizationRecord.content_key, LocalizationRecord.localized_content)
            .where(
                LocalizationRecord.resource_name == resource_name,
                LocalizationRecord.resource_culture == locale,
            )
            .order_by(LocalizationRecord.id)
        )
        with self.database.session() as session:
            result = session.execute(stmt)
            return [(row.content_key, row.localized_content) for row in result]

    def insert(self, entry: ResourceEntry) -> None:
        # IntegrityError from the unique constraint propagates after rollback.
        with self.database.session() as session:
            session.add(
                LocalizationRecord(
                    resource_name=entry.resource_name,
                    resource_culture=entry.locale,
                    content_key=entry.content_key,
                    localized_content=entry.localized_content,
                )
            )
            session.commit()


class InMemoryResourceStore:
    """Dictionary-backed store, handy for tests and for embedding fixed tables."""

    def __init__(self, entries: list[ResourceEntry] | None = None) -> None:
        self._lock = threading.Lock()
        self._table: dict[tuple[str, str], dict[str, str | None]] = {}
        for entry in entries or ():
            self.insert(entry)

    def read_all(self, resource_name: str, locale: str) -> ResourcePairs:
        with self._lock:
            return list(self._table.get((resource_name, locale), {}).items())

    def insert(self, entry: ResourceEntry) -> None:
        with self._lock:
            rows = self._table.setdefault((entry.resource_name, entry.locale), {})
            if entry.content_key in rows:
                raise DuplicateResourceEntry(
                    f"{entry.resource_name}/{entry.locale}/{entry.content_key} already exists"
                )
            rows[entry.content_key] = entry.localized_content

    def upsert(self, entry: ResourceEntry) -> None:
        with self._lock:
            rows = self._table.setdefault((entry.resource_name, entry.locale), {})
            rows[entry.content_key] = entry.localized_content

    def entries(self) -> list[ResourceEntry]:
        with self._lock:
            return [
                ResourceEntry(
                    resource_name=name,
                    locale=locale,
                    content_key=key,
                    localized_content=value,
                )
                for (name, locale), rows in self._table.items()
                for key, value in rows.items()
            ]


__all__ = [
    "InMemoryResourceStore",
    "ResourcePairs",
    "ResourceStore",
    "SqlAlchemyResourceStore",
]
