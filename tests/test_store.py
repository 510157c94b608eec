"""Tests for the SQLAlchemy and in-memory stores and translation seeding."""

from __future__ import annotations

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from dbstrings.db.models import LocalizationRecord
from dbstrings.domain.models import ResourceEntry
from dbstrings.services.exceptions import DuplicateResourceEntry
from dbstrings.services.seeds import ensure_resource_entries
from dbstrings.services.store import InMemoryResourceStore, ResourceStore


def _entry(locale: str, key: str, value: str | None = None) -> ResourceEntry:
    return ResourceEntry(
        resource_name="App.Strings",
        locale=locale,
        content_key=key,
        localized_content=value,
    )


def test_sql_store_reads_exact_pair_only(sql_store):
    sql_store.insert(_entry("zh", "Hello", "你好"))
    sql_store.insert(_entry("zh-CN", "Hello", "您好"))
    sql_store.insert(ResourceEntry(resource_name="Other", locale="zh", content_key="Hello"))

    assert sql_store.read_all("App.Strings", "zh") == [("Hello", "你好")]
    assert sql_store.read_all("App.Strings", "fr") == []


def test_sql_store_rejects_duplicate_triple(sql_store):
    sql_store.insert(_entry("en", "Hello"))

    with pytest.raises(IntegrityError):
        sql_store.insert(_entry("en", "Hello", "again"))

    assert sql_store.read_all("App.Strings", "en") == [("Hello", None)]


def test_stores_satisfy_protocol(sql_store):
    assert isinstance(sql_store, ResourceStore)
    assert isinstance(InMemoryResourceStore(), ResourceStore)


def test_in_memory_store_rejects_duplicate_triple():
    store = InMemoryResourceStore([_entry("en", "Hello", "Hello!")])

    with pytest.raises(DuplicateResourceEntry):
        store.insert(_entry("en", "Hello"))

    store.upsert(_entry("en", "Hello", "Hi!"))
    assert store.read_all("App.Strings", "en") == [("Hello", "Hi!")]
    assert store.entries() == [_entry("en", "Hello", "Hi!")]


def test_ensure_resource_entries_inserts_and_updates(session, sql_store):
    sql_store.insert(_entry("en", "Hello"))

    changed = ensure_resource_entries(
        session,
        [_entry("en", "Hello", "Hello!"), _entry("en", "Bye", "Goodbye")],
    )

    assert changed == 2
    assert dict(sql_store.read_all("App.Strings", "en")) == {"Hello": "Hello!", "Bye": "Goodbye"}

    unchanged = ensure_resource_entries(session, [_entry("en", "Hello", "Hello!")])
    assert unchanged == 0

    records = session.execute(select(LocalizationRecord)).scalars().all()
    assert len(records) == 2
    assert all(record.created_at is not None for record in records)


def test_resource_entry_requires_key():
    with pytest.raises(ValueError):
        ResourceEntry(resource_name="App.Strings", locale="en", content_key="")
