"""Shared pytest fixtures for database-backed localization tests."""

from __future__ import annotations

import pytest
import structlog
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from dbstrings.config import LocalizationSettings
from dbstrings.db.session import Database
from dbstrings.domain.models import ResourceEntry
from dbstrings.services.store import SqlAlchemyResourceStore


class CountingStore:
    """Wraps a store and records every call made to it."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.reads: list[tuple[str, str]] = []
        self.inserts: list[ResourceEntry] = []

    def read_all(self, resource_name: str, locale: str):
        self.reads.append((resource_name, locale))
        return self.inner.read_all(resource_name, locale)

    def insert(self, entry: ResourceEntry) -> None:
        self.inserts.append(entry)
        self.inner.insert(entry)

    def reads_of(self, locale: str) -> int:
        return sum(1 for _, read_locale in self.reads if read_locale == locale)


def make_settings(**overrides) -> LocalizationSettings:
    return LocalizationSettings(_env_file=None, **overrides)


def entry(resource_name: str, locale: str, key: str, value: str | None = None) -> ResourceEntry:
    return ResourceEntry(
        resource_name=resource_name,
        locale=locale,
        content_key=key,
        localized_content=value,
    )


@pytest.fixture
def settings() -> LocalizationSettings:
    return make_settings()


@pytest.fixture
def database(settings):
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(settings=settings, engine=engine)
    db.create_schema()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def session(database):
    with database.session() as db_session:
        yield db_session


@pytest.fixture
def sql_store(database) -> SqlAlchemyResourceStore:
    return SqlAlchemyResourceStore(database)


@pytest.fixture
def store(sql_store) -> CountingStore:
    return CountingStore(sql_store)


@pytest.fixture
def seed(sql_store):
    def _seed(resource_name: str, locale: str, key: str, value: str | None = None) -> ResourceEntry:
        new_entry = entry(resource_name, locale, key, value)
        sql_store.insert(new_entry)
        return new_entry

    return _seed


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def structlog_config():
    """Restore the global structlog configuration after the test."""

    saved = structlog.get_config()
    yield
    structlog.configure(**saved)
