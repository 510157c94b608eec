"""SQLAlchemy session management."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from dbstrings.config import LocalizationSettings, get_settings
from dbstrings.db.base import Base
from dbstrings.logging import logger


class Database:
    """Lazy SQLAlchemy engine/session factory wrapper."""

    def __init__(
        self,
        settings: LocalizationSettings | None = None,
        *,
        engine: Engine | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._engine = engine
        self._session_factory: sessionmaker[Session] | None = None

    def _ensure_engine(self) -> None:
        if self._engine is None:
            db_cfg = self.settings.database
            self._engine = create_engine(
                db_cfg.dsn,
                echo=db_cfg.echo,
                pool_recycle=db_cfg.pool_recycle,
                pool_pre_ping=db_cfg.pool_pre_ping,
            )
            logger.info("db_engine_initialized", dsn=self._engine.url.render_as_string())
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self._engine,
                expire_on_commit=False,
                autoflush=False,
            )

    @property
    def engine(self) -> Engine:
        self._ensure_engine()
        assert self._engine is not None
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        self._ensure_engine()
        assert self._session_factory is not None
        return self._session_factory

    @contextmanager
    def session(self) -> Iterator[Session]:
        factory = self.session_factory
        with factory() as session:
            try:
                yield session
            except Exception:
                session.rollback()
                raise

    def create_schema(self) -> None:
        """Create the localization tables if they do not exist yet."""

        # Model import registers the table on Base.metadata.
        from dbstrings.db import models  # noqa: F401

        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()


__all__ = ["Database"]
