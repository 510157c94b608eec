"""Declarative base for SQLAlchemy models."""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
IdType = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Declarative base with a surrogate integer key."""

    id: Mapped[int] = mapped_column(IdType, primary_key=True)


__all__ = ["Base", "IdType"]
