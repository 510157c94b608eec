"""Pydantic models shared between the store and the resolvers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResourceEntry(BaseModel):
    """One translatable string as stored in the backing table."""

    model_config = ConfigDict(frozen=True)

    resource_name: str = Field(min_length=1)
    locale: str
    content_key: str = Field(min_length=1)
    localized_content: str | None = None


class LocalizedString(BaseModel):
    """Result of a lookup: the key, the display value and whether it was found."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    resource_not_found: bool = False
    searched_location: str | None = None

    @property
    def found(self) -> bool:
        return not self.resource_not_found

    def __str__(self) -> str:
        return self.value


__all__ = ["LocalizedString", "ResourceEntry"]
