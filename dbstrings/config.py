"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    dsn: str = Field(
        default="sqlite:///./dbstrings.db",
        description="SQLAlchemy DSN of the database holding localization records.",
    )
    echo: bool = False
    pool_recycle: int = Field(default=3600, ge=30)
    pool_pre_ping: bool = Field(default=True)


class LocalizationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DBSTRINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    auto_create_missing: bool = Field(
        default=False,
        description="Insert an empty record for every key a lookup could not resolve.",
    )
    resources_path: str | None = Field(
        default=None,
        description="Resource sub-path inserted between root namespace and type name.",
    )
    resource_locations: dict[str, str] = Field(
        default_factory=dict,
        description="Per-package override of resources_path.",
    )
    root_namespaces: dict[str, str] = Field(
        default_factory=dict,
        description="Per-package root namespace; defaults to the package name.",
    )
    default_locale: str = Field(default="en", min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("resources_path", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def resource_subpath_for(self, package: str) -> str | None:
        """Resource location configured for ``package``, falling back to the global path."""

        return self.resource_locations.get(package, self.resources_path)

    def root_namespace_for(self, package: str) -> str:
        return self.root_namespaces.get(package, package)


@lru_cache
def get_settings() -> LocalizationSettings:
    """Return cached settings instance."""

    return LocalizationSettings()


__all__ = [
    "DatabaseSettings",
    "LocalizationSettings",
    "get_settings",
]
