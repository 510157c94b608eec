"""Database-backed localized strings with per-locale caching."""

from dbstrings.config import LocalizationSettings, get_settings
from dbstrings.domain.models import LocalizedString, ResourceEntry
from dbstrings.i18n import LocalizedStrings, Resolver, ResolverFactory, derive_resource_name
from dbstrings.main import create_resolver_factory
from dbstrings.services.exceptions import (
    DuplicateResourceEntry,
    LocalizationError,
    MissingManifestResource,
)
from dbstrings.services.store import InMemoryResourceStore, ResourceStore, SqlAlchemyResourceStore

__all__ = [
    "DuplicateResourceEntry",
    "InMemoryResourceStore",
    "LocalizationError",
    "LocalizationSettings",
    "LocalizedString",
    "LocalizedStrings",
    "MissingManifestResource",
    "Resolver",
    "ResolverFactory",
    "ResourceEntry",
    "ResourceStore",
    "SqlAlchemyResourceStore",
    "create_resolver_factory",
    "derive_resource_name",
    "get_settings",
]
