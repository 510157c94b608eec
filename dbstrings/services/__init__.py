from dbstrings.services.exceptions import (
    DuplicateResourceEntry,
    LocalizationError,
    MissingManifestResource,
)
from dbstrings.services.seeds import ensure_resource_entries
from dbstrings.services.store import InMemoryResourceStore, ResourceStore, SqlAlchemyResourceStore

__all__ = [
    "DuplicateResourceEntry",
    "InMemoryResourceStore",
    "LocalizationError",
    "MissingManifestResource",
    "ResourceStore",
    "SqlAlchemyResourceStore",
    "ensure_resource_entries",
]
