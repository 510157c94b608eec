"""Per-locale resource sets and key lists kept in front of the store."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from dbstrings.i18n.locales import ParentLocale, locale_chain, parent_locale
from dbstrings.logging import logger
from dbstrings.services.store import ResourceStore

LocaleSet = Mapping[str, str | None]


def resource_cache_key(resource_name: str, locale: str) -> str:
    return f"Culture={locale};resourceName={resource_name}"


def _require_pair(resource_name: str, locale: str) -> None:
    if not resource_name:
        raise ValueError("resource_name can not be null or empty.")
    if not locale:
        raise ValueError("locale can not be null or empty.")


class ResourceCache:
    """Lazily loaded ``{(resource name, locale) -> {key -> content}}`` mapping.

    Loads are not serialized: two threads missing the same pair both read the
    store and the later write wins. Cached sets are replaced, never mutated,
    so readers can iterate them without locking.
    """

    def __init__(self, store: ResourceStore, *, parent: ParentLocale = parent_locale) -> None:
        self.store = store
        self._parent = parent
        self._sets: dict[str, dict[str, str | None]] = {}

    def locale_chain(self, locale: str) -> list[str]:
        return locale_chain(locale, self._parent)

    def load(self, resource_name: str, locale: str) -> None:
        _require_pair(resource_name, locale)
        key = resource_cache_key(resource_name, locale)
        if key in self._sets:
            return
        resources = dict(self.store.read_all(resource_name, locale))
        self._sets[key] = resources
        logger.debug(
            "resource_set_loaded",
            resource_name=resource_name,
            locale=locale,
            count=len(resources),
        )

    def get(
        self, resource_name: str, locale: str, include_ancestors: bool = False
    ) -> LocaleSet | None:
        """Exact set for ``locale``, or the merge of its whole chain.

        Without ancestors ``None`` means the set was not cached after loading.
        With ancestors the result is never ``None``; keys from more specific
        locales win over the same keys further up the chain.
        """

        self.load(resource_name, locale)
        if not include_ancestors:
            resources = self._sets.get(resource_cache_key(resource_name, locale))
            return MappingProxyType(resources) if resources is not None else None

        merged: dict[str, str | None] = {}
        for step in self.locale_chain(locale):
            self.load(resource_name, step)
            for content_key, content in self._sets.get(
                resource_cache_key(resource_name, step), {}
            ).items():
                merged.setdefault(content_key, content)
        return MappingProxyType(merged)

    def invalidate(self, resource_name: str, locale: str) -> None:
        _require_pair(resource_name, locale)
        if self._sets.pop(resource_cache_key(resource_name, locale), None) is not None:
            logger.debug("resource_set_invalidated", resource_name=resource_name, locale=locale)

    def __contains__(self, key: object) -> bool:
        return key in self._sets


class NameListCache:
    """Known content keys per ``resource_cache_key``."""

    def __init__(self) -> None:
        self._names: dict[str, tuple[str, ...]] = {}

    def get_or_add(
        self, cache_key: str, factory: Callable[[], tuple[str, ...] | None]
    ) -> tuple[str, ...] | None:
        names = self._names.get(cache_key)
        if names is None:
            names = factory()
            if names is not None:
                names = self._names.setdefault(cache_key, names)
        return names

    def invalidate(self, cache_key: str) -> None:
        self._names.pop(cache_key, None)


__all__ = ["LocaleSet", "NameListCache", "ResourceCache", "resource_cache_key"]
