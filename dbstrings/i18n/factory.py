"""Creation and caching of resolvers per resource identity."""

from __future__ import annotations

from dbstrings.config import LocalizationSettings, get_settings
from dbstrings.i18n.cache import NameListCache, ResourceCache
from dbstrings.i18n.locales import ParentLocale, normalize_locale, parent_locale
from dbstrings.i18n.resolver import Resolver
from dbstrings.logging import logger
from dbstrings.services.store import ResourceStore


def _trim_prefix(name: str, prefix: str) -> str:
    return name[len(prefix):] if name.startswith(prefix) else name


def _normalize_subpath(resources_subpath: str | None) -> str:
    if not resources_subpath:
        return ""
    subpath = resources_subpath.replace("/", ".").replace("\\", ".")
    return subpath.strip(".")


def derive_resource_name(
    full_name: str, root_namespace: str | None, resources_subpath: str | None
) -> str:
    """Resource name under which the strings of ``full_name`` are stored.

    Without a sub-path the full name is used as is. Otherwise the result is
    ``{root_namespace}.{subpath}.{full_name minus root_namespace}``, so
    ``derive_resource_name("shop.views.Cart", "shop", "resources")`` gives
    ``"shop.resources.views.Cart"``.
    """

    if not full_name:
        raise ValueError("full_name can not be null or empty.")
    subpath = _normalize_subpath(resources_subpath)
    if not subpath:
        return full_name
    if not root_namespace:
        raise ValueError("root_namespace can not be null or empty.")
    return f"{root_namespace}.{subpath}.{_trim_prefix(full_name, root_namespace + '.')}"


def type_cache_key(source: type) -> str:
    return f"{source.__module__}.{source.__qualname__}"


def name_cache_key(base_name: str, location: str) -> str:
    return f"B={base_name},L={location}"


def _require(value: str | None, argument: str) -> str:
    if not value:
        raise ValueError(f"{argument} can not be null or empty.")
    return value


def _require_type(source: type | None) -> type:
    if source is None:
        raise ValueError("source can not be None.")
    if not isinstance(source, type):
        raise TypeError(f"source must be a class, got {type(source).__name__}.")
    return source


class ResolverFactory:
    """Hands out one ``Resolver`` per class or ``(base_name, location)`` pair.

    All resolvers of a factory share its resource cache and key-list cache;
    nothing is shared between factories.
    """

    def __init__(
        self,
        store: ResourceStore,
        settings: LocalizationSettings | None = None,
        *,
        parent: ParentLocale = parent_locale,
    ) -> None:
        self.settings = settings or get_settings()
        self._cache = ResourceCache(store, parent=parent)
        self._names = NameListCache()
        self._resolvers: dict[str, Resolver] = {}

    @property
    def store(self) -> ResourceStore:
        return self._cache.store

    def get_or_create(self, source: type) -> Resolver:
        source = _require_type(source)
        key = type_cache_key(source)
        resolver = self._resolvers.get(key)
        if resolver is None:
            resolver = self._resolvers.setdefault(
                key, self._create_resolver(self.resource_name_for(source))
            )
        return resolver

    def get_or_create_by_name(self, base_name: str, location: str) -> Resolver:
        _require(base_name, "base_name")
        _require(location, "location")
        key = name_cache_key(base_name, location)
        resolver = self._resolvers.get(key)
        if resolver is None:
            resolver = self._resolvers.setdefault(
                key, self._create_resolver(self.resource_name_for_name(base_name, location))
            )
        return resolver

    def invalidate(self, source: type, locale: str) -> None:
        source = _require_type(source)
        culture = normalize_locale(locale)
        resolver = self._resolvers.get(type_cache_key(source))
        if resolver is not None:
            resolver.invalidate(culture)

    def invalidate_by_name(self, base_name: str, location: str, locale: str) -> None:
        _require(base_name, "base_name")
        _require(location, "location")
        culture = normalize_locale(locale)
        resolver = self._resolvers.get(name_cache_key(base_name, location))
        if resolver is not None:
            resolver.invalidate(culture)

    def invalidate_resource(self, resource_name: str, locale: str) -> None:
        _require(resource_name, "resource_name")
        culture = normalize_locale(locale)
        resolver = next(
            (r for r in self.resolvers() if r.resource_name == resource_name),
            None,
        )
        if resolver is not None:
            resolver.invalidate(culture)

    def resolvers(self) -> list[Resolver]:
        return list(self._resolvers.values())

    def resource_name_for(self, source: type) -> str:
        package = source.__module__.partition(".")[0]
        return derive_resource_name(
            type_cache_key(source),
            self.settings.root_namespace_for(package),
            self.settings.resource_subpath_for(package),
        )

    def resource_name_for_name(self, base_name: str, location: str) -> str:
        return derive_resource_name(
            base_name,
            self.settings.root_namespace_for(location),
            self.settings.resource_subpath_for(location),
        )

    def _create_resolver(self, resource_name: str) -> Resolver:
        logger.debug("resolver_created", resource_name=resource_name)
        return Resolver(
            resource_name,
            self._cache,
            self._names,
            auto_create_missing=self.settings.auto_create_missing,
            default_locale=self.settings.default_locale,
        )


__all__ = [
    "ResolverFactory",
    "derive_resource_name",
    "name_cache_key",
    "type_cache_key",
]
