"""Lookup of localized strings for one resource name."""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from dbstrings.domain.models import LocalizedString, ResourceEntry
from dbstrings.i18n.cache import NameListCache, ResourceCache, resource_cache_key
from dbstrings.i18n.locales import normalize_locale
from dbstrings.logging import logger
from dbstrings.services.exceptions import MissingManifestResource

SEARCHED_LOCATION = "database"


def missing_key_cache_key(name: str, locale: str) -> str:
    return f"name={name}&culture={locale}"


class TemplateFormatter(string.Formatter):
    """``str.format`` restricted to plain positional and named fields.

    Attribute and index lookups such as ``{0.__class__}`` or ``{items[0]}``
    raise ``ValueError``.
    """

    def get_field(self, field_name: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> Any:
        if "." in field_name or "[" in field_name:
            raise ValueError(f"Unsupported placeholder {{{field_name}}} in localized string.")
        return super().get_field(field_name, args, kwargs)


_formatter = TemplateFormatter()


def format_template(template: str, /, *args: Any, **kwargs: Any) -> str:
    return _formatter.vformat(template, args, kwargs)


class LocalizedStrings:
    """Key set fixed at creation, values resolved on each iteration."""

    def __init__(self, resolver: Resolver, names: Sequence[str], locale: str) -> None:
        self.resolver = resolver
        self.names = tuple(names)
        self.locale = locale

    def __iter__(self) -> Iterator[LocalizedString]:
        for name in self.names:
            yield self.resolver.localize(name, locale=self.locale)

    def __len__(self) -> int:
        return len(self.names)

    def __repr__(self) -> str:
        return (
            f"LocalizedStrings(resource_name={self.resolver.resource_name!r}, "
            f"locale={self.locale!r}, names={len(self.names)})"
        )


class Resolver:
    """Resolves content keys of one resource name against the resource cache.

    A key that cannot be resolved is returned as its own display value and is
    remembered as missing for that locale, so repeated lookups skip the cache
    merge until the locale is invalidated. With ``auto_create_missing`` the
    first miss also registers an empty record for the exact locale.
    """

    def __init__(
        self,
        resource_name: str,
        cache: ResourceCache,
        names: NameListCache | None = None,
        *,
        auto_create_missing: bool = False,
        default_locale: str = "en",
    ) -> None:
        if not resource_name:
            raise ValueError("resource_name can not be null or empty.")
        self._resource_name = resource_name
        self._cache = cache
        self._names = names if names is not None else NameListCache()
        self.auto_create_missing = auto_create_missing
        self.default_locale = normalize_locale(default_locale)
        self._missing: dict[str, str] = {}

    @property
    def resource_name(self) -> str:
        return self._resource_name

    def resolve(self, name: str, locale: str | None = None) -> str:
        value = self._get_string_safely(name, locale)
        return value if value is not None else name

    def resolve_formatted(
        self, name: str, /, *args: Any, locale: str | None = None, **kwargs: Any
    ) -> str:
        template = self._get_string_safely(name, locale)
        return format_template(template if template is not None else name, *args, **kwargs)

    def localize(
        self, name: str, /, *args: Any, locale: str | None = None, **kwargs: Any
    ) -> LocalizedString:
        """Resolved string with lookup details.

        The template is only formatted when arguments are given, so
        enumerated strings are returned as stored.
        """

        template = self._get_string_safely(name, locale)
        text = template if template is not None else name
        if args or kwargs:
            text = format_template(text, *args, **kwargs)
        return LocalizedString(
            name=name,
            value=text,
            resource_not_found=template is None,
            searched_location=self._resource_name,
        )

    def enumerate_strings(
        self,
        include_ancestors: bool = False,
        locale: str | None = None,
        *,
        strict: bool = True,
    ) -> LocalizedStrings:
        """All known strings for ``locale``.

        With ``include_ancestors`` the keys of every locale in the chain are
        combined. Otherwise only the exact locale's keys are listed, and in
        ``strict`` mode a resource set that cannot be produced raises
        ``MissingManifestResource`` instead of yielding nothing.
        """

        culture = self._effective_locale(locale)
        if include_ancestors:
            names = self._names_from_hierarchy(culture)
        else:
            names = self._names_for(culture, strict=strict) or ()
        return LocalizedStrings(self, names, culture)

    def invalidate(self, locale: str) -> None:
        """Forget the cached set for exactly ``locale``.

        Keys recorded as missing for ``locale`` or for any locale below it are
        forgotten too, so translations added since are picked up.
        """

        culture = normalize_locale(locale)
        self._cache.invalidate(self._resource_name, culture)
        self._names.invalidate(resource_cache_key(self._resource_name, culture))
        for cache_key, missing_locale in list(self._missing.items()):
            if culture in self._cache.locale_chain(missing_locale):
                self._missing.pop(cache_key, None)

    def is_missing(self, name: str, locale: str) -> bool:
        return missing_key_cache_key(name, normalize_locale(locale)) in self._missing

    def _effective_locale(self, locale: str | None) -> str:
        return self.default_locale if locale is None else normalize_locale(locale)

    def _get_string_safely(self, name: str, locale: str | None) -> str | None:
        if not name:
            raise ValueError("name can not be null or empty.")
        culture = self._effective_locale(locale)

        logger.debug(
            "resource_searched",
            key=name,
            location=SEARCHED_LOCATION,
            locale=culture,
            resource_name=self._resource_name,
        )

        cache_key = missing_key_cache_key(name, culture)
        if cache_key in self._missing:
            return None

        resources = self._cache.get(self._resource_name, culture, include_ancestors=True)
        value = resources.get(name)
        if value:
            return value

        self._missing[cache_key] = culture
        if self.auto_create_missing:
            self._register_missing(name, culture)
        return None

    def _register_missing(self, name: str, locale: str) -> None:
        exact = self._cache.get(self._resource_name, locale)
        if exact is not None and name in exact:
            return
        entry = ResourceEntry(resource_name=self._resource_name, locale=locale, content_key=name)
        try:
            self._cache.store.insert(entry)
        except Exception:
            # Usually a concurrent insert of the same key losing on the unique constraint.
            logger.exception(
                "resource_auto_create_failed",
                resource_name=self._resource_name,
                locale=locale,
                key=name,
            )
            return
        logger.info(
            "resource_auto_created", resource_name=self._resource_name, locale=locale, key=name
        )
        self._cache.invalidate(self._resource_name, locale)
        self._names.invalidate(resource_cache_key(self._resource_name, locale))

    def _names_for(self, locale: str, *, strict: bool) -> tuple[str, ...] | None:
        def load_names() -> tuple[str, ...] | None:
            resources = self._cache.get(self._resource_name, locale)
            return tuple(resources) if resources is not None else None

        names = self._names.get_or_add(resource_cache_key(self._resource_name, locale), load_names)
        if names is None and strict:
            raise MissingManifestResource(self._resource_name, locale)
        return names

    def _names_from_hierarchy(self, locale: str) -> list[str]:
        names: dict[str, None] = {}
        for step in self._cache.locale_chain(locale):
            for name in self._names_for(step, strict=False) or ():
                names.setdefault(name, None)
        return list(names)


__all__ = [
    "LocalizedStrings",
    "Resolver",
    "SEARCHED_LOCATION",
    "TemplateFormatter",
    "format_template",
    "missing_key_cache_key",
]
