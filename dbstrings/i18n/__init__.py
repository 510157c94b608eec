from dbstrings.i18n.cache import NameListCache, ResourceCache, resource_cache_key
from dbstrings.i18n.factory import ResolverFactory, derive_resource_name
from dbstrings.i18n.locales import INVARIANT_LOCALE, locale_chain, normalize_locale, parent_locale
from dbstrings.i18n.resolver import LocalizedStrings, Resolver

__all__ = [
    "INVARIANT_LOCALE",
    "LocalizedStrings",
    "NameListCache",
    "ResolverFactory",
    "Resolver",
    "ResourceCache",
    "derive_resource_name",
    "locale_chain",
    "normalize_locale",
    "parent_locale",
    "resource_cache_key",
]
