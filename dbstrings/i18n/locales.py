"""Locale identifiers and their parent chains.

Locales are BCP-47 style tags such as ``zh-CN``. The parent of a tag is the
tag without its last subtag, so ``zh-Hant-TW`` walks ``zh-Hant-TW -> zh-Hant
-> zh`` and then reaches the invariant locale, which ends every chain and is
never looked up itself.
"""

from __future__ import annotations

from collections.abc import Callable

INVARIANT_LOCALE = ""
MAX_LOCALE_DEPTH = 16

ParentLocale = Callable[[str], str]


def normalize_locale(locale: str | None) -> str:
    """Return ``locale`` with ``_`` separators turned into ``-``.

    Raises ``ValueError`` for ``None`` or blank input.
    """

    if locale is None or not locale.strip():
        raise ValueError("locale can not be null or empty.")
    return locale.strip().replace("_", "-")


def parent_locale(locale: str) -> str:
    if not locale or "-" not in locale:
        return INVARIANT_LOCALE
    return locale.rsplit("-", 1)[0]


def locale_chain(locale: str, parent: ParentLocale = parent_locale) -> list[str]:
    """``locale`` followed by its ancestors, most specific first.

    The walk stops at the invariant locale, at a locale that is its own parent
    or after ``MAX_LOCALE_DEPTH`` steps, whichever comes first.
    """

    chain: list[str] = []
    current = locale
    while current != INVARIANT_LOCALE and current not in chain and len(chain) < MAX_LOCALE_DEPTH:
        chain.append(current)
        current = parent(current)
    return chain


__all__ = [
    "INVARIANT_LOCALE",
    "MAX_LOCALE_DEPTH",
    "ParentLocale",
    "locale_chain",
    "normalize_locale",
    "parent_locale",
]
