"""In-memory wording cache keyed by locale.

The cache is confined to the event loop thread: the bootstrap loader fills
it before any task starts, and sync runs only touch it from coroutine
continuations on that loop. No lock is taken.
"""

from __future__ import annotations

from typing import Generic

from pywording.exceptions import WordingCacheError
from pywording.models._base import W


class WordingCache(Generic[W]):
    """Locale to wording mapping with base-locale fallback.

    Entries are only ever inserted or replaced, never removed.
    """

    def __init__(self, base_locale: str) -> None:
        self._base_locale = base_locale
        self._entries: dict[str, W] = {}

    @property
    def base_locale(self) -> str:
        return self._base_locale

    def __contains__(self, locale: object) -> bool:
        return locale in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def locales(self) -> list[str]:
        return list(self._entries)

    def get(self, locale: str) -> W | None:
        return self._entries.get(locale)

    def store(self, locale: str, wording: W) -> None:
        self._entries[locale] = wording

    def resolve(self, locale: str) -> W:
        """Cached wording for *locale*, else the base locale's.

        Raises
        ------
        WordingCacheError
            If neither is cached. Bootstrap guarantees the base locale, so
            this only happens when that guarantee was bypassed.
        """
        wording = self._entries.get(locale)
        if wording is not None:
            return wording
        base = self._entries.get(self._base_locale)
        if base is not None:
            return base
        raise WordingCacheError(
            f"No cached wording for {locale!r} and no base {self._base_locale!r} wording to fall back to"
        )

    def merge_with_fallback(self, wording: W, locale: str) -> W:
        """Complete a freshly decoded *wording* for *locale* in place.

        Older cached wording for the same locale fills gaps first, then the
        base locale's wording does. The fresh wording is always the receiver,
        so its own values are never overwritten.
        """
        if locale != self._base_locale:
            cached = self._entries.get(locale)
            if cached is not None:
                wording.mutate(using=cached)

        base = self._entries.get(self._base_locale)
        if base is not None:
            wording.mutate(using=base)
        return wording
