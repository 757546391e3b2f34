"""Synchronous cache bootstrap from bundled and persisted wording files."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Generic

from pywording.codec import WordingCodec
from pywording.exceptions import WordingBundledError, WordingDecodeError
from pywording.models._base import W
from pywording.models.locale import SupportedLocales
from pywording.provider import WordingProvider
from pywording.state.cache import WordingCache
from pywording.state.tiers import WordingSource


class BootstrapLoader(Generic[W]):
    """Fill a :class:`WordingCache` before anything reads from it.

    Both passes walk the supported locales base locale first, so every
    other locale can be completed from base wording as it is loaded.
    A bundled failure for the base locale is fatal, as is any bundled
    failure when ``strict`` is set; otherwise a missing bundled locale is
    logged as an error and resolves to base wording. A persisted failure is
    only a warning (there is nothing persisted on first run or after an
    upgrade).
    """

    def __init__(
        self,
        *,
        cache: WordingCache[W],
        codec: WordingCodec[W],
        provider: WordingProvider,
        supported: SupportedLocales,
        logger: logging.Logger,
        strict: bool = False,
    ) -> None:
        self._cache = cache
        self._codec = codec
        self._provider = provider
        self._supported = supported
        self._logger = logger
        self._strict = strict

    def load(self) -> None:
        self.load_bundled()
        self.load_persisted()

    def load_bundled(self) -> None:
        self._load_all(self._provider.bundled_path, WordingSource.BUNDLED)

    def load_persisted(self) -> None:
        self._load_all(self._provider.persisted_path, WordingSource.PERSISTED)

    def _load_all(self, path_for: Callable[[str], Path], source: WordingSource) -> None:
        for locale in self._supported.base_first():
            try:
                self._load_one(path_for(locale), locale)
            except (OSError, WordingDecodeError) as exc:
                message = "Failed to populate cache with %s wording for %s localization, error: %s"
                if source is WordingSource.BUNDLED:
                    self._logger.error(message, source, locale, exc)
                    if locale != self._supported.base and not self._strict:
                        continue
                    raise WordingBundledError(
                        f"Bundled wording for {locale!r} could not be loaded: {exc}",
                        locale=locale,
                    ) from exc
                self._logger.warning(message, source, locale, exc)
                continue

            self._logger.info("Successfully populated cache with %s wording for %s localization", source, locale)

    def _load_one(self, path: Path, locale: str) -> None:
        wording = self._codec.decode(path.read_bytes())
        self._cache.merge_with_fallback(wording, locale)
        self._cache.store(locale, wording)
