"""Remote wording sync pipeline.

One run walks the supported locales, active locale first, and for each one
fetches, decodes, completes with fallbacks, persists and caches the
wording. Locales are handled strictly one at a time. Per-locale failures
are logged and skipped; a remote-unsupported answer ends the run.

Runs are not de-duplicated: two overlapping runs both write the cache and
the last write for a locale wins.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generic

from pywording.codec import WordingCodec
from pywording.exceptions import WordingRemoteUnsupportedError
from pywording.localization import LocaleSource
from pywording.models._base import W
from pywording.provider import WordingProvider
from pywording.state.cache import WordingCache
from pywording.state.tiers import WordingSource


def _write_atomic(path: Path, data: bytes) -> None:
    """Write *data* through a sibling temp file so readers never see half a file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    # One temp file per write; overlapping runs may persist the same locale.
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as tmp_file:
            tmp_file.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class RemoteSync(Generic[W]):
    """Fetch-and-persist pipeline feeding the wording cache."""

    def __init__(
        self,
        *,
        cache: WordingCache[W],
        codec: WordingCodec[W],
        provider: WordingProvider,
        locale_source: LocaleSource,
        on_update: Callable[[str], None],
        logger: logging.Logger,
    ) -> None:
        self._cache = cache
        self._codec = codec
        self._provider = provider
        self._locale_source = locale_source
        self._on_update = on_update
        self._logger = logger

    def run_order(self) -> list[str]:
        """Active locale first, then the other supported locales in order."""
        return self._locale_source.supported.first(self._locale_source.language_subject.value)

    async def run(self) -> list[str]:
        """Run one sync pass. Returns the locales that were updated."""
        updated: list[str] = []
        for locale in self.run_order():
            try:
                wording = await self._fetch(locale)
                await self._persist(wording, locale)
            except WordingRemoteUnsupportedError as exc:
                self._logger.info(
                    "No %s wording supported, stopping sync at %s localization: %s",
                    WordingSource.REMOTE,
                    locale,
                    exc,
                )
                break
            except Exception as exc:
                self._logger.error(
                    "Failed to fetch %s wording for %s localization, error: %s",
                    WordingSource.REMOTE,
                    locale,
                    exc,
                    exc_info=True,
                )
                continue

            self._cache.store(locale, wording)
            updated.append(locale)
            self._on_update(locale)
        return updated

    async def _fetch(self, locale: str) -> W:
        data = await self._provider.fetch_remote(locale)
        wording = self._codec.decode(data)

        self._logger.info("Successfully fetched %s wording for %s localization", WordingSource.REMOTE, locale)
        return self._cache.merge_with_fallback(wording, locale)

    async def _persist(self, wording: W, locale: str) -> None:
        path = self._provider.persisted_path(locale)
        data = self._codec.encode(wording)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, _write_atomic, path, data)
