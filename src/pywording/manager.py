"""Wording manager: cache, fallback, remote sync and the live wording value."""

from __future__ import annotations

import asyncio
import logging
from typing import Generic

import aiohttp

from pywording._constants import LOG_DOMAIN
from pywording.codec import WordingCodec
from pywording.config import WordingConfig
from pywording.events import FETCH_AND_UPDATE_WORDING, WordingEvent
from pywording.loader import BootstrapLoader
from pywording.localization import LocaleSource, LocalizationManager
from pywording.models._base import W
from pywording.models.locale import SupportedLocales
from pywording.provider import HttpWordingProvider, WordingProvider
from pywording.state.cache import WordingCache
from pywording.subject import MutableValueSubject, Subscription, ValueSubject
from pywording.sync import RemoteSync

_default_logger = logging.getLogger(f"pywording.{LOG_DOMAIN}")


class WordingManager(Generic[W]):
    """Keeps the active locale's wording current.

    Construction is synchronous and must happen on the event loop that
    will run sync tasks (or pass ``loop``). Before ``__init__`` returns:

    1. bundled wording is loaded for every locale (base first); a failure
       for the base locale (or any locale with ``strict_bundled``) raises
       :class:`~pywording.exceptions.WordingBundledError`,
    2. persisted wording is loaded on top (failures are warnings),
    3. :attr:`wording_subject` is seeded with the active locale's wording,
    4. the manager follows the locale source's active locale,
    5. a first remote sync run is launched in the background.

    Usage::

        async with HttpWordingProvider(config) as provider:
            manager = WordingManager(AppWording, locale_source=locales, provider=provider)
            manager.wording_subject.subscribe(render)
    """

    def __init__(
        self,
        model_type: type[W],
        *,
        locale_source: LocaleSource,
        provider: WordingProvider,
        loop: asyncio.AbstractEventLoop | None = None,
        logger: logging.Logger | None = None,
        strict_bundled: bool = False,
    ) -> None:
        self._loop = loop if loop is not None else asyncio.get_running_loop()
        self._locale_source = locale_source
        self._provider = provider
        self._logger = logger if logger is not None else _default_logger
        self._codec: WordingCodec[W] = WordingCodec(model_type)
        self._cache: WordingCache[W] = WordingCache(locale_source.supported.base)
        self._tasks: set[asyncio.Task[list[str]]] = set()

        BootstrapLoader(
            cache=self._cache,
            codec=self._codec,
            provider=provider,
            supported=locale_source.supported,
            logger=self._logger,
            strict=strict_bundled,
        ).load()

        self._sync = RemoteSync(
            cache=self._cache,
            codec=self._codec,
            provider=provider,
            locale_source=locale_source,
            on_update=self._on_locale_updated,
            logger=self._logger,
        )
        self._wording_subject: MutableValueSubject[W] = MutableValueSubject(
            self._cache.resolve(locale_source.language_subject.value)
        )
        self._language_subscription: Subscription = locale_source.language_subject.subscribe(
            self._sync_wording,
            replay=False,
        )
        self._launch_sync()

    @classmethod
    async def from_config(
        cls,
        config: WordingConfig,
        model_type: type[W],
        *,
        locale_source: LocaleSource | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> tuple[WordingManager[W], HttpWordingProvider]:
        """Build an HTTP provider and a manager from *config*.

        The returned provider is already entered; the caller closes it with
        ``await provider.__aexit__(None, None, None)`` (or uses it as an
        async context manager again) on shutdown.
        """
        if locale_source is None:
            supported = SupportedLocales(locales=config.locales, base=config.base_locale)
            locale_source = LocalizationManager(supported, active=config.active_locale)
        provider = HttpWordingProvider(config, session=session)
        await provider.__aenter__()
        try:
            manager = cls(
                model_type,
                locale_source=locale_source,
                provider=provider,
                strict_bundled=config.strict_bundled,
            )
        except BaseException:
            await provider.__aexit__(None, None, None)
            raise
        return manager, provider

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    @property
    def wording_subject(self) -> ValueSubject[W]:
        return self._wording_subject

    @property
    def wording(self) -> W:
        return self._wording_subject.value

    @property
    def cache(self) -> WordingCache[W]:
        return self._cache

    def wording_for(self, locale: str) -> W:
        """Resolve *locale* from the cache without publishing anything."""
        return self._cache.resolve(locale)

    async def sync(self) -> list[str]:
        """Run one remote sync pass and wait for it. Returns updated locales."""
        return await self._sync.run()

    def receive(self, event: WordingEvent) -> asyncio.Task[list[str]] | None:
        """Handle an external command.

        Only :data:`FETCH_AND_UPDATE_WORDING` is acted upon: it launches a
        new sync run without waiting for, or cancelling, runs in flight.
        """
        if event.id != FETCH_AND_UPDATE_WORDING:
            return None
        self._logger.debug("Received %s at %s, launching wording sync", event.id, event.received_at.isoformat())
        return self._launch_sync()

    async def wait_idle(self) -> None:
        """Wait until every launched sync run has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Stop following the active locale. In-flight runs are left alone."""
        self._language_subscription.cancel()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _launch_sync(self) -> asyncio.Task[list[str]]:
        task = self._loop.create_task(self._sync.run())
        self._tasks.add(task)
        task.add_done_callback(self._on_sync_done)
        return task

    def _on_sync_done(self, task: asyncio.Task[list[str]]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self._logger.error("Wording sync run failed unexpectedly", exc_info=exc)

    def _sync_wording(self, locale: str) -> None:
        self._wording_subject.send(self._cache.resolve(locale))

    def _on_locale_updated(self, locale: str) -> None:
        # Any update republishes, even when it is not the active locale.
        self._sync_wording(self._locale_source.language_subject.value)
