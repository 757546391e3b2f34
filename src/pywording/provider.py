"""Where wording comes from: bundled files, persisted files, remote service."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

import aiohttp

from pywording._transport import HttpTransport, Transport
from pywording.config import WordingConfig
from pywording.exceptions import WordingError, WordingRemoteUnsupportedError


class WordingProvider(Protocol):
    """Structural interface for the three wording sources."""

    def bundled_path(self, locale: str) -> Path: ...

    def persisted_path(self, locale: str) -> Path: ...

    async def fetch_remote(self, locale: str) -> bytes:
        """Raw remote payload for *locale*.

        Raises :class:`WordingRemoteUnsupportedError` when the remote source
        is unavailable as a whole; any other exception is a per-locale
        failure.
        """
        ...


class HttpWordingProvider:
    """Provider backed by two local directories and an HTTP endpoint.

    Usage::

        async with HttpWordingProvider(config) as provider:
            manager = WordingManager(AppWording, locale_source=source, provider=provider)
    """

    def __init__(
        self,
        config: WordingConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport is not None
        self._transport = transport

    async def __aenter__(self) -> HttpWordingProvider:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._http_session, timeout=self._config.request_timeout)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    def _file_name(self, locale: str) -> str:
        return f"{locale}{self._config.file_suffix}"

    def bundled_path(self, locale: str) -> Path:
        return self._config.bundled_dir / self._file_name(locale)

    def persisted_path(self, locale: str) -> Path:
        return self._config.persisted_dir / self._file_name(locale)

    async def fetch_remote(self, locale: str) -> bytes:
        url = self._config.remote_url_for(locale)
        if url is None:
            raise WordingRemoteUnsupportedError("No remote wording URL configured")
        if self._transport is None:
            raise WordingError("Provider not initialized. Use 'async with HttpWordingProvider(...)'")
        return await self._transport.get_bytes(url)
