"""HTTP transport for remote wording payloads."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Protocol

import aiohttp

from pywording._constants import USER_AGENT
from pywording.exceptions import WordingRemoteUnsupportedError, WordingTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the HTTP provider.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_bytes(self, url: str) -> bytes:
        ...


class HttpTransport:
    """Plain GET transport on top of a shared ``aiohttp.ClientSession``."""

    def __init__(self, http_session: aiohttp.ClientSession, *, timeout: float) -> None:
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def get_bytes(self, url: str) -> bytes:
        """Fetch *url* and return the raw body.

        An HTTP 501 answer means the server does not implement wording at
        all and is reported as :class:`WordingRemoteUnsupportedError`.
        """
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                if resp.status == HTTPStatus.NOT_IMPLEMENTED:
                    raise WordingRemoteUnsupportedError(f"Remote wording not supported by {url}")
                if resp.status != HTTPStatus.OK:
                    text = await resp.text(errors="replace")
                    raise WordingTransportError(
                        f"HTTP {resp.status} from {url}: {text[:200]}",
                        status_code=resp.status,
                        url=url,
                    )
                return await resp.read()
        except (WordingTransportError, WordingRemoteUnsupportedError):
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise WordingTransportError(f"Request to {url} failed: {exc}", url=url) from exc
