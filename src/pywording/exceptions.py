"""Custom exception hierarchy for pywording."""

from __future__ import annotations


class WordingError(Exception):
    """Base exception for all pywording errors."""


class WordingConfigError(WordingError):
    """Invalid or missing configuration."""


class WordingDecodeError(WordingError):
    """Wording payload could not be decoded into the wording model."""


class WordingTransportError(WordingError):
    """HTTP-level failure (network, non-200)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class WordingRemoteUnsupportedError(WordingError):
    """The remote source does not serve wording at all.

    This is not a per-locale gap: the remote feature is disabled or missing,
    so a sync run stops at the first occurrence.
    """


class WordingBundledError(WordingError):
    """Bundled wording is missing or corrupt.

    Bundled files ship with the application build, so this indicates a
    broken build and the manager cannot be constructed.
    """

    def __init__(self, message: str, *, locale: str) -> None:
        self.locale = locale
        super().__init__(message)


class WordingCacheError(WordingError):
    """Neither the requested locale nor the base locale is cached."""
