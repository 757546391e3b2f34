"""Active-locale source consumed by the wording manager."""

from __future__ import annotations

import logging
from typing import Protocol

from pywording.exceptions import WordingConfigError
from pywording.models.locale import SupportedLocales
from pywording.subject import MutableValueSubject, ValueSubject

_logger = logging.getLogger(__name__)


class LocaleSource(Protocol):
    """Structural interface for whatever decides the active locale.

    The wording manager only reads the supported list and follows the
    active-locale subject; negotiating which locale is active happens
    elsewhere.
    """

    @property
    def supported(self) -> SupportedLocales: ...

    @property
    def language_subject(self) -> ValueSubject[str]: ...


class LocalizationManager:
    """In-process locale source with an explicitly selected active locale."""

    def __init__(self, supported: SupportedLocales, *, active: str | None = None) -> None:
        initial = supported.base if active is None else active
        if initial not in supported:
            raise WordingConfigError(f"Locale {initial!r} is not supported")
        self._supported = supported
        self._language_subject: MutableValueSubject[str] = MutableValueSubject(initial)

    @property
    def supported(self) -> SupportedLocales:
        return self._supported

    @property
    def language_subject(self) -> ValueSubject[str]:
        return self._language_subject

    @property
    def active(self) -> str:
        return self._language_subject.value

    def select(self, locale: str) -> None:
        """Make *locale* the active locale and publish it."""
        if locale not in self._supported:
            raise WordingConfigError(f"Locale {locale!r} is not supported")
        _logger.debug("Active locale %s -> %s", self._language_subject.value, locale)
        self._language_subject.send(locale)
