"""Observable single-value channels.

A :class:`ValueSubject` always holds a current value that can be read
synchronously. Observers are called synchronously, in subscription order,
once per published value. Nothing is buffered or coalesced: publishing a
value equal to the current one still notifies every observer.

All subjects are confined to the event loop thread that owns them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Observer = Callable[[T], None]


class Subscription:
    """Handle returned by :meth:`ValueSubject.subscribe`."""

    def __init__(self, detach: Callable[[], None]) -> None:
        self._detach: Callable[[], None] | None = detach

    @property
    def active(self) -> bool:
        return self._detach is not None

    def cancel(self) -> None:
        """Stop receiving values. Safe to call more than once."""
        detach = self._detach
        self._detach = None
        if detach is not None:
            detach()


class ValueSubject(Generic[T]):
    """Read-only view of a current-value channel."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._observers: list[Observer[T]] = []

    @property
    def value(self) -> T:
        return self._value

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(self, observer: Observer[T], *, replay: bool = True) -> Subscription:
        """Register *observer* for every future value.

        With ``replay`` (the default) the current value is delivered
        immediately, before this method returns.
        """
        self._observers.append(observer)

        def _detach() -> None:
            try:
                self._observers.remove(observer)
            except ValueError:
                pass

        subscription = Subscription(_detach)
        if replay:
            self._notify(observer, self._value)
        return subscription

    def _notify(self, observer: Observer[T], value: T) -> None:
        try:
            observer(value)
        except Exception:
            _logger.debug("Value subject observer %r failed", observer, exc_info=True)

    def _publish(self, value: T) -> None:
        self._value = value
        # Snapshot so observers may (un)subscribe while being notified.
        for observer in list(self._observers):
            self._notify(observer, value)


class MutableValueSubject(ValueSubject[T]):
    """Current-value channel whose owner can publish new values."""

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._publish(value)

    def send(self, value: T) -> None:
        self._publish(value)
