"""Visibility notifications for the load-more sentinel."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

Unsubscribe = Callable[[], None]


class VisibilitySignal(Protocol):
    """Capability: call back whenever the sentinel becomes visible."""

    def subscribe(self, callback: Callable[[], object]) -> Unsubscribe:
        """Register `callback` and return a function that removes it."""
        ...


class SentinelSignal(VisibilitySignal):
    """In-process signal fired by whatever renders the sentinel."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], object]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: Callable[[], object]) -> Unsubscribe:
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def notify(self) -> None:
        """Report that the sentinel scrolled into view."""
        for callback in list(self._callbacks):
            callback()
