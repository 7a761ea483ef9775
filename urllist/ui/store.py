"""Observable state container for the client caches."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")


class Store(Generic[S]):
    """
    Holds one immutable snapshot and notifies subscribers on every change.

    Snapshots are frozen dataclasses; updates always build a new snapshot.
    """

    def __init__(self, initial: S) -> None:
        self._value = initial
        self._listeners: list[Callable[[S], None]] = []

    def get(self) -> S:
        return self._value

    def set(self, value: S) -> None:
        self._value = value
        self._notify()

    def set_key(self, key: str, value: Any) -> None:
        self.set(replace(self._value, **{key: value}))  # type: ignore[type-var]

    def update(self, **changes: Any) -> None:
        self.set(replace(self._value, **changes))  # type: ignore[type-var]

    def subscribe(self, listener: Callable[[S], None]) -> Callable[[], None]:
        """Register a listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._value)
            except Exception:
                logger.exception("Store listener failed")
