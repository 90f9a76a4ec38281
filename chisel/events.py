"""A multicast event that calls its listeners in order."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Listener = Callable[..., Any]


class Event:
    """Calls every subscribed listener, then each one-shot listener once."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._once: list[Listener] = []

    def subscribe(self, func: Listener) -> None:
        self._listeners.append(func)

    def unsubscribe(self, func: Listener) -> None:
        """Remove every subscription equal to ``func``."""
        self._listeners = [listener for listener in self._listeners if listener != func]

    def once(self, func: Listener) -> None:
        """Call ``func`` on the next firing only."""
        self._once.append(func)

    def __iadd__(self, func: Listener) -> Event:
        self.subscribe(func)
        return self

    def __isub__(self, func: Listener) -> Event:
        self.unsubscribe(func)
        return self

    def __len__(self) -> int:
        return len(self._listeners) + len(self._once)

    def __call__(self, *args: Any) -> None:
        for func in list(self._listeners):
            func(*args)
        pending, self._once = self._once, []
        for func in pending:
            func(*args)