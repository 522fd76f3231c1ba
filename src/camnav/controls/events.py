"""Per-event-name observer lists.

Components compose an :class:`EventHub` instead of inheriting from an emitter
base, and expose ``on``/``off`` by delegation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Listener = Callable[..., None]


class EventHub:
    """Ordered listener lists keyed by event name."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, name: str, callback: Listener) -> None:
        assert callable(callback), "EventHub listener must be callable"
        listeners = self._listeners.setdefault(str(name), [])
        assert callback not in listeners, "EventHub listener already registered"
        listeners.append(callback)

    def off(self, name: str, callback: Listener) -> None:
        listeners = self._listeners.get(str(name))
        if not listeners:
            return
        try:
            listeners.remove(callback)
        except ValueError:
            return
        if not listeners:
            self._listeners.pop(str(name), None)

    def fire(self, name: str, *args: Any) -> None:
        # copy so listeners may unsubscribe while being notified
        for callback in tuple(self._listeners.get(str(name), ())):
            callback(*args)

    def listener_count(self, name: str) -> int:
        return len(self._listeners.get(str(name), ()))

    def clear(self) -> None:
        self._listeners.clear()


__all__ = ["EventHub", "Listener"]
