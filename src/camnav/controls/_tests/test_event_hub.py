from __future__ import annotations

import pytest

from camnav.controls.events import EventHub


def test_fire_reaches_listeners_in_registration_order() -> None:
    hub = EventHub()
    calls: list[tuple[str, object]] = []
    hub.on("move", lambda payload: calls.append(("a", payload)))
    hub.on("move", lambda payload: calls.append(("b", payload)))
    hub.on("nodeclick", lambda payload: calls.append(("click", payload)))

    hub.fire("move", 1)

    assert calls == [("a", 1), ("b", 1)]
    assert hub.listener_count("move") == 2


def test_off_removes_and_tolerates_unknown() -> None:
    hub = EventHub()
    calls: list[object] = []
    hub.on("move", calls.append)
    hub.off("move", calls.append)
    hub.off("move", calls.append)
    hub.off("never", calls.append)
    hub.fire("move", "x")
    assert calls == []
    assert hub.listener_count("move") == 0


def test_listener_may_unsubscribe_during_fire() -> None:
    hub = EventHub()
    calls: list[str] = []

    def once(payload) -> None:
        calls.append(payload)
        hub.off("move", once)

    hub.on("move", once)
    hub.fire("move", "first")
    hub.fire("move", "second")
    assert calls == ["first"]


def test_duplicate_registration_is_rejected() -> None:
    hub = EventHub()
    callback = lambda payload: None  # noqa: E731
    hub.on("move", callback)
    with pytest.raises(AssertionError):
        hub.on("move", callback)
