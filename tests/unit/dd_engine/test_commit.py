import pytest

from dd_engine.commit import CommitDispatcher
from dd_engine.models import CommitReason

pytestmark = pytest.mark.unit_engine


def test_host_callback_runs_before_subscribers() -> None:
    calls: list[tuple[str, object]] = []
    dispatcher = CommitDispatcher(lambda payload: calls.append(("host", payload)))
    dispatcher.subscribe(lambda payload: calls.append(("sub", payload)))

    event = dispatcher.commit(CommitReason.CLICK, "B")

    assert calls == [("host", "B"), ("sub", "B")]
    assert event.sequence == 1
    assert dispatcher.count == 1
    assert dispatcher.last is event


def test_each_listener_gets_its_own_list() -> None:
    received: list[list[str]] = []
    dispatcher = CommitDispatcher(received.append)
    dispatcher.subscribe(received.append)
    payload = ["a", "b"]

    dispatcher.commit(CommitReason.CLOSE, payload)
    received[0].append("mutated")

    assert received[1] == ["a", "b"]
    assert payload == ["a", "b"]


def test_unsubscribe_stops_delivery() -> None:
    seen: list[object] = []
    dispatcher = CommitDispatcher()
    unsubscribe = dispatcher.subscribe(seen.append)
    dispatcher.commit(CommitReason.REMOVE, [])
    unsubscribe()
    unsubscribe()
    dispatcher.commit(CommitReason.REMOVE, [])
    assert len(seen) == 1
    assert dispatcher.count == 2


def test_history_is_bounded() -> None:
    dispatcher = CommitDispatcher(history_size=2)
    for idx in range(3):
        dispatcher.commit(CommitReason.CLICK, idx)
    assert [event.payload for event in dispatcher.history] == [1, 2]


def test_callback_errors_propagate() -> None:
    def boom(_payload: object) -> None:
        raise RuntimeError("host failed")

    dispatcher = CommitDispatcher(boom)
    with pytest.raises(RuntimeError):
        dispatcher.commit(CommitReason.CLICK, "x")
    assert dispatcher.count == 1
