"""Commit protocol: when and how the selection is reported to the host."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable

from dd_engine.models import CommitCallback, CommitEvent, CommitReason

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 32


class CommitDispatcher:
    """Counts commits, keeps a short history and invokes callbacks in order.

    The host callback (``on_selection_committed``) runs first, then any
    extra subscribers. Callback exceptions propagate to the caller.
    """

    def __init__(
        self,
        host_callback: CommitCallback | None = None,
        *,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        self._host_callback = host_callback
        self._subscribers: list[CommitCallback] = []
        self._history: deque[CommitEvent] = deque(maxlen=history_size)
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def history(self) -> tuple[CommitEvent, ...]:
        return tuple(self._history)

    @property
    def last(self) -> CommitEvent | None:
        return self._history[-1] if self._history else None

    def set_host_callback(self, callback: CommitCallback | None) -> None:
        self._host_callback = callback

    def subscribe(self, callback: CommitCallback) -> Callable[[], None]:
        """Register an extra listener; returns a function that removes it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def commit(self, reason: CommitReason, payload: Any) -> CommitEvent:
        self._count += 1
        event = CommitEvent(sequence=self._count, reason=reason, payload=payload)
        self._history.append(event)
        logger.debug("Commit #%d (%s)", event.sequence, reason.value)
        callbacks = [self._host_callback] if self._host_callback else []
        for callback in [*callbacks, *self._subscribers]:
            callback(_snapshot(payload))
        return event


def _snapshot(payload: Any) -> Any:
    # each listener gets its own list
    if isinstance(payload, list):
        return list(payload)
    return payload
