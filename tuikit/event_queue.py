"""A thread-safe FIFO of events with blocking removal."""

from __future__ import annotations

import threading
import weakref
from collections import deque

from tuikit.events import Event


class EventQueue:
    """Events pushed by any thread and popped, in order, by the dispatching thread."""

    def __init__(self) -> None:
        self._queue: deque[Event] = deque()
        self._condition = threading.Condition()
        self._current: weakref.ReferenceType[Event] | None = None

    def push(self, event: Event) -> None:
        """Append an event and wake one waiting reader."""
        with self._condition:
            self._queue.append(event)
            self._condition.notify()

    def pop(self, timeout: float | None = None) -> Event | None:
        """Remove the oldest event, waiting for one.

        With a timeout in seconds, return None if no event arrives in time.
        """
        with self._condition:
            if not self._condition.wait_for(lambda: bool(self._queue), timeout):
                return None
            event = self._queue.popleft()
            self._current = weakref.ref(event)
            return event

    def empty(self) -> bool:
        with self._condition:
            return not self._queue

    def __len__(self) -> int:
        with self._condition:
            return len(self._queue)

    def current_event(self) -> Event | None:
        """The event last popped, while something else still holds it."""
        reference = self._current
        return reference() if reference is not None else None