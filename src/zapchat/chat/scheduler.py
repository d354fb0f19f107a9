"""Timer abstraction for the chat engine.

Hides how delayed callbacks are run. Everything "asynchronous" in the chat
is a callback scheduled on one logical thread:

- AsyncioScheduler: ``loop.call_later`` on the running event loop
- ManualScheduler: a virtual clock advanced explicitly (tests, replays)

The Textual app provides its own implementation on top of ``set_timer``
(see ``zapchat.ui.callbacks``).

There is no cancellation: once scheduled, a callback fires unless the
whole scheduler is torn down.
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable

Callback = Callable[[], None]


class Scheduler(ABC):
    """Runs callbacks after a delay on the caller's thread."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callback) -> None:
        """Run ``callback`` after ``delay`` seconds."""

    @property
    @abstractmethod
    def pending(self) -> int:
        """Number of scheduled callbacks that have not fired yet."""


class AsyncioScheduler(Scheduler):
    """Scheduler backed by the asyncio event loop.

    Must be used from inside a running loop.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._pending = 0

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callback) -> None:
        self._pending += 1

        def _fire() -> None:
            self._pending -= 1
            callback()

        self._get_loop().call_later(max(delay, 0.0), _fire)

    @property
    def pending(self) -> int:
        return self._pending

    async def wait_idle(self, poll: float = 0.05) -> None:
        """Sleep until every scheduled callback (and those it scheduled) fired."""
        while self._pending:
            await asyncio.sleep(poll)


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler.

    Time only moves when ``advance`` or ``run_all`` is called. Callbacks due
    at the same instant fire in the order they were scheduled, and callbacks
    scheduled while advancing fire in the same call if they fall due.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[tuple[float, int, Callback]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callback) -> None:
        due = self._now + max(delay, 0.0)
        heapq.heappush(self._queue, (due, next(self._counter), callback))

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing everything that falls due.

        Returns:
            Number of callbacks fired
        """
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            callback()
            fired += 1
        self._now = target
        return fired

    def run_all(self, limit: int = 10_000) -> int:
        """Fire callbacks until the queue is empty.

        Raises:
            RuntimeError: If more than ``limit`` callbacks fire (runaway chain)
        """
        fired = 0
        while self._queue:
            if fired >= limit:
                raise RuntimeError(f"ManualScheduler fired more than {limit} callbacks")
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            callback()
            fired += 1
        return fired
