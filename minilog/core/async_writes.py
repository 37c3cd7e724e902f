"""
Tracking and background execution of asynchronous transport writes

Writes issued inside a running event loop become tasks on that loop. Writes
issued with no running loop are handed to a daemon thread that owns its own
loop, so ``Logger.log`` never waits for them.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import threading
from typing import Any, Callable, List, Optional, Set, Union

PendingWrite = Union[asyncio.Future, concurrent.futures.Future]


async def _settle(pending: Any) -> Any:
    return await pending


class BackgroundLoop:
    """Event loop running in a daemon thread, started on first use."""

    def __init__(self, name: str = "minilog-async-writes"):
        self._name = name
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def _ensure_started(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                self._loop = asyncio.new_event_loop()
                self._thread = threading.Thread(
                    target=self._loop.run_forever,
                    name=self._name,
                    daemon=True,
                )
                self._thread.start()
            return self._loop

    def submit(self, awaitable: Any) -> concurrent.futures.Future:
        """Run an awaitable on the background loop; returns immediately."""
        loop = self._ensure_started()
        return asyncio.run_coroutine_threadsafe(_settle(awaitable), loop)


_background = BackgroundLoop()


class PendingWrites:
    """
    Writes that have been issued but not yet completed.

    Shared by a logger and its children so that flushing any of them waits
    for writes issued through all of them.
    """

    def __init__(self):
        self._writes: Set[PendingWrite] = set()
        self._lock = threading.Lock()

    def schedule(
        self, awaitable: Any, on_done: Callable[[PendingWrite], None]
    ) -> PendingWrite:
        """
        Start an awaitable without waiting for it.

        Args:
            awaitable: Result of a transport write
            on_done: Called with the finished future (possibly from the
                     background thread)
        """
        future: PendingWrite
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            future = _background.submit(awaitable)
        else:
            future = asyncio.ensure_future(awaitable)

        with self._lock:
            self._writes.add(future)

        def _done(finished: PendingWrite) -> None:
            with self._lock:
                self._writes.discard(finished)
            on_done(finished)

        future.add_done_callback(_done)
        return future

    def snapshot(self) -> List[PendingWrite]:
        with self._lock:
            return list(self._writes)

    async def wait(self) -> None:
        """Wait for every write pending at call time; results are ignored."""
        loop = asyncio.get_running_loop()
        waiters = []
        for future in self.snapshot():
            if isinstance(future, concurrent.futures.Future):
                waiters.append(asyncio.wrap_future(future))
            elif future.get_loop() is loop:
                waiters.append(future)
        if waiters:
            await asyncio.gather(*waiters, return_exceptions=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._writes)
