"""
Cooperative cancellation for outbound calls.

A ``CancellationToken`` is handed to ``BaseHttpClient.send`` and threaded
through the resilience policy. It aborts the in-flight HTTP call and any
pending retry wait, either when ``cancel()`` is called or when its deadline
passes.
"""

import asyncio
import time
from typing import Any, Awaitable, Callable, Optional

from .errors import RequestCancelledError


class CancellationToken:
    """Cancellation signal with an optional deadline."""

    def __init__(self, timeout: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._deadline = clock() + timeout if timeout is not None else None
        self._cancelled = False
        self._event: Optional[asyncio.Event] = None
        self.reason: Optional[str] = None

    @classmethod
    def with_timeout(cls, timeout: float) -> "CancellationToken":
        return cls(timeout=timeout)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    @property
    def is_cancelled(self) -> bool:
        if self._cancelled:
            return True
        if self._deadline is not None and self._clock() >= self._deadline:
            self._set("deadline exceeded")
            return True
        return False

    def remaining(self) -> Optional[float]:
        """Seconds until the deadline, or None when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def cancel(self, reason: str = "cancelled by caller") -> None:
        self._set(reason)

    def _set(self, reason: str) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self.reason = reason
        if self._event is not None:
            self._event.set()

    def _get_event(self) -> asyncio.Event:
        if self._event is None:
            self._event = asyncio.Event()
            if self._cancelled:
                self._event.set()
        return self._event

    def raise_if_cancelled(self) -> None:
        if self.is_cancelled:
            raise RequestCancelledError(details={"reason": self.reason})

    async def wait(self) -> None:
        """Block until cancelled (or the deadline passes)."""
        event = self._get_event()
        remaining = self.remaining()
        if remaining is None:
            await event.wait()
            return
        try:
            await asyncio.wait_for(event.wait(), timeout=remaining)
        except asyncio.TimeoutError:
            self._set("deadline exceeded")

    async def sleep(self, delay: float) -> None:
        """Sleep for ``delay`` seconds unless cancelled first."""
        self.raise_if_cancelled()
        try:
            await asyncio.wait_for(self.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return
        self.raise_if_cancelled()

    async def run(self, awaitable: Awaitable[Any]) -> Any:
        """Await ``awaitable``, aborting it if the token fires first."""
        if self.is_cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise RequestCancelledError(details={"reason": self.reason})
        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self.wait())
        try:
            done, _ = await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except BaseException:
            task.cancel()
            waiter.cancel()
            raise

        if task in done:
            waiter.cancel()
            return task.result()

        task.cancel()
        # Whatever the aborted call ended with, cancellation wins.
        await asyncio.gather(task, return_exceptions=True)
        raise RequestCancelledError(details={"reason": self.reason})


async def sleep(delay: float, cancellation: Optional[CancellationToken] = None) -> None:
    """Cancellation-aware sleep used between retry attempts."""
    if cancellation is None:
        await asyncio.sleep(delay)
    else:
        await cancellation.sleep(delay)
