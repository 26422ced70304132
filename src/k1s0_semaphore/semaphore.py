"""FIFO counting semaphore for asyncio."""

from __future__ import annotations

import asyncio
import logging
import math
from collections import deque
from types import TracebackType

from .exceptions import (
    AcquireTimeoutError,
    ExcessReleaseError,
    InvalidArgumentError,
    SemaphoreCancelledError,
)
from .models import DEFAULT_CAPACITY, SemaphoreConfig

logger = logging.getLogger(__name__)


def _validate_timeout(timeout: float | None) -> None:
    if timeout is None:
        return
    if (
        isinstance(timeout, bool)
        or not isinstance(timeout, (int, float))
        or timeout < 0
        or math.isnan(timeout)
    ):
        raise InvalidArgumentError("Timeout must be a non-negative number of seconds")


class Semaphore:
    """Counting semaphore that limits concurrent holders to a fixed capacity.

    Requests beyond capacity wait in a FIFO queue. A release hands its permit
    directly to the oldest waiter, so a queued waiter always means every
    permit is held.

    All methods must be called from the event loop that owns the semaphore.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        default_timeout: float | None = None,
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidArgumentError("Permits must be a positive integer")
        _validate_timeout(default_timeout)
        self._capacity = capacity
        self._default_timeout = default_timeout
        self._held = 0
        self._waiters: deque[asyncio.Future[None]] = deque()
        self._closed = False

    @classmethod
    def from_config(cls, config: SemaphoreConfig) -> Semaphore:
        """Build a semaphore from a validated SemaphoreConfig."""
        return cls(config.capacity, default_timeout=config.acquire_timeout)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        return self._closed

    async def acquire(self, timeout: float | None = None) -> None:
        """Acquire one permit, waiting in FIFO order if none is free.

        Args:
            timeout: Maximum wait in seconds (not milliseconds). None falls
                back to the default timeout; 0, or no default, waits
                indefinitely.

        Raises:
            AcquireTimeoutError: No permit was granted before the timeout.
            SemaphoreCancelledError: The semaphore was closed before a grant.
            InvalidArgumentError: The timeout is negative or NaN.
        """
        _validate_timeout(timeout)
        if self._held < self._capacity:
            self._held += 1
            return

        if self._closed:
            raise SemaphoreCancelledError()

        if timeout is None:
            timeout = self._default_timeout

        loop = asyncio.get_running_loop()
        waiter: asyncio.Future[None] = loop.create_future()
        self._waiters.append(waiter)
        logger.debug(
            "Semaphore acquire queued",
            extra={"capacity": self._capacity, "queue_length": len(self._waiters)},
        )

        handle: asyncio.TimerHandle | None = None
        if timeout:
            handle = loop.call_later(timeout, self._expire, waiter, timeout)

        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.cancelled():
                self._discard(waiter)
            elif waiter.exception() is None:
                # granted before the cancellation was delivered
                self.release()
            raise
        finally:
            if handle is not None:
                handle.cancel()

    def release(self) -> None:
        """Release one permit, handing it to the oldest waiter if any.

        Raises:
            ExcessReleaseError: No permit is currently held.
        """
        while self._waiters:
            waiter = self._waiters.popleft()
            if waiter.done():
                continue
            waiter.set_result(None)
            logger.debug(
                "Semaphore permit handed off",
                extra={"capacity": self._capacity, "queue_length": len(self._waiters)},
            )
            return

        if self._held > 0:
            self._held -= 1
            return

        raise ExcessReleaseError()

    def available_permits(self) -> int:
        return self._capacity - self._held

    def get_queue_length(self) -> int:
        return sum(1 for waiter in self._waiters if not waiter.done())

    def locked(self) -> bool:
        """Return True if acquire() would have to wait."""
        return self._held >= self._capacity

    def close(self) -> None:
        """Reject every pending acquire with SemaphoreCancelledError.

        Holders keep their permits and may still release them. Acquires
        that would have to wait after close are rejected immediately.
        """
        if self._closed:
            return
        self._closed = True
        rejected = 0
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_exception(SemaphoreCancelledError())
                rejected += 1
        logger.debug(
            "Semaphore closed",
            extra={"capacity": self._capacity, "rejected_waiters": rejected},
        )

    def _expire(self, waiter: asyncio.Future[None], timeout: float) -> None:
        if waiter.done():
            return
        self._discard(waiter)
        waiter.set_exception(AcquireTimeoutError(timeout))
        logger.debug(
            "Semaphore acquire timed out",
            extra={"timeout": timeout, "queue_length": len(self._waiters)},
        )

    def _discard(self, waiter: asyncio.Future[None]) -> None:
        if waiter in self._waiters:
            self._waiters.remove(waiter)

    async def __aenter__(self) -> Semaphore:
        await self.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        return (
            f"<Semaphore capacity={self._capacity} held={self._held} "
            f"waiters={self.get_queue_length()}>"
        )
