"""Admission queue serializing every upstream lookup.

Callers enqueue a word and get a future back. A single drain task pops
requests in FIFO order and runs them through the retry policy one at a
time, keeping at least ``request_delay`` seconds between the end of one
dispatch and the start of the next. The drain task exits when the queue is
empty and the next enqueue starts a fresh one.

There is no lock: the ``_draining`` flag is only touched from the event
loop thread and never across an ``await``.
"""

import asyncio
import time
from collections import deque
from collections.abc import Callable

import structlog

from wiktionary_check.entities import PipelineConfig, QueuedRequest
from wiktionary_check.services.retry_policy import RetryPolicy, Sleep

logger = structlog.get_logger(__name__)


class AdmissionQueue:
    """FIFO queue with at most one in-flight upstream request.

    Example:
        ```python
        queue = AdmissionQueue(policy=policy, config=config)
        is_valid = await queue.enqueue("chat")
        ```
    """

    def __init__(
        self,
        policy: RetryPolicy,
        config: PipelineConfig,
        sleep: Sleep = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the admission queue.

        Args:
            policy: Retry policy run for each dequeued word
            config: Pipeline config providing request_delay
            sleep: Awaitable sleep used for pacing
            clock: Monotonic clock in seconds
        """
        self._policy = policy
        self._config = config
        self._sleep = sleep
        self._clock = clock
        self._pending: deque[QueuedRequest] = deque()
        self._draining = False
        self._task: asyncio.Task[None] | None = None
        self._last_finished_at: float | None = None

    def enqueue(self, word: str) -> "asyncio.Future[bool]":
        """Queue a lookup and return its completion handle.

        Must be called from the event loop. The returned future resolves to
        the word's validity or fails with the retry policy's exception.
        """
        loop = asyncio.get_running_loop()
        request = QueuedRequest(word=word, future=loop.create_future())
        self._pending.append(request)
        logger.debug("lookup_enqueued", word=word, queue_length=len(self._pending))

        if not self._draining:
            self._draining = True
            self._task = loop.create_task(self._drain(), name="admission-queue-drain")
        return request.future

    @property
    def pending(self) -> int:
        """Number of requests waiting to be dispatched."""
        return len(self._pending)

    @property
    def is_draining(self) -> bool:
        return self._draining

    async def close(self) -> None:
        """Stop the drain task and cancel every request still queued."""
        task = self._task
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        while self._pending:
            request = self._pending.popleft()
            if not request.future.done():
                request.future.cancel()

    async def _drain(self) -> None:
        try:
            while self._pending:
                await self._wait_for_window()
                request = self._pending.popleft()
                logger.debug("lookup_dispatched", word=request.word, remaining=len(self._pending))
                try:
                    is_valid = await self._policy.resolve(request.word)
                except asyncio.CancelledError:
                    if not request.future.done():
                        request.future.cancel()
                    raise
                except Exception as e:
                    if not request.future.done():
                        request.future.set_exception(e)
                else:
                    if not request.future.done():
                        request.future.set_result(is_valid)
                finally:
                    self._last_finished_at = self._clock()
        finally:
            self._draining = False
            self._task = None

    async def _wait_for_window(self) -> None:
        if self._last_finished_at is None:
            return
        remaining = self._last_finished_at + self._config.request_delay - self._clock()
        if remaining > 0:
            await self._sleep(remaining)
