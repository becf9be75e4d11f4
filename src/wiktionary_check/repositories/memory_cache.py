"""In-process implementation of ResultStore.

Entries never expire individually; the whole cache is dropped by a
background sweep every ``cache_lifetime`` seconds.
"""

import asyncio

import structlog

logger = structlog.get_logger(__name__)


class InMemoryResultCache:
    """Dict-backed word -> validity cache.

    This class satisfies the ResultStore protocol through structural
    typing - no explicit inheritance needed.

    All access happens on the event loop thread, so no locking is needed.
    """

    def __init__(self) -> None:
        self._entries: dict[str, bool] = {}
        self._sweeper: asyncio.Task[None] | None = None

    def get(self, word: str) -> bool | None:
        """Return the cached validity, or None on a miss."""
        return self._entries.get(word)

    def set(self, word: str, is_valid: bool) -> None:
        """Store the validity of a word."""
        self._entries[word] = is_valid

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        count = len(self._entries)
        self._entries.clear()
        return count

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def start_sweeper(self, interval: float) -> None:
        """Start the periodic full-clear task on the running loop.

        Args:
            interval: Seconds between two sweeps
        """
        if self._sweeper is not None and not self._sweeper.done():
            return
        self._sweeper = asyncio.get_running_loop().create_task(
            self._sweep_forever(interval), name="result-cache-sweeper"
        )

    async def stop_sweeper(self) -> None:
        """Cancel the sweep task and wait for it to finish."""
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None

    @property
    def sweeper_running(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()

    async def _sweep_forever(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            removed = self.clear()
            logger.info("cache_swept", removed=removed)
