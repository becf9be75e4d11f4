"""Lookup service: public entry point for word checks.

This service orchestrates the result cache and the admission queue.
Concurrent misses for the same word share one queued request, and the
cache is written once per settled lookup.
"""

import asyncio

import structlog

from wiktionary_check.entities import PipelineConfig
from wiktionary_check.errors import (
    InternalError,
    RateLimitExceeded,
    UpstreamExhausted,
)
from wiktionary_check.protocols import ResultStore, WordLookupClient
from wiktionary_check.repositories import InMemoryResultCache
from wiktionary_check.services.admission_queue import AdmissionQueue
from wiktionary_check.services.retry_policy import RetryPolicy
from wiktionary_check.utils import normalize_word

logger = structlog.get_logger(__name__)


class LookupService:
    """Word validity service.

    One instance is built at startup and shared by every request handler.
    It owns the cache and the queue; the upstream client is injected.

    Example:
        ```python
        from wiktionary_check.repositories import WiktionaryClient
        from wiktionary_check.services import LookupService

        service = LookupService.create(client=WiktionaryClient.create())
        service.start()
        await service.check_word("Chat")  # True
        await service.close()
        ```
    """

    def __init__(
        self,
        cache: ResultStore,
        queue: AdmissionQueue,
        config: PipelineConfig,
        client: WordLookupClient | None = None,
    ) -> None:
        """Initialize the lookup service.

        Args:
            cache: Validity result store
            queue: Admission queue for cache misses
            config: Pipeline config (cache_lifetime drives the sweeper)
            client: Upstream client, closed by close() when given
        """
        self._cache = cache
        self._queue = queue
        self._config = config
        self._client = client
        self._in_flight: dict[str, asyncio.Future[bool]] = {}

    @classmethod
    def create(
        cls,
        client: WordLookupClient,
        config: PipelineConfig | None = None,
        cache: ResultStore | None = None,
    ) -> "LookupService":
        """Factory method wiring the retry policy and queue around ``client``.

        Args:
            client: Single-attempt dictionary client (required)
            config: Pipeline config. Defaults to PipelineConfig() values.
            cache: Result store. Defaults to a new InMemoryResultCache.

        Returns:
            Configured LookupService
        """
        config = config or PipelineConfig()
        policy = RetryPolicy(client=client, config=config)
        queue = AdmissionQueue(policy=policy, config=config)
        return cls(
            cache=cache if cache is not None else InMemoryResultCache(),
            queue=queue,
            config=config,
            client=client,
        )

    async def check_word(self, raw_word: str) -> bool:
        """Tell whether a word has a French Wiktionary entry.

        Args:
            raw_word: Caller input, normalized before any lookup

        Returns:
            True if the word has a French-language section

        Raises:
            InvalidWordError: If the input is empty after normalization
            RateLimitExceeded: If the upstream kept rate limiting the lookup
            InternalError: For any other failure
        """
        word = normalize_word(raw_word)

        cached = self._cache.get(word)
        if cached is not None:
            logger.info("cache_hit", word=word, is_valid=cached)
            return cached

        pending = self._in_flight.get(word)
        if pending is None:
            pending = self._queue.enqueue(word)
            self._in_flight[word] = pending
            pending.add_done_callback(lambda future: self._on_settled(word, future))

        try:
            is_valid = await asyncio.shield(pending)
        except UpstreamExhausted as e:
            raise RateLimitExceeded(str(e)) from e
        except Exception as e:
            raise InternalError(f"Failed to check {word!r}: {e}") from e

        logger.info("word_checked", word=word, is_valid=is_valid)
        return is_valid

    def _on_settled(self, word: str, future: "asyncio.Future[bool]") -> None:
        self._in_flight.pop(word, None)
        if future.cancelled() or future.exception() is not None:
            return
        self._cache.set(word, future.result())

    def start(self) -> None:
        """Start the periodic cache sweep on the running loop."""
        if isinstance(self._cache, InMemoryResultCache):
            self._cache.start_sweeper(self._config.cache_lifetime)

    async def close(self) -> None:
        """Stop background work and release the upstream client."""
        if isinstance(self._cache, InMemoryResultCache):
            await self._cache.stop_sweeper()
        await self._queue.close()
        if self._client is not None:
            await self._client.close()

    @property
    def queue_length(self) -> int:
        """Number of lookups waiting for the upstream."""
        return self._queue.pending

    @property
    def cache_size(self) -> int:
        """Number of cached results."""
        return len(self._cache)

    @property
    def cache(self) -> ResultStore:
        """Get the underlying result store (for testing)."""
        return self._cache
