"""Bounded retry around a single upstream lookup.

Only rate-limit outcomes are retried. Any other upstream failure is raised
straight away so that a real outage is not hidden behind retries.
"""

import asyncio
from collections.abc import Awaitable, Callable

import structlog

from wiktionary_check.entities import LookupOutcome, PipelineConfig
from wiktionary_check.errors import UpstreamError, UpstreamExhausted
from wiktionary_check.protocols import WordLookupClient

logger = structlog.get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class RetryPolicy:
    """Resolve a word to its validity, retrying while rate limited.

    Example:
        ```python
        policy = RetryPolicy(client=WiktionaryClient.create(), config=PipelineConfig())
        is_valid = await policy.resolve("chat")
        ```
    """

    def __init__(
        self,
        client: WordLookupClient,
        config: PipelineConfig,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """Initialize the retry policy.

        Args:
            client: Single-attempt dictionary client
            config: Pipeline config providing max_retries and retry_delay
            sleep: Awaitable sleep, replaceable in tests
        """
        self._client = client
        self._config = config
        self._sleep = sleep

    async def resolve(self, word: str) -> bool:
        """Look up ``word``, retrying on rate limits.

        Args:
            word: The normalized word key

        Returns:
            True if the word has a French entry, False otherwise

        Raises:
            UpstreamExhausted: If all max_retries + 1 attempts were rate limited
            UpstreamError: If the upstream failed for another reason
        """
        max_attempts = self._config.max_attempts
        attempt = 0

        while attempt < max_attempts:
            attempt += 1
            result = await self._client.lookup(word)

            if result.outcome is LookupOutcome.VALID_FRENCH:
                return True
            if result.outcome is LookupOutcome.NOT_VALID:
                return False

            if result.outcome is LookupOutcome.TRANSIENT_ERROR:
                logger.error(
                    "upstream_error",
                    word=word,
                    status_code=result.status_code,
                    detail=result.detail,
                    attempt=attempt,
                )
                raise UpstreamError(word, result.status_code, result.detail)

            if attempt < max_attempts:
                logger.warning(
                    "rate_limited_retry_scheduled",
                    word=word,
                    attempt=attempt,
                    max_attempts=max_attempts,
                    retry_delay=self._config.retry_delay,
                )
                await self._sleep(self._config.retry_delay)

        logger.error("rate_limit_retries_exhausted", word=word, attempts=attempt)
        raise UpstreamExhausted(word, attempt)
