"""Shared fixtures and fakes for the word check tests."""

import asyncio
import time

import pytest

from wiktionary_check.entities import PipelineConfig, UpstreamResult


class FakeLookupClient:
    """Scripted WordLookupClient that records every call.

    ``responses`` maps a word to one result or to a list of results consumed
    in order; the last result of a list is repeated once the others are used.
    """

    def __init__(
        self,
        responses: dict[str, UpstreamResult | list[UpstreamResult]] | None = None,
        default: UpstreamResult | None = None,
        latency: float = 0.0,
    ) -> None:
        self._responses = {
            word: list(value) if isinstance(value, list) else [value]
            for word, value in (responses or {}).items()
        }
        self._default = default or UpstreamResult.not_valid("missingtitle")
        self._latency = latency
        self.calls: list[str] = []
        self.started_at: list[float] = []
        self.finished_at: list[float] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    def script(self, word: str, *results: UpstreamResult) -> None:
        self._responses[word] = list(results)

    async def lookup(self, word: str) -> UpstreamResult:
        self.calls.append(word)
        self.started_at.append(time.monotonic())
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self._latency)
            scripted = self._responses.get(word)
            if not scripted:
                return self._default
            if len(scripted) > 1:
                return scripted.pop(0)
            return scripted[0]
        finally:
            self.in_flight -= 1
            self.finished_at.append(time.monotonic())

    async def close(self) -> None:
        self.closed = True


class SleepRecorder:
    """Awaitable stand-in for asyncio.sleep that only records durations."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


@pytest.fixture
def fake_client():
    """Fake upstream knowing 'chat' as French and everything else as missing."""
    return FakeLookupClient(responses={"chat": UpstreamResult.valid_french()})


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def config():
    """Fast pipeline config for tests."""
    return PipelineConfig(request_delay=0.05, max_retries=3, retry_delay=0.5, cache_lifetime=60.0)
