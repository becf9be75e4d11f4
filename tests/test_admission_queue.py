"""
Tests for the admission queue: serialization, pacing and FIFO order.
"""

import asyncio

import pytest

from wiktionary_check.entities import PipelineConfig, UpstreamResult
from wiktionary_check.errors import UpstreamError
from wiktionary_check.services import AdmissionQueue, RetryPolicy

from conftest import FakeLookupClient

# asyncio timers may fire a hair early relative to time.monotonic()
TOLERANCE = 0.005


def make_queue(client: FakeLookupClient, config: PipelineConfig) -> AdmissionQueue:
    policy = RetryPolicy(client=client, config=config)
    return AdmissionQueue(policy=policy, config=config)


def gaps(client: FakeLookupClient) -> list[float]:
    """Idle time between the end of each call and the start of the next."""
    return [
        client.started_at[i + 1] - client.finished_at[i]
        for i in range(len(client.calls) - 1)
    ]


@pytest.mark.asyncio
async def test_single_word_resolves(fake_client, config):
    queue = make_queue(fake_client, config)

    assert await queue.enqueue("chat") is True
    assert fake_client.calls == ["chat"]
    assert not queue.is_draining


@pytest.mark.asyncio
async def test_concurrent_enqueues_are_serialized_in_fifo_order(config):
    client = FakeLookupClient(responses={"chat": UpstreamResult.valid_french()}, latency=0.01)
    queue = make_queue(client, config)
    words = ["chat", "chien", "xyzzy", "maison", "arbre"]

    futures = [queue.enqueue(word) for word in words]
    assert queue.pending == len(words)

    results = await asyncio.gather(*futures)

    assert results == [True, False, False, False, False]
    assert client.calls == words
    assert client.max_in_flight == 1
    assert all(gap >= config.request_delay - TOLERANCE for gap in gaps(client))
    assert queue.pending == 0
    assert not queue.is_draining


@pytest.mark.asyncio
async def test_restarted_drain_respects_delay_window(fake_client, config):
    queue = make_queue(fake_client, config)

    assert await queue.enqueue("chat") is True
    assert not queue.is_draining

    # The drain loop has stopped; a new enqueue starts a new one
    assert await queue.enqueue("chien") is False

    assert fake_client.calls == ["chat", "chien"]
    assert gaps(fake_client)[0] >= config.request_delay - TOLERANCE


@pytest.mark.asyncio
async def test_failure_does_not_stop_the_queue(config):
    client = FakeLookupClient(
        responses={
            "chat": UpstreamResult.valid_french(),
            "panne": UpstreamResult.transient_error(502, "HTTP error! status: 502"),
        }
    )
    queue = make_queue(client, config)

    results = await asyncio.gather(
        queue.enqueue("panne"),
        queue.enqueue("chat"),
        queue.enqueue("xyzzy"),
        return_exceptions=True,
    )

    assert isinstance(results[0], UpstreamError)
    assert results[1:] == [True, False]
    assert client.calls == ["panne", "chat", "xyzzy"]


@pytest.mark.asyncio
async def test_only_one_drain_loop_runs(config):
    client = FakeLookupClient(latency=0.01)
    queue = make_queue(client, config)

    first = queue.enqueue("un")
    assert queue.is_draining
    await asyncio.sleep(0)

    # Enqueued while draining: rides the existing loop
    second = queue.enqueue("deux")
    await asyncio.gather(first, second)

    assert client.calls == ["un", "deux"]
    assert client.max_in_flight == 1


@pytest.mark.asyncio
async def test_close_cancels_queued_requests():
    client = FakeLookupClient(latency=0.5)
    config = PipelineConfig(request_delay=0.0)
    queue = make_queue(client, config)

    in_flight = queue.enqueue("un")
    waiting = queue.enqueue("deux")
    await asyncio.sleep(0.01)

    await queue.close()

    assert in_flight.cancelled()
    assert waiting.cancelled()
    assert queue.pending == 0
    assert not queue.is_draining
    assert client.calls == ["un"]
