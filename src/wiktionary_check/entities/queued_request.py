"""Queued request domain entity."""

import asyncio
from dataclasses import dataclass


@dataclass(frozen=True)
class QueuedRequest:
    """A cache miss waiting for its turn at the upstream.

    Attributes:
        word: Normalized word key
        future: Completion handle, settled exactly once by the drain loop
    """

    word: str
    future: "asyncio.Future[bool]"
