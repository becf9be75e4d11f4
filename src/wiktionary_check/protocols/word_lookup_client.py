"""Word lookup client protocol.

Defines the interface for anything that can ask a dictionary whether a
word has a French entry, in a single attempt.

Implementations can include:
- The French Wiktionary MediaWiki API (default)
- Scripted fakes for tests
"""

from typing import Protocol, runtime_checkable

from wiktionary_check.entities import UpstreamResult


@runtime_checkable
class WordLookupClient(Protocol):
    """Protocol for single-attempt dictionary lookups.

    Implementations must not retry; pacing and retries belong to the
    admission pipeline.
    """

    async def lookup(self, word: str) -> UpstreamResult:
        """Look up one normalized word.

        Args:
            word: The normalized word key

        Returns:
            The classified outcome of the call
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
