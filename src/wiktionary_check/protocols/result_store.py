"""Result store protocol.

Defines the interface for the word -> validity cache.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ResultStore(Protocol):
    """Protocol for validity result storage."""

    def get(self, word: str) -> bool | None:
        """Return the cached validity, or None on a miss."""
        ...

    def set(self, word: str, is_valid: bool) -> None:
        """Store the validity of a word."""
        ...

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        ...

    def __len__(self) -> int:
        ...
