"""Repository layer for data access.

This layer abstracts external dependencies (the dictionary API, the
result cache) behind protocol-based interfaces. This enables:
- Swapping the dictionary backend
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from wiktionary_check.protocols import ResultStore, WordLookupClient

from .memory_cache import InMemoryResultCache
from .wiktionary_client import WiktionaryClient

__all__ = [
    "ResultStore",
    "WordLookupClient",
    "InMemoryResultCache",
    "WiktionaryClient",
]
