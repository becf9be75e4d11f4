"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the dictionary backend without touching the pipeline
- Unit testing with fake implementations
"""

from .result_store import ResultStore
from .word_lookup_client import WordLookupClient

__all__ = [
    "ResultStore",
    "WordLookupClient",
]
