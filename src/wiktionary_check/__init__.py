"""Wiktionary Check - French word validation behind a paced, cached pipeline.

This package provides a layered architecture around the French Wiktionary API:

Layers:
    - protocols: Interface contracts (WordLookupClient, ResultStore)
    - repositories: Wiktionary HTTP client, in-memory result cache
    - services: Retry policy, admission queue, lookup service
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from wiktionary_check.repositories import WiktionaryClient
    from wiktionary_check.services import LookupService

    service = LookupService.create(client=WiktionaryClient.create())
    is_valid = await service.check_word("chat")
    ```

For HTTP API:
    ```python
    from wiktionary_check.api.app import app
    ```
"""

from wiktionary_check.config import get_settings, settings
from wiktionary_check.entities import LookupOutcome, PipelineConfig, UpstreamResult
from wiktionary_check.errors import (
    InternalError,
    InvalidWordError,
    RateLimitExceeded,
    UpstreamError,
    UpstreamExhausted,
    WordCheckError,
)
from wiktionary_check.handlers import WordHandler
from wiktionary_check.protocols import ResultStore, WordLookupClient
from wiktionary_check.repositories import InMemoryResultCache, WiktionaryClient
from wiktionary_check.services import AdmissionQueue, LookupService, RetryPolicy

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "ResultStore",
    "WordLookupClient",
    # Services (business logic)
    "AdmissionQueue",
    "LookupService",
    "RetryPolicy",
    # Handlers (HTTP)
    "WordHandler",
    # Repositories (data access)
    "InMemoryResultCache",
    "WiktionaryClient",
    # Entities (domain models)
    "LookupOutcome",
    "PipelineConfig",
    "UpstreamResult",
    # Errors
    "WordCheckError",
    "InvalidWordError",
    "UpstreamError",
    "UpstreamExhausted",
    "RateLimitExceeded",
    "InternalError",
]
