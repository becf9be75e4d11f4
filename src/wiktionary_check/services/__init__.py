"""Service layer for business logic.

This layer contains the admission pipeline and its orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> LookupService -> AdmissionQueue -> RetryPolicy -> WordLookupClient
    (HTTP)  -> (cache + single flight) -> (pacing) -> (429 retries) -> (one HTTP call)

Usage:
    ```python
    from wiktionary_check.services import LookupService

    service = LookupService.create(client=WiktionaryClient.create())
    ```
"""

from .admission_queue import AdmissionQueue
from .lookup_service import LookupService
from .retry_policy import RetryPolicy

__all__ = [
    "AdmissionQueue",
    "LookupService",
    "RetryPolicy",
]
