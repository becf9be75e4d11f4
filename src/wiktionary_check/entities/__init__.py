"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .lookup_outcome import LookupOutcome, UpstreamResult
from .pipeline_config import PipelineConfig
from .queued_request import QueuedRequest

__all__ = ["LookupOutcome", "UpstreamResult", "PipelineConfig", "QueuedRequest"]
