"""Upstream lookup outcome entities."""

from dataclasses import dataclass
from enum import Enum


class LookupOutcome(str, Enum):
    """What a single dictionary API call told us about a word."""

    VALID_FRENCH = "valid_french"
    NOT_VALID = "not_valid"
    RATE_LIMITED = "rate_limited"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True)
class UpstreamResult:
    """Domain entity for the result of one upstream call.

    Attributes:
        outcome: The classified outcome
        status_code: HTTP status for TRANSIENT_ERROR (None for network failures)
        detail: Short human-readable explanation, used in logs and errors
    """

    outcome: LookupOutcome
    status_code: int | None = None
    detail: str = ""

    @classmethod
    def valid_french(cls) -> "UpstreamResult":
        return cls(LookupOutcome.VALID_FRENCH)

    @classmethod
    def not_valid(cls, detail: str = "") -> "UpstreamResult":
        return cls(LookupOutcome.NOT_VALID, detail=detail)

    @classmethod
    def rate_limited(cls, detail: str = "") -> "UpstreamResult":
        return cls(LookupOutcome.RATE_LIMITED, status_code=429, detail=detail)

    @classmethod
    def transient_error(cls, status_code: int | None, detail: str = "") -> "UpstreamResult":
        return cls(LookupOutcome.TRANSIENT_ERROR, status_code=status_code, detail=detail)
