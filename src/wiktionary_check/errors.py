"""Exception hierarchy for word checks.

Upstream signals (rate limit, transient failure) are outcomes, not
exceptions; see ``entities.LookupOutcome``. The classes here are what the
pipeline raises once an outcome has been judged final.
"""


class WordCheckError(Exception):
    """Base class for every error raised by the lookup pipeline."""


class InvalidWordError(WordCheckError, ValueError):
    """Raised when the caller's input normalizes to an empty key."""


class UpstreamError(WordCheckError):
    """Raised when the dictionary API fails with a non rate-limit error."""

    def __init__(self, word: str, status_code: int | None = None, detail: str = "") -> None:
        self.word = word
        self.status_code = status_code
        self.detail = detail
        status = status_code if status_code is not None else "n/a"
        super().__init__(f"Upstream lookup failed for {word!r} (status {status}): {detail}")


class UpstreamExhausted(WordCheckError):
    """Raised when every attempt for a word was rate limited."""

    def __init__(self, word: str, attempts: int) -> None:
        self.word = word
        self.attempts = attempts
        super().__init__(f"Rate limited on all {attempts} attempts for {word!r}")


class RateLimitExceeded(WordCheckError):
    """Caller-facing: the upstream rate limit could not be worked around."""


class InternalError(WordCheckError):
    """Caller-facing: any other failure while checking a word."""
