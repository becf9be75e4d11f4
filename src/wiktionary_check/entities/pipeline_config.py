"""Pipeline configuration entity."""

from dataclasses import dataclass

from wiktionary_check.config import Settings


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pacing and retry parameters, in seconds.

    Attributes:
        request_delay: Minimum gap between two upstream dispatches
        max_retries: Retries after the first rate-limited attempt
        retry_delay: Wait before retrying a rate-limited word
        cache_lifetime: Interval between full cache sweeps
    """

    request_delay: float = 1.0
    max_retries: int = 3
    retry_delay: float = 2.0
    cache_lifetime: float = 24 * 60 * 60.0

    def __post_init__(self) -> None:
        if self.request_delay < 0 or self.retry_delay < 0:
            raise ValueError("Delays must not be negative")
        if self.max_retries < 0:
            raise ValueError("max_retries must not be negative")
        if self.cache_lifetime <= 0:
            raise ValueError("cache_lifetime must be positive")

    @classmethod
    def from_settings(cls, settings: Settings) -> "PipelineConfig":
        """Build the pipeline config from millisecond-based settings."""
        return cls(
            request_delay=settings.request_delay_ms / 1000,
            max_retries=settings.max_retries,
            retry_delay=settings.retry_delay_ms / 1000,
            cache_lifetime=settings.cache_lifetime_ms / 1000,
        )

    @property
    def max_attempts(self) -> int:
        """Total upstream calls allowed for one word."""
        return self.max_retries + 1
