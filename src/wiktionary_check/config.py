import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream dictionary
    wiktionary_api_url: str = os.getenv("WIKTIONARY_API_URL", "https://fr.wiktionary.org/w/api.php")
    wiktionary_user_agent: str = os.getenv(
        "WIKTIONARY_USER_AGENT",
        "wiktionary-check/0.1 (https://github.com/wiktionary-check)",
    )
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10.0"))

    # Admission pipeline
    request_delay_ms: int = int(os.getenv("REQUEST_DELAY_MS", "1000"))
    max_retries: int = int(os.getenv("MAX_RETRIES", "3"))
    retry_delay_ms: int = int(os.getenv("RETRY_DELAY_MS", "2000"))

    # Cache
    cache_lifetime_ms: int = int(os.getenv("CACHE_LIFETIME_MS", str(24 * 60 * 60 * 1000)))  # 24h

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", "3001"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    cors_origins: tuple[str, ...] = _split_origins(os.getenv("CORS_ORIGINS", "*"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "info")
    log_json: bool = os.getenv("LOG_JSON", "false").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.request_delay_ms < 0:
            raise ValueError("REQUEST_DELAY_MS must not be negative")

        if self.max_retries < 0:
            raise ValueError("MAX_RETRIES must not be negative")

        if self.retry_delay_ms < 0:
            raise ValueError("RETRY_DELAY_MS must not be negative")

        if self.cache_lifetime_ms <= 0:
            raise ValueError(f"CACHE_LIFETIME_MS must be positive, got {self.cache_lifetime_ms}")

        if self.http_timeout <= 0:
            raise ValueError(f"HTTP_TIMEOUT must be positive, got {self.http_timeout}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
