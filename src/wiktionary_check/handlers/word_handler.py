"""HTTP handlers for word checks.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error bodies.
"""

import structlog
from fastapi import status
from fastapi.responses import JSONResponse

from wiktionary_check.dto import ErrorResponse, PingResponse, WordCheckResponse
from wiktionary_check.errors import InvalidWordError, RateLimitExceeded
from wiktionary_check.services import LookupService

logger = structlog.get_logger(__name__)


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


class WordHandler:
    """HTTP handlers for word check operations.

    This handler delegates business logic to LookupService
    and handles HTTP-specific concerns like:
    - Converting results to DTOs
    - Mapping pipeline errors to status codes

    Example:
        ```python
        handler = WordHandler(lookup_service=service)

        @app.get("/check-word/{word}", response_model=WordCheckResponse)
        async def check_word(word: str):
            return await handler.check_word(word)
        ```
    """

    def __init__(self, lookup_service: LookupService) -> None:
        """Initialize the word handler.

        Args:
            lookup_service: The lookup service for business logic (required).
        """
        self._service = lookup_service

    async def check_word(self, word: str) -> WordCheckResponse | JSONResponse:
        """Handle GET /check-word/{word} requests.

        Args:
            word: Raw path parameter

        Returns:
            WordCheckResponse on success, an ErrorResponse body otherwise
        """
        try:
            is_valid = await self._service.check_word(word)
        except InvalidWordError as e:
            return _error(status.HTTP_400_BAD_REQUEST, "Bad Request", str(e))
        except RateLimitExceeded:
            logger.warning("check_word_rate_limited", word=word)
            return _error(
                status.HTTP_429_TOO_MANY_REQUESTS,
                "Too Many Requests",
                "Veuillez réessayer dans quelques secondes",
            )
        except Exception:
            logger.exception("check_word_failed", word=word)
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Erreur serveur",
                "Une erreur est survenue lors de la vérification du mot",
            )

        return WordCheckResponse(is_valid=is_valid)

    async def ping(self) -> PingResponse:
        """Handle GET /ping requests."""
        return PingResponse(
            status="ok",
            message="Serveur Sakamo opérationnel",
            queue_length=self._service.queue_length,
            cache_size=self._service.cache_size,
        )
