from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wiktionary_check.api.dependencies import HandlerDep, lifespan
from wiktionary_check.config import Settings, get_settings
from wiktionary_check.dto import ErrorResponse, PingResponse, WordCheckResponse
from wiktionary_check.protocols import WordLookupClient

API_TITLE = "Wiktionary Check API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "Checks whether a word has a French Wiktionary entry"


def create_app(
    settings: Settings | None = None,
    lookup_client: WordLookupClient | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use. Defaults to get_settings().
        lookup_client: Upstream client override, used by tests.

    Returns:
        Configured FastAPI app; services are created by its lifespan
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.lookup_client = lookup_client

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
            "endpoints": {
                "check_word": "/check-word/{word}",
                "ping": "/ping",
                "docs": "/docs",
            },
        }

    @app.get("/ping", response_model=PingResponse)
    async def ping(handler: HandlerDep) -> PingResponse:
        """Liveness endpoint reporting queue length and cache size."""
        return await handler.ping()

    @app.get(
        "/check-word/{word}",
        response_model=WordCheckResponse,
        responses={
            400: {"model": ErrorResponse},
            429: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    async def check_word(word: str, handler: HandlerDep):
        """
        Check whether a word exists in the French Wiktionary.

        Args:
            word: The word to check (case-insensitive).

        Returns:
            {"isValid": bool}, or an error body with status 400, 429 or 500.
        """
        return await handler.check_word(word)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "wiktionary_check.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
