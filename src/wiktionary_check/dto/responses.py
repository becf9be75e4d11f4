"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class WordCheckResponse(BaseModel):
    """Response DTO for a word check."""

    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(
        ...,
        alias="isValid",
        description="Whether the word has a French-language Wiktionary entry",
    )


class ErrorResponse(BaseModel):
    """Response DTO for failed word checks (400, 429, 500)."""

    error: str = Field(..., description="Short error label")
    message: str = Field(..., description="Human-readable explanation for the caller")


class PingResponse(BaseModel):
    """Response DTO for the liveness endpoint."""

    status: str = Field(..., description="Always 'ok' while the process serves requests")
    message: str = Field(..., description="Human-readable status message")
    queue_length: int = Field(..., description="Lookups waiting for the upstream", ge=0)
    cache_size: int = Field(..., description="Number of cached word results", ge=0)
