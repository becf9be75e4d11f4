"""French Wiktionary lookup client.

Uses the MediaWiki ``action=parse`` API to fetch the raw wikitext of a page
and looks for a French-language section header in it.

Single attempt per call: retries and pacing are handled by the admission
pipeline, never here.
"""

from typing import Any

import httpx
import structlog

from wiktionary_check.config import settings
from wiktionary_check.entities import UpstreamResult

logger = structlog.get_logger(__name__)

# Section headers that open a French entry, old and current template styles
FRENCH_SECTION_MARKERS = ("{{langue|fr}}", "{{=fr=}}")


def extract_wikitext(data: dict[str, Any]) -> str | None:
    """Pull the wikitext out of a parse response.

    ``formatversion=2`` returns a plain string, older formats wrap it in an
    object under ``*`` or ``content``.
    """
    parse = data.get("parse")
    if not isinstance(parse, dict):
        return None

    wikitext = parse.get("wikitext")
    if isinstance(wikitext, str):
        return wikitext or None
    if isinstance(wikitext, dict):
        content = wikitext.get("*") or wikitext.get("content")
        return content if isinstance(content, str) and content else None
    return None


def has_french_section(wikitext: str) -> bool:
    """Check whether the page content declares a French-language section."""
    return any(marker in wikitext for marker in FRENCH_SECTION_MARKERS)


class WiktionaryClient:
    """MediaWiki implementation of the WordLookupClient protocol.

    This class satisfies the WordLookupClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = WiktionaryClient.create()
        result = await client.lookup("chat")
        print(result.outcome)  # LookupOutcome.VALID_FRENCH
        await client.close()
        ```
    """

    def __init__(
        self,
        api_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Wiktionary client.

        Args:
            api_url: MediaWiki api.php endpoint. Defaults to settings.wiktionary_api_url.
            user_agent: User-Agent header sent upstream. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            client: Pre-built httpx client (tests inject a MockTransport here).
        """
        self._api_url = api_url or settings.wiktionary_api_url
        self._user_agent = user_agent or settings.wiktionary_user_agent
        self._timeout = timeout or settings.http_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        api_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> "WiktionaryClient":
        """Factory method to create WiktionaryClient with defaults from settings."""
        return cls(api_url=api_url, user_agent=user_agent, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
            )
        return self._client

    @staticmethod
    def build_params(word: str) -> dict[str, str]:
        """Query parameters asking for the raw wikitext of ``word``."""
        return {
            "action": "parse",
            "page": word,
            "format": "json",
            "prop": "wikitext",
            "formatversion": "2",
            "redirects": "1",
        }

    async def lookup(self, word: str) -> UpstreamResult:
        """Perform one lookup against the dictionary API.

        Args:
            word: The normalized word key

        Returns:
            UpstreamResult classifying the response
        """
        try:
            response = await self.client.get(self._api_url, params=self.build_params(word))
        except httpx.HTTPError as e:
            logger.warning("upstream_request_failed", word=word, error=str(e))
            return UpstreamResult.transient_error(None, f"{type(e).__name__}: {e}")

        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            return UpstreamResult.rate_limited("HTTP 429")

        if not response.is_success:
            return UpstreamResult.transient_error(
                response.status_code, f"HTTP error! status: {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            return UpstreamResult.transient_error(response.status_code, f"Invalid JSON: {e}")

        if not isinstance(data, dict):
            return UpstreamResult.transient_error(response.status_code, "Unexpected response format")

        error = data.get("error")
        if error:
            code = error.get("code", "") if isinstance(error, dict) else str(error)
            # MediaWiki may signal throttling in-band with a 200
            if code == "ratelimited":
                return UpstreamResult.rate_limited(code)
            return UpstreamResult.not_valid(code or "error")

        wikitext = extract_wikitext(data)
        if wikitext is None:
            return UpstreamResult.not_valid("no content")

        if has_french_section(wikitext):
            return UpstreamResult.valid_french()
        return UpstreamResult.not_valid("no French section")

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
