"""
HTTP client for fetching split CSV files.

The scoreboard never talks to an API; it reads static CSV files from the
web server hosting the site. CsvClient wraps one httpx.AsyncClient and
exposes ``fetch_text`` which matches the fetch callable expected by the
loaders and the Hall of Fame builder.

Usage:
    async with CsvClient(base_url="http://127.0.0.1:8000") as client:
        text = await client.fetch_text("data/2025_Split1.csv")

No retries and no rate limiting: a failed fetch is reported once and the
caller decides what it means.
"""

import logging
from typing import Awaitable, Callable

import httpx

logger = logging.getLogger(__name__)

# Any coroutine function taking a CSV path and returning its text.
FetchText = Callable[[str], Awaitable[str]]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ScoreboardError(Exception):
    """Base exception for scoreboard errors."""

    def __init__(
        self,
        message: str,
        code: str = "SCOREBOARD_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class CsvFetchError(ScoreboardError):
    """Raised when a CSV file cannot be fetched.

    ``status_code`` is the HTTP status when the server answered, or None
    for transport failures (connection refused, DNS, timeouts).
    """

    def __init__(self, message: str, path: str, status_code: int | None = None):
        super().__init__(
            message,
            code="CSV_NOT_FOUND" if status_code == 404 else "CSV_FETCH_FAILED",
        )
        self.path = path
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class CsvClient:
    """
    Async HTTP client for CSV files served next to the scoreboard page.

    Use as an async context manager:

        async with CsvClient(base_url=settings.base_url) as client:
            text = await client.fetch_text("data/2024_Split2.csv")

    Or with lazy initialisation:

        client = CsvClient(base_url="http://localhost:8000")
        text = await client.fetch_text("data/2024_Split2.csv")
        await client.close()
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -- Lifecycle -----------------------------------------------------------

    def _build_client(self) -> httpx.AsyncClient:
        kwargs = {
            "base_url": self._base_url,
            "headers": {"Cache-Control": "no-cache"},
            "transport": self._transport,
        }
        if self._timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self._timeout)
        return httpx.AsyncClient(**kwargs)

    async def __aenter__(self) -> "CsvClient":
        self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the HTTP client, lazily creating it if needed."""
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    # -- Fetching ------------------------------------------------------------

    async def fetch_text(self, path: str) -> str:
        """
        GET a CSV file and return its body decoded as text.

        Raises:
            CsvFetchError: On any non-2xx response or transport error
        """
        try:
            response = await self.client.get(path)
        except httpx.RequestError as e:
            raise CsvFetchError(f"Request failed for {path}: {e}", path=path) from e

        if not response.is_success:
            raise CsvFetchError(
                f"HTTP {response.status_code} for {path}",
                path=path,
                status_code=response.status_code,
            )

        logger.debug("Fetched %s (%d bytes)", path, len(response.content))
        return response.text
