"""
Hackatime API client for heartbeat spans.
Read-only access to the public spans endpoint; no retries.
"""

from urllib.parse import quote

import httpx

from neighborhood_api.infrastructure.observability.logging import get_logger
from neighborhood_api.models.domain.neighbor_domain import TimeSpan

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://hackatime.hackclub.com"
REQUEST_TIMEOUT = 15  # seconds


class HackatimeError(Exception):
    """Custom exception for Hackatime API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}


class HackatimeClient:
    """Client for per-user heartbeat spans."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, pool=None),
            limits=httpx.Limits(max_keepalive_connections=20, max_connections=None),
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def spans_url(self, user_id: str) -> str:
        return f"{self.base_url}/api/v1/users/{quote(user_id, safe='')}/heartbeats/spans"

    async def get_spans(self, user_id: str) -> list[TimeSpan]:
        """
        Fetch all heartbeat spans for a user.

        Args:
            user_id: Hackatime user identifier (the Slack ID)

        Returns:
            List[TimeSpan]: Spans reported by Hackatime

        Raises:
            HackatimeError: On non-success status or malformed payload
            httpx.HTTPError: On transport failure
        """
        response = await self._client.get(
            self.spans_url(user_id), headers={"Accept": "application/json"}
        )

        if not response.is_success:
            raise HackatimeError(
                f"Hackatime API responded with status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise HackatimeError(f"Invalid response format: {e}") from e

        spans = data.get("spans") if isinstance(data, dict) else None
        if not isinstance(spans, list):
            raise HackatimeError("Invalid response format: missing spans list", response_data=data)

        try:
            return [TimeSpan.from_api(span) for span in spans]
        except ValueError as e:
            raise HackatimeError(f"Invalid span in response: {e}") from e
