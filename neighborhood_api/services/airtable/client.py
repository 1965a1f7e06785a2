"""
Airtable REST client for roster queries.
Handles client initialization, authentication headers and offset pagination.
Low-level Airtable API client
"""

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from neighborhood_api.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.airtable.com"
MAX_PAGE_SIZE = 100  # Airtable rejects larger pages


class AirtableError(Exception):
    """Custom exception for Airtable API errors."""

    def __init__(
        self,
        message: str,
        error_type: str | None = None,
        status_code: int | None = None,
        response_data: dict | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.status_code = status_code
        self.response_data = response_data or {}


@dataclass(frozen=True)
class AirtableConfig:
    """Credentials and endpoint for one Airtable base. Built once per process."""

    api_key: str | None
    base_id: str | None
    api_url: str = DEFAULT_API_URL
    page_size: int = MAX_PAGE_SIZE
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings) -> "AirtableConfig":
        return cls(**settings.get_airtable_config())


class AirtableClient:
    """
    Client for the Airtable list-records endpoint.

    Returns raw record dicts ({"id", "createdTime", "fields"}); mapping to
    domain models is left to the calling service.
    """

    def __init__(self, config: AirtableConfig, client: httpx.AsyncClient | None = None):
        self.config = config
        self._client = client or self._create_client()

    def _create_client(self) -> httpx.AsyncClient:
        """Create async HTTP client for the Airtable API."""
        timeout = httpx.Timeout(self.config.timeout)
        limits = httpx.Limits(max_keepalive_connections=10, max_connections=20)
        return httpx.AsyncClient(timeout=timeout, limits=limits)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def _get_auth_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept": "application/json",
        }

    def _table_url(self, table: str) -> str:
        base = self.config.api_url.rstrip("/")
        return f"{base}/v0/{self.config.base_id}/{quote(table, safe='')}"

    def _handle_api_response(self, response: httpx.Response, operation: str) -> dict:
        """
        Handle and validate Airtable API response.

        Args:
            response: HTTP response from Airtable
            operation: Operation name for logging

        Returns:
            dict: Parsed response data

        Raises:
            AirtableError: If the response is an error or not a JSON object
        """
        if response.is_success:
            try:
                data = response.json()
            except ValueError as e:
                logger.error(f"Failed to parse Airtable {operation} response", error=str(e))
                raise AirtableError(f"Invalid response format: {e}") from e
            if not isinstance(data, dict):
                raise AirtableError("Invalid response format: expected a JSON object")
            return data

        try:
            error_data = response.json() if response.text else {}
        except ValueError:
            logger.error(
                f"Airtable {operation} failed with non-JSON response",
                status_code=response.status_code,
                response_text=response.text[:200] if response.text else "",
            )
            raise AirtableError(
                f"Airtable API error (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from None

        error_info = error_data.get("error", {}) if isinstance(error_data, dict) else {}
        if isinstance(error_info, str):
            error_info = {"type": error_info}

        error_type = error_info.get("type", "UNKNOWN")
        error_message = error_info.get("message", "Unknown Airtable error")

        logger.error(
            f"Airtable {operation} failed",
            status_code=response.status_code,
            error_type=error_type,
            error_message=error_message,
        )

        raise AirtableError(
            f"Airtable error: {error_message}",
            error_type=str(error_type),
            status_code=response.status_code,
            response_data=error_data,
        )

    async def list_records(
        self,
        table: str,
        fields: list[str] | None = None,
        filter_by_formula: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List every record of a table matching a formula.

        Follows the `offset` cursor until Airtable stops returning one.

        Args:
            table: Table name or id
            fields: Field projection (default: all fields)
            filter_by_formula: Airtable formula records must satisfy

        Returns:
            List of raw record dicts

        Raises:
            AirtableError: If credentials are missing or any page request fails
        """
        if not self.config.api_key or not self.config.base_id:
            raise AirtableError("Airtable credentials are not configured")

        url = self._table_url(table)
        headers = self._get_auth_headers()

        base_params: list[tuple[str, Any]] = [
            ("pageSize", min(self.config.page_size, MAX_PAGE_SIZE))
        ]
        for field in fields or []:
            base_params.append(("fields[]", field))
        if filter_by_formula:
            base_params.append(("filterByFormula", filter_by_formula))

        records: list[dict[str, Any]] = []
        offset: str | None = None
        page = 0

        while True:
            params = list(base_params)
            if offset:
                params.append(("offset", offset))

            try:
                response = await self._client.get(url, headers=headers, params=params)
            except httpx.HTTPError as e:
                logger.error("Airtable request failed", table=table, page=page, error=str(e))
                raise AirtableError(f"Airtable request failed: {e}") from e

            data = self._handle_api_response(response, "list_records")

            page_records = data.get("records")
            if not isinstance(page_records, list):
                raise AirtableError("Invalid response format: missing records list")
            records.extend(page_records)

            offset = data.get("offset")
            page += 1
            if not offset:
                break

        logger.info("Airtable records listed", table=table, pages=page, record_count=len(records))
        return records
