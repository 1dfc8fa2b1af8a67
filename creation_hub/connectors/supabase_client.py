"""
Supabase REST client used as the Content Repository's data source.

Talks to the PostgREST endpoint Supabase exposes under ``/rest/v1``. Only one
capability is needed: read every row of a named table. No filtering or
pagination is pushed down.

Usage:
    from creation_hub.connectors.supabase_client import get_supabase_client

    client = get_supabase_client()
    rows = await client.select_all("website_blog")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from creation_hub.config import settings

logger = logging.getLogger("creation_hub.supabase_client")


class SupabaseError(RuntimeError):
    """Raised when a table read fails or returns an invalid response."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class SupabaseClient:
    """Async client for whole-table reads against Supabase REST."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (base_url or settings.supabase_url or "").rstrip("/")
        self.api_key = api_key if api_key is not None else settings.supabase_key
        self.timeout = timeout if timeout is not None else settings.supabase_timeout

        if not self.base_url:
            raise ValueError(
                "SupabaseClient requires a base URL. Set SUPABASE_URL in the environment"
            )

    def _get_client(self) -> httpx.AsyncClient:
        """Create a fresh HTTP client per call."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=headers,
        )

    @property
    def is_available(self) -> bool:
        return bool(self.base_url)

    async def select_all(self, table: str) -> List[Dict[str, Any]]:
        """
        Read every row of ``table``.

        Table names may contain spaces and are percent-encoded into the path.

        Raises:
            SupabaseError: On transport failure, HTTP error, or a body that is
                not a JSON list of objects.
        """
        path = f"/rest/v1/{quote(table, safe='')}"
        try:
            async with self._get_client() as client:
                response = await client.get(path, params={"select": "*"})
        except httpx.RequestError as e:
            raise SupabaseError(f"Request for table '{table}' failed: {e}", status_code=502) from e

        if response.status_code >= 400:
            raise SupabaseError(
                f"Supabase HTTP {response.status_code} for table '{table}': {response.text[:500]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise SupabaseError(f"Table '{table}' returned invalid JSON", status_code=502) from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise SupabaseError(f"Table '{table}' returned {type(data).__name__}, expected a list", status_code=502)

        rows = [row for row in data if isinstance(row, dict)]
        logger.debug(f"Read {len(rows)} rows from '{table}'")
        return rows


def get_supabase_client() -> SupabaseClient:
    """
    Build a client from settings.

    Raises:
        ValueError: If SUPABASE_URL is not configured.
    """
    return SupabaseClient()
