"""Async client for the public Polymarket Gamma API (events, tags, markets)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
import structlog

from polymarket_analyst.constants import DEFAULT_EVENTS_LIMIT, DEFAULT_MARKETS_LIMIT
from polymarket_analyst.gamma.config import GammaConfig
from polymarket_analyst.gamma.exceptions import EventNotFoundError, GammaAPIError

if TYPE_CHECKING:
    from types import TracebackType

logger = structlog.get_logger()


class GammaClient:
    """
    Read-only Gamma API client.

    Use as an async context manager:

        async with GammaClient.from_env() as gamma:
            events = await gamma.get_events(tag="finance")

    Failures are surfaced as `GammaAPIError` and never retried.
    """

    def __init__(self, config: GammaConfig | None = None) -> None:
        self._config = config or GammaConfig()
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_env(cls) -> GammaClient:
        """Create a client using environment configuration."""
        return cls(GammaConfig.from_env())

    async def open(self) -> None:
        """Initialize the underlying `httpx.AsyncClient` if needed."""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout_seconds,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        """Close the underlying `httpx.AsyncClient` if it is open."""
        if self._client is None:
            return
        await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> GammaClient:
        await self.open()
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the initialized `httpx.AsyncClient`.

        Raises:
            RuntimeError: If `open()` has not been called yet.
        """
        if self._client is None:
            raise RuntimeError(
                "GammaClient not initialized. "
                "Use 'async with GammaClient.from_env()' or call open()."
            )
        return self._client

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON payload.

        Raises:
            GammaAPIError: For transport failures, non-success status codes, or
                invalid JSON responses.
        """
        try:
            response = await self.client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.warning("Gamma request failed", path=path, error=str(e))
            raise GammaAPIError(f"Gamma request failed: {e}") from e

        if response.status_code >= 400:
            raise GammaAPIError(
                f"API error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise GammaAPIError(
                f"Response was not valid JSON: {response.text}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _as_list(payload: Any, *, path: str) -> list[dict[str, Any]]:
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            payload = payload["data"]
        if not isinstance(payload, list):
            raise GammaAPIError(f"Expected a JSON array from {path}")
        return [item for item in payload if isinstance(item, dict)]

    async def get_tags(self) -> list[dict[str, Any]]:
        """List all tags (`GET /tags`)."""
        return self._as_list(await self._get("/tags"), path="/tags")

    async def find_tag(self, query: str) -> dict[str, Any] | None:
        """Return the first tag whose label or slug contains `query` (case-insensitive)."""
        needle = query.strip().lower()
        if not needle:
            return None
        for tag in await self.get_tags():
            label = str(tag.get("label") or "").lower()
            slug = str(tag.get("slug") or "").lower()
            if needle in label or needle in slug:
                return tag
        return None

    async def get_events(
        self,
        *,
        tag: str | None = None,
        limit: int = DEFAULT_EVENTS_LIMIT,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """List open events, newest first, optionally filtered by a tag name.

        An unknown tag name is ignored (the listing is returned unfiltered).
        """
        params: dict[str, Any] = {
            "order": "id",
            "ascending": "false",
            "closed": "false",
            "limit": limit,
            "offset": offset,
        }
        if tag:
            tag_obj = await self.find_tag(tag)
            if tag_obj is not None and tag_obj.get("id") is not None:
                params["tag_id"] = tag_obj["id"]
            else:
                logger.info("Tag not found; listing without tag filter", tag=tag)

        return self._as_list(await self._get("/events", params=params), path="/events")

    async def get_event(self, slug: str) -> dict[str, Any]:
        """Fetch one event (with nested markets) by slug.

        Raises:
            EventNotFoundError: If the slug does not exist.
        """
        path = "/events/slug/" + quote(slug, safe="")
        try:
            payload = await self._get(path)
        except GammaAPIError as e:
            if e.status_code == 404:
                raise EventNotFoundError(slug) from e
            raise

        if not isinstance(payload, dict):
            raise GammaAPIError(f"Expected a JSON object from {path}")
        return payload

    async def get_markets(
        self,
        *,
        limit: int = DEFAULT_MARKETS_LIMIT,
        offset: int = 0,
        tag_id: str | int | None = None,
    ) -> list[dict[str, Any]]:
        """List open markets (`GET /markets`)."""
        params: dict[str, Any] = {"closed": "false", "limit": limit, "offset": offset}
        if tag_id is not None:
            params["tag_id"] = tag_id
        return self._as_list(await self._get("/markets", params=params), path="/markets")
