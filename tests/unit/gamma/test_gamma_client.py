"""
Gamma client tests - mock ONLY at HTTP boundary.

These tests use respx to mock HTTP requests. Everything else
(config, payload unwrapping, error mapping) uses real implementations.
"""

from __future__ import annotations

import httpx
import pytest
import respx
from httpx import Response

from polymarket_analyst.gamma import (
    EventNotFoundError,
    GammaAPIError,
    GammaClient,
    GammaConfig,
)

BASE = "https://gamma-api.polymarket.com"

TAGS = [
    {"id": "100", "label": "Politics", "slug": "politics"},
    {"id": "120", "label": "Finance", "slug": "finance"},
    {"id": "21", "label": "Crypto", "slug": "crypto"},
]


def _client() -> GammaClient:
    return GammaClient(GammaConfig())


@pytest.mark.asyncio
@respx.mock
async def test_get_events_sends_default_params() -> None:
    route = respx.get(f"{BASE}/events").mock(
        return_value=Response(200, json=[{"id": "1", "title": "A"}, {"id": "2", "title": "B"}])
    )

    async with _client() as gamma:
        events = await gamma.get_events()

    assert [e["id"] for e in events] == ["1", "2"]
    params = route.calls[0].request.url.params
    assert params["order"] == "id"
    assert params["ascending"] == "false"
    assert params["closed"] == "false"
    assert params["limit"] == "50"
    assert params["offset"] == "0"
    assert "tag_id" not in params


@pytest.mark.asyncio
@respx.mock
async def test_get_events_resolves_tag_by_label_or_slug() -> None:
    respx.get(f"{BASE}/tags").mock(return_value=Response(200, json=TAGS))
    route = respx.get(f"{BASE}/events").mock(return_value=Response(200, json=[]))

    async with _client() as gamma:
        await gamma.get_events(tag="FIN", limit=5, offset=10)

    params = route.calls[0].request.url.params
    assert params["tag_id"] == "120"
    assert params["limit"] == "5"
    assert params["offset"] == "10"


@pytest.mark.asyncio
@respx.mock
async def test_get_events_unknown_tag_lists_unfiltered() -> None:
    respx.get(f"{BASE}/tags").mock(return_value=Response(200, json=TAGS))
    route = respx.get(f"{BASE}/events").mock(return_value=Response(200, json=[]))

    async with _client() as gamma:
        await gamma.get_events(tag="sports")

    assert "tag_id" not in route.calls[0].request.url.params


@pytest.mark.asyncio
@respx.mock
async def test_list_payload_wrapped_in_data_is_unwrapped() -> None:
    respx.get(f"{BASE}/tags").mock(
        return_value=Response(200, json={"data": [TAGS[0], "junk", TAGS[1]]})
    )

    async with _client() as gamma:
        tags = await gamma.get_tags()

    assert [t["slug"] for t in tags] == ["politics", "finance"]


@pytest.mark.asyncio
@respx.mock
async def test_find_tag_returns_none_for_blank_query() -> None:
    route = respx.get(f"{BASE}/tags").mock(return_value=Response(200, json=TAGS))

    async with _client() as gamma:
        assert await gamma.find_tag("   ") is None

    assert route.call_count == 0


@pytest.mark.asyncio
@respx.mock
async def test_get_event_by_slug() -> None:
    payload = {"id": "16085", "slug": "largest-company", "markets": []}
    respx.get(f"{BASE}/events/slug/largest-company").mock(
        return_value=Response(200, json=payload)
    )

    async with _client() as gamma:
        event = await gamma.get_event("largest-company")

    assert event == payload


@pytest.mark.asyncio
@respx.mock
async def test_get_event_404_raises_not_found() -> None:
    respx.get(f"{BASE}/events/slug/missing").mock(return_value=Response(404, text="not found"))

    async with _client() as gamma:
        with pytest.raises(EventNotFoundError) as exc_info:
            await gamma.get_event("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.slug == "missing"
    assert exc_info.value.message == "Event not found: missing"


@pytest.mark.asyncio
@respx.mock
async def test_get_event_non_object_raises() -> None:
    respx.get(f"{BASE}/events/slug/odd").mock(return_value=Response(200, json=[1, 2]))

    async with _client() as gamma:
        with pytest.raises(GammaAPIError, match="Expected a JSON object"):
            await gamma.get_event("odd")


@pytest.mark.asyncio
@respx.mock
async def test_get_markets_params() -> None:
    route = respx.get(f"{BASE}/markets").mock(return_value=Response(200, json=[{"id": "m1"}]))

    async with _client() as gamma:
        markets = await gamma.get_markets(limit=3, tag_id=21)

    assert markets == [{"id": "m1"}]
    params = route.calls[0].request.url.params
    assert params["closed"] == "false"
    assert params["limit"] == "3"
    assert params["tag_id"] == "21"


@pytest.mark.asyncio
@respx.mock
async def test_server_error_carries_status_and_body() -> None:
    respx.get(f"{BASE}/events").mock(return_value=Response(503, text="upstream down"))

    async with _client() as gamma:
        with pytest.raises(GammaAPIError) as exc_info:
            await gamma.get_events()

    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "API error 503: upstream down"


@pytest.mark.asyncio
@respx.mock
async def test_transport_error_is_wrapped() -> None:
    respx.get(f"{BASE}/tags").mock(side_effect=httpx.ConnectError("boom"))

    async with _client() as gamma:
        with pytest.raises(GammaAPIError, match="Gamma request failed") as exc_info:
            await gamma.get_tags()

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
@respx.mock
async def test_invalid_json_raises() -> None:
    respx.get(f"{BASE}/tags").mock(return_value=Response(200, text="<html>"))

    async with _client() as gamma:
        with pytest.raises(GammaAPIError, match="not valid JSON"):
            await gamma.get_tags()


@pytest.mark.asyncio
@respx.mock
async def test_non_list_payload_raises() -> None:
    respx.get(f"{BASE}/markets").mock(return_value=Response(200, json={"error": "nope"}))

    async with _client() as gamma:
        with pytest.raises(GammaAPIError, match="Expected a JSON array"):
            await gamma.get_markets()


@pytest.mark.asyncio
async def test_client_property_requires_open() -> None:
    gamma = _client()
    with pytest.raises(RuntimeError, match="not initialized"):
        _ = gamma.client

    await gamma.open()
    await gamma.open()
    assert gamma.client is not None
    await gamma.close()
    await gamma.close()


class TestConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("POLYMARKET_GAMMA_URL", raising=False)
        monkeypatch.delenv("POLYMARKET_GAMMA_TIMEOUT", raising=False)

        config = GammaConfig.from_env()

        assert config.base_url == BASE
        assert config.timeout_seconds == 30.0

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POLYMARKET_GAMMA_URL", "http://localhost:8080/")
        monkeypatch.setenv("POLYMARKET_GAMMA_TIMEOUT", "2.5")

        config = GammaConfig.from_env()

        assert config.base_url == "http://localhost:8080"
        assert config.timeout_seconds == 2.5

    @pytest.mark.parametrize("raw", ["soon", "0", "-3"])
    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("POLYMARKET_GAMMA_TIMEOUT", raw)
        with pytest.raises(ValueError, match="POLYMARKET_GAMMA_TIMEOUT"):
            GammaConfig.from_env()


@pytest.mark.asyncio
@respx.mock
async def test_get_event_quotes_slug_into_single_path_segment() -> None:
    route = respx.get(url__startswith=f"{BASE}/events/slug/").mock(
        return_value=Response(200, json={"id": "1"})
    )

    async with _client() as gamma:
        await gamma.get_event("odd/slug?x=1#frag")

    request = route.calls[0].request
    assert request.url.raw_path == b"/events/slug/odd%2Fslug%3Fx%3D1%23frag"
    assert not request.url.query
