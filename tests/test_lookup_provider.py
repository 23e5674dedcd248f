from __future__ import annotations

import httpx
import pytest

from address_book_mcp.core.errors import UpstreamError
from address_book_mcp.core.models import RawAddressLookupRecord
from address_book_mcp.infra.cache import LookupCache
from address_book_mcp.infra.http import HttpClient
from address_book_mcp.infra.providers.lookup import AddressLookupProvider

BASE_URL = "http://lookup.test"


def _provider(handler, *, cache: LookupCache | None = None) -> AddressLookupProvider:
    http = HttpClient(timeout_seconds=1.0, user_agent="test", transport=httpx.MockTransport(handler))
    return AddressLookupProvider(http=http, base_url=BASE_URL + "/", path="/api/getAddresses", cache=cache)


def test_search_sends_postcode_and_streetnumber():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "status": "ok",
                "details": [{"id": "1", "street": "George St", "city": "Sydney", "postcode": "2000", "lat": 1}],
            },
        )

    records = _provider(handler).search(postcode="2000", house_number="42")

    assert records == [RawAddressLookupRecord(id="1", street="George St", city="Sydney", postcode="2000")]
    assert seen[0].url.path == "/api/getAddresses"
    assert seen[0].url.params["postcode"] == "2000"
    assert seen[0].url.params["streetnumber"] == "42"


def test_error_response_uses_server_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"status": "error", "errormessage": "No results found!"})

    with pytest.raises(UpstreamError) as exc:
        _provider(handler).search(postcode="2000", house_number="42")

    assert str(exc.value) == "No results found!"
    assert exc.value.status_code == 404


def test_error_response_without_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(UpstreamError, match="Unexpected error"):
        _provider(handler).search(postcode="2000", house_number="42")


def test_transport_failure_is_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamError, match="connection refused"):
        _provider(handler).search(postcode="2000", house_number="42")


def test_malformed_records_are_dropped():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "status": "ok",
                "details": [
                    {"id": "1", "street": "George St", "city": "Sydney", "postcode": "2000"},
                    {"id": "2", "street": "", "city": "Sydney", "postcode": "2000"},
                    {"street": "King St", "city": "Sydney", "postcode": "2000"},
                    "not an object",
                ],
            },
        )

    records = _provider(handler).search(postcode="2000", house_number="42")
    assert [r.id for r in records] == ["1"]


def test_repeated_lookup_is_cached():
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(
            200,
            json={"status": "ok", "details": [{"id": "1", "street": "George St", "city": "Sydney", "postcode": "2000"}]},
        )

    provider = _provider(handler, cache=LookupCache(maxsize=10, ttl_seconds=60))
    first = provider.search(postcode="2000", house_number="42")
    second = provider.search(postcode="2000", house_number="42")
    provider.search(postcode="2000", house_number="43")

    assert first == second
    assert calls == 2


def test_empty_result_is_not_cached():
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(200, json={"status": "ok", "details": []})

    cache = LookupCache(maxsize=10, ttl_seconds=60)
    provider = _provider(handler, cache=cache)

    assert provider.search(postcode="2000", house_number="42") == []
    assert provider.search(postcode="2000", house_number="42") == []
    assert calls == 2
    assert len(cache) == 0


def test_non_json_body_is_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    with pytest.raises(UpstreamError, match="Upstream returned invalid JSON"):
        _provider(handler).search(postcode="2000", house_number="42")
