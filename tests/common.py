import asyncio
from http import HTTPStatus
from typing import Any

import httpx

from geo_gateway.clients.base import BaseGeoLookupClient
from geo_gateway.models.outcomes import LookupOutcome

UPSTREAM_BASE_URL = "http://geoip.test:8080"


class MockResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.text = text

    def json(self) -> Any:
        return self._payload


class MockAsyncClient:
    """Minimal async context-manager mock for httpx.AsyncClient.

    Responses are looked up by the requested URL; every requested URL is
    recorded in `requested_urls`.
    """

    def __init__(self, responses: dict[str, MockResponse], requested_urls: list[str]) -> None:
        self._responses = responses
        self._requested_urls = requested_urls

    async def __aenter__(self) -> "MockAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str) -> MockResponse:
        self._requested_urls.append(url)
        return self._responses[url]


class FailingAsyncClient:
    """Async client that raises a RequestError on enter to simulate network failure."""

    def __init__(self, url: str, *args: Any, **kwargs: Any) -> None:
        self._url = url

    async def __aenter__(self) -> "FailingAsyncClient":
        request = httpx.Request("GET", self._url)
        raise httpx.ConnectError("Network failure", request=request)

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str) -> MockResponse:
        return MockResponse(status_code=HTTPStatus.OK, payload={})


class FakeUpstream:
    """Installs MockAsyncClient in place of httpx.AsyncClient, keyed by IP address."""

    def __init__(self) -> None:
        self.responses: dict[str, MockResponse] = {}
        self.requested_urls: list[str] = []

    def respond(self, ip: str, response: MockResponse) -> None:
        self.responses[f"{UPSTREAM_BASE_URL}/geoip/{ip}"] = response

    def __call__(self, *args: Any, **kwargs: Any) -> MockAsyncClient:
        return MockAsyncClient(self.responses, self.requested_urls)


class StaticLookupClient(BaseGeoLookupClient):
    """Lookup client double returning a fixed outcome per IP and recording calls."""

    def __init__(self, outcomes: dict[str, LookupOutcome]) -> None:
        self._outcomes = outcomes
        self.calls: list[str] = []

    async def lookup(self, ip: str) -> LookupOutcome:
        self.calls.append(ip)
        await asyncio.sleep(0)
        return self._outcomes[ip]
