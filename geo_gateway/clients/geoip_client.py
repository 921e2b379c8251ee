from http import HTTPStatus
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from geo_gateway.clients.base import BaseGeoLookupClient
from geo_gateway.errors import UpstreamServiceError
from geo_gateway.logger import logger
from geo_gateway.models.common import IpInfo
from geo_gateway.models.outcomes import InvalidInput, LookupOutcome, Resolved, UpstreamFailure


class GeoIpClient(BaseGeoLookupClient):
    """Client for the upstream `GET /geoip/{ip}` geolocation API.

    The upstream answers 200 with an IpInfo JSON body, 400 when the address is
    malformed, and anything else on failure. Failures are not retried.
    """

    def __init__(self, base_url: str, timeout_seconds: float = 5.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    async def lookup(self, ip: str) -> LookupOutcome:
        """Look up geolocation information for an explicit IP address."""
        url = f"{self._base_url}/geoip/{self._path_segment(ip)}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            return self._failure(f"Geo IP request failed for ip={ip}: {repr(exc)}")

        status_code = response.status_code

        if status_code == HTTPStatus.OK:
            try:
                return Resolved(IpInfo.model_validate(self._parse_json(response)))
            except (ValueError, ValidationError) as exc:
                return self._failure(f"Geo IP response for ip={ip} could not be decoded: {exc}")

        if status_code == HTTPStatus.BAD_REQUEST:
            # The upstream error body carries no detail we expose; the message is ours.
            return InvalidInput(f"{ip}: incorrect IP format")

        return self._failure(f"Geo IP request failed with status code {status_code} and entity {response.text}")

    @staticmethod
    def _path_segment(ip: str) -> str:
        """Escape the address so it stays a single segment under `/geoip/`.

        `/`, `?` and `#` are percent-encoded, and bare `.`/`..` segments are
        encoded too since httpx would otherwise resolve them away.
        """
        segment = quote(ip, safe="")
        if segment in (".", ".."):
            segment = segment.replace(".", "%2E")
        return segment

    @staticmethod
    def _failure(message: str) -> UpstreamFailure:
        logger.error(message)
        return UpstreamFailure(UpstreamServiceError(message))

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any]:
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data
