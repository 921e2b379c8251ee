import time
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from geo_gateway.clients.base import BaseGeoLookupClient
from geo_gateway.clients.geoip_client import GeoIpClient
from geo_gateway.config import settings
from geo_gateway.errors import UpstreamServiceError
from geo_gateway.exception_handlers import (
    request_validation_exception_handler,
    unhandled_exception_handler,
    upstream_service_exception_handler,
)
from geo_gateway.logger import logger, request_logger
from geo_gateway.models.common import IpInfo
from geo_gateway.models.outcomes import InvalidInput, Resolved, UpstreamFailure
from geo_gateway.models.request_models import IpPairSummaryRequest
from geo_gateway.models.response_models import HealthResponse, IpPairSummary
from geo_gateway.orchestrator import lookup_pair, summarize_pair

app = FastAPI(
    title="IP Geolocation Gateway",
    version="0.1.0",
    description="Resolves geolocation for one or two IP addresses and the distance between them.",
)
logger.info(f"Started IP Geolocation Gateway upstream={settings.upstream_base_url}")


def get_geo_lookup_client() -> BaseGeoLookupClient:
    """Dependency to provide a client for the configured upstream service."""
    return GeoIpClient(settings.upstream_base_url, timeout_seconds=settings.upstream_timeout_seconds)


app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(UpstreamServiceError, upstream_service_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.middleware("http")
async def log_request_result(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    started = time.perf_counter()
    # Stays 500 when the handler raises past the exception handlers.
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        request_logger.info(
            f"path={request.url.path} method={request.method} "
            f"status={status_code} elapsed_ms={elapsed_ms:.1f}"
        )


def _bad_request(invalid: InvalidInput) -> PlainTextResponse:
    return PlainTextResponse(invalid.message, status_code=status.HTTP_400_BAD_REQUEST)


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok")


@app.get(
    "/ip/{ip}",
    response_model=IpInfo,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Look up geolocation information for an IP address.",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "The IP address has an incorrect format."}},
)
async def ip_lookup(
    ip: str,
    client: Annotated[BaseGeoLookupClient, Depends(get_geo_lookup_client)],
) -> IpInfo | Response:
    """Look up geolocation information for a single IP address.

    A malformed address is answered with 400 and a plain-text reason. Upstream
    failures are propagated and reported as a server-side error.
    """
    outcome = await client.lookup(ip)
    match outcome:
        case Resolved(info=info):
            return info
        case InvalidInput() as invalid:
            return _bad_request(invalid)
        case UpstreamFailure() as failure:
            failure.raise_error()
        case _:
            raise TypeError(f"Unexpected lookup outcome: {outcome!r}")


@app.post(
    "/ip",
    response_model=IpPairSummary,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Resolve two IP addresses and compute the distance between them.",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "One of the IP addresses has an incorrect format."}},
)
async def ip_pair_summary(
    body: IpPairSummaryRequest,
    client: Annotated[BaseGeoLookupClient, Depends(get_geo_lookup_client)],
) -> IpPairSummary | Response:
    """Resolve both addresses concurrently and summarize them.

    `distance` is present only when both locations carry coordinates.
    """
    logger.info(f"Performing IP pair lookup ip1={body.ip1} ip2={body.ip2}")
    outcome1, outcome2 = await lookup_pair(client, body.ip1, body.ip2)
    result = summarize_pair(outcome1, outcome2)
    if isinstance(result, InvalidInput):
        return _bad_request(result)
    return result
