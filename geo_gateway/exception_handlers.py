from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from geo_gateway.errors import UpstreamServiceError
from geo_gateway.logger import logger

PAIR_FIELDS = ("ip1", "ip2")


def _normalize_validation_errors(errors: Any) -> list[dict[str, Any]]:
    """Make sure validation error dicts are JSON-serializable."""
    normalized: list[dict[str, Any]] = []
    for error in errors:
        e = dict(error)
        ctx = e.get("ctx")
        if isinstance(ctx, dict):
            # Convert any non-serializable ctx values (e.g. exceptions) to strings.
            e["ctx"] = {k: str(v) for k, v in ctx.items()}
        normalized.append(e)
    return normalized


def _build_validation_error_payload(errors: list[dict[str, Any]]) -> dict:
    """Normalize request validation errors into a consistent error payload.

    The external shape stays minimal:
    - `code`: short machine-readable error code.
    - `message`: stable human-readable message.

    Internal validation details are not exposed to clients.
    """
    code = "invalid_request"
    message = "Invalid request body"

    for error in errors:
        loc = error.get("loc", ())
        if len(loc) >= 1 and loc[-1] in PAIR_FIELDS:
            message = "The request body must contain the string fields ip1 and ip2."
            break

    return {
        "code": code,
        "message": message,
    }


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies rejected during FastAPI request parsing."""
    errors = _normalize_validation_errors(exc.errors())
    logger.info(
        "Request validation error during request handling "
        f"path={request.url.path} method={request.method} errors={errors}"
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_build_validation_error_payload(errors))


async def upstream_service_exception_handler(request: Request, exc: UpstreamServiceError) -> JSONResponse:
    """Report upstream failures as an opaque bad gateway response."""
    logger.error(
        "Upstream geolocation service error " f"path={request.url.path} method={request.method} error={exc}"
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "code": "upstream_error",
            "message": "The upstream geolocation service failed to resolve the request.",
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        "Unhandled exception while processing request: "
        f"{repr(exc)} path={request.url.path} method={request.method}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "internal_error",
            "message": "An unexpected error occurred while processing the request.",
        },
    )
