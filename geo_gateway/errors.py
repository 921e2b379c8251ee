class AppError(Exception):
    """Base application error for the IP geolocation gateway."""


class GeoLookupError(AppError):
    """Base error for failures while resolving an IP through the upstream service."""


class UpstreamServiceError(GeoLookupError):
    """Raised when the upstream geolocation service fails or cannot be reached."""
