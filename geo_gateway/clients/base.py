from abc import ABC, abstractmethod

from geo_gateway.models.outcomes import LookupOutcome


class BaseGeoLookupClient(ABC):
    """Abstract base for clients of the upstream geolocation service.

    Implementations translate the upstream response into a `LookupOutcome`
    (`Resolved`, `InvalidInput` or `UpstreamFailure`) instead of raising, so
    that callers can combine several lookups once all of them are done.
    """

    @abstractmethod
    async def lookup(self, ip: str) -> LookupOutcome:
        """Resolve geolocation information for an IP address."""
        raise NotImplementedError
