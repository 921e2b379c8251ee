import asyncio

from geo_gateway.clients.base import BaseGeoLookupClient
from geo_gateway.models.outcomes import InvalidInput, LookupOutcome, Resolved, UpstreamFailure
from geo_gateway.models.response_models import IpPairSummary


async def lookup_pair(client: BaseGeoLookupClient, ip1: str, ip2: str) -> tuple[LookupOutcome, LookupOutcome]:
    """Resolve two IP addresses concurrently and return both outcomes in request order.

    Both lookups are started before either is awaited, and both are awaited to
    completion even when the first one has already failed.
    """
    results = await asyncio.gather(client.lookup(ip1), client.lookup(ip2), return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    outcome1, outcome2 = results
    return outcome1, outcome2


def summarize_pair(outcome1: LookupOutcome, outcome2: LookupOutcome) -> IpPairSummary | InvalidInput:
    """Combine the outcomes of a pair lookup.

    An invalid address wins over an upstream failure, and the first address
    wins when both are invalid. Upstream failures are raised.
    """
    match (outcome1, outcome2):
        case (Resolved(info=ip1_info), Resolved(info=ip2_info)):
            return IpPairSummary(ip1_info=ip1_info, ip2_info=ip2_info)
        case (InvalidInput() as invalid, _) | (_, InvalidInput() as invalid):
            return invalid
        case (UpstreamFailure() as failure, _) | (_, UpstreamFailure() as failure):
            failure.raise_error()
    raise TypeError(f"Unexpected lookup outcomes: {outcome1!r}, {outcome2!r}")
