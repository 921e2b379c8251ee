"""Outcome of resolving a single IP address through the upstream service.

A lookup never raises for an expected upstream answer; instead it returns one
of the variants below so that two concurrent lookups can be combined after
both have finished.
"""

from dataclasses import dataclass
from typing import NoReturn

from geo_gateway.errors import UpstreamServiceError
from geo_gateway.models.common import IpInfo


@dataclass(frozen=True)
class Resolved:
    info: IpInfo


@dataclass(frozen=True)
class InvalidInput:
    """The upstream service rejected the address as malformed."""

    message: str


@dataclass(frozen=True)
class UpstreamFailure:
    """The upstream answered with anything but 200 or 400, or could not be used at all."""

    error: UpstreamServiceError

    def raise_error(self) -> NoReturn:
        raise self.error


LookupOutcome = Resolved | InvalidInput | UpstreamFailure
