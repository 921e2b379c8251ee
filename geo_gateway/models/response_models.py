from pydantic import BaseModel, ConfigDict, Field, computed_field

from geo_gateway.distance import calculate_distance
from geo_gateway.models.common import IpInfo


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: str


class IpPairSummary(BaseModel):
    """Summary of two resolved IP addresses and the distance between them.

    `distance` is always derived from the two records and cannot be supplied.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ip1_info: IpInfo = Field(alias="ip1Info")
    ip2_info: IpInfo = Field(alias="ip2Info")

    @computed_field
    @property
    def distance(self) -> float | None:
        """Great-circle distance in kilometers, or None when a location is unknown."""
        return calculate_distance(self.ip1_info, self.ip2_info)
