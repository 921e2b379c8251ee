from pydantic import BaseModel, ConfigDict, Field, StrictStr


class IpPairSummaryRequest(BaseModel):
    """Request body for the IP pair summary endpoint.

    The addresses are passed to the upstream service as-is; malformed
    addresses are reported back by the upstream lookup, not rejected here.
    """

    model_config = ConfigDict(frozen=True)

    ip1: StrictStr = Field(description="First IP address to resolve.", examples=["8.8.8.8"])
    ip2: StrictStr = Field(description="Second IP address to resolve.", examples=["1.1.1.1"])
