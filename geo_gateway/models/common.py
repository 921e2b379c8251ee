from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class IpInfo(BaseModel):
    """Geolocation record for a single IP address, as served by the upstream service.

    The same shape is returned unchanged to our own callers. Latitude and
    longitude are either both present or both absent; that pairing is
    guaranteed by the upstream service and is not re-checked here.
    """

    model_config = ConfigDict(frozen=True)

    ip: str
    country: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_lat_lon(cls, value: Any) -> float | None:
        """Allow latitude/longitude to be provided as numeric strings, numbers, or null.

        Anything else is a malformed record and fails validation.
        """
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"coordinate must be a number, got {value!r}") from exc
