from typing import Any

import pytest
from pydantic import ValidationError

from geo_gateway.distance import haversine_km
from geo_gateway.models.common import IpInfo
from geo_gateway.models.request_models import IpPairSummaryRequest
from geo_gateway.models.response_models import IpPairSummary

GOOGLE = IpInfo(ip="8.8.8.8", country="US", city="Mountain View", latitude=37.4, longitude=-122.1)
UNKNOWN = IpInfo(ip="10.0.0.1")


def test_ip_info_coerces_numeric_string_coordinates() -> None:
    info = IpInfo.model_validate({"ip": "8.8.8.8", "latitude": "37.4", "longitude": -122})

    assert info.latitude == pytest.approx(37.4)
    assert info.longitude == pytest.approx(-122.0)


def test_ip_info_rejects_unparseable_coordinates() -> None:
    with pytest.raises(ValidationError, match="coordinate must be a number"):
        IpInfo.model_validate({"ip": "8.8.8.8", "latitude": "n/a", "longitude": 10.0})


def test_ip_info_is_immutable() -> None:
    with pytest.raises(ValidationError):
        GOOGLE.city = "Elsewhere"  # type: ignore[misc]


def test_pair_request_accepts_two_addresses() -> None:
    req = IpPairSummaryRequest.model_validate({"ip1": "8.8.8.8", "ip2": "not-an-ip"})

    assert req.ip1 == "8.8.8.8"
    assert req.ip2 == "not-an-ip"


@pytest.mark.parametrize("payload", [{"ip1": "8.8.8.8"}, {"ip1": "8.8.8.8", "ip2": 42}, {}])
def test_pair_request_rejects_missing_or_non_string_fields(payload: dict[str, Any]) -> None:
    with pytest.raises(ValidationError):
        IpPairSummaryRequest.model_validate(payload)


def test_pair_summary_derives_distance() -> None:
    other = IpInfo(ip="1.1.1.1", latitude=-33.494, longitude=143.2104)

    summary = IpPairSummary(ip1_info=GOOGLE, ip2_info=other)

    assert summary.distance == pytest.approx(haversine_km(37.4, -122.1, -33.494, 143.2104))


def test_pair_summary_ignores_supplied_distance() -> None:
    summary = IpPairSummary.model_validate({"distance": 1.0, "ip1Info": GOOGLE, "ip2Info": GOOGLE})

    assert summary.distance == 0.0


def test_pair_summary_without_location_has_no_distance() -> None:
    summary = IpPairSummary(ip1_info=GOOGLE, ip2_info=UNKNOWN)

    assert summary.distance is None


def test_pair_summary_wire_shape() -> None:
    summary = IpPairSummary(ip1_info=GOOGLE, ip2_info=UNKNOWN)

    assert summary.model_dump(by_alias=True, exclude_none=True) == {
        "ip1Info": {"ip": "8.8.8.8", "country": "US", "city": "Mountain View", "latitude": 37.4, "longitude": -122.1},
        "ip2Info": {"ip": "10.0.0.1"},
    }
