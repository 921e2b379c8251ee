"""Great-circle distance between two resolved IP locations (haversine formula).

See http://www.movable-type.co.uk/scripts/latlong.html for the derivation.
"""

import math

from geo_gateway.models.common import IpInfo

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in kilometers between two points given in degrees."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def calculate_distance(ip1_info: IpInfo, ip2_info: IpInfo) -> float | None:
    """Distance between two IP locations, or None when either one has no coordinates."""
    coordinates = (ip1_info.latitude, ip1_info.longitude, ip2_info.latitude, ip2_info.longitude)
    if any(value is None for value in coordinates):
        return None
    return haversine_km(*coordinates)
