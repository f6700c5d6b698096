"""Great-circle distance and heading between two points on the reference sphere."""

import math

from analemma.models import PointMetrics, Subpoint

EARTH_RADIUS_KM = 6371.0


def point_metrics(a: Subpoint, b: Subpoint, earth_radius_km: float = EARTH_RADIUS_KM) -> PointMetrics:
    """Haversine distance and initial bearing from a to b."""
    lat1 = math.radians(a.lat_deg)
    lat2 = math.radians(b.lat_deg)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.lon_deg - a.lon_deg)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    bearing = (math.degrees(math.atan2(y, x)) + 360) % 360
    return PointMetrics(distance_km=earth_radius_km * c, bearing_deg=bearing)
