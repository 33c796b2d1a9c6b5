"""
Haversine distance and nearby filtering for geographic queries.
"""
import logging
import math
from collections.abc import Iterable

from geonear.models import Coordinate

logger = logging.getLogger(__name__)

# Mean Earth radius in km
EARTH_RADIUS_KM = 6371.0


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180


def haversine_distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Return great-circle distance between two coordinates in kilometers.
    Never raises: non-finite angles (inf, NaN, or overflow from huge inputs)
    and a haversine term pushed outside [0, 1] by float error both give NaN,
    so the point falls out of any `<=` filter.
    """
    dlat = deg2rad(b.latitude - a.latitude)
    dlng = deg2rad(b.longitude - a.longitude)
    lat1_rad = deg2rad(a.latitude)
    lat2_rad = deg2rad(b.latitude)
    # math.sin/cos raise on inf
    if not all(math.isfinite(x) for x in (dlat, dlng, lat1_rad, lat2_rad)):
        return math.nan
    h = (
        math.sin(dlat / 2) * math.sin(dlat / 2)
        + math.cos(lat1_rad)
        * math.cos(lat2_rad)
        * math.sin(dlng / 2)
        * math.sin(dlng / 2)
    )
    # math.sqrt raises on negatives; keep NaN semantics instead of clamping
    if not (0.0 <= h <= 1.0):
        return math.nan
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def haversine_distance_m(a: Coordinate, b: Coordinate) -> float:
    """Return great-circle distance in meters."""
    return haversine_distance_km(a, b) * 1000.0


def nearby_locations(
    center: Coordinate,
    locations: Iterable[Coordinate],
    max_distance_km: float,
) -> list[Coordinate]:
    """
    Return the locations within max_distance_km of center, in input order.
    Duplicates are kept; the input is not modified.
    """
    nearby = [loc for loc in locations if haversine_distance_km(center, loc) <= max_distance_km]
    logger.debug(
        "nearby_locations center=%s,%s max_km=%s matched=%d",
        center.latitude,
        center.longitude,
        max_distance_km,
        len(nearby),
    )
    return nearby
