from geonear.condition import UnsupportedBackendError, get_nearby_condition, get_nearby_condition_params
from geonear.geo import EARTH_RADIUS_KM, deg2rad, haversine_distance_km, haversine_distance_m, nearby_locations
from geonear.models import Coordinate, DbType, NearbyConditionOptions
from geonear.settings import Settings, get_settings

__all__ = [
    "Coordinate",
    "DbType",
    "EARTH_RADIUS_KM",
    "NearbyConditionOptions",
    "Settings",
    "UnsupportedBackendError",
    "deg2rad",
    "get_nearby_condition",
    "get_nearby_condition_params",
    "get_settings",
    "haversine_distance_km",
    "haversine_distance_m",
    "nearby_locations",
]
