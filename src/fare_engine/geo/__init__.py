from .areas import Area, AreaType, location_in_area, point_in_polygon, validate_area
from .distance import EARTH_RADIUS_MI, haversine_distance_mi, trip_distance_mi
from .location import LatLng, Location

__all__ = [
    "Area",
    "AreaType",
    "LatLng",
    "Location",
    "location_in_area",
    "point_in_polygon",
    "validate_area",
    "haversine_distance_mi",
    "trip_distance_mi",
    "EARTH_RADIUS_MI",
]
