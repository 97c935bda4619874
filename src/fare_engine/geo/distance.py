"""Great-circle trip distances in miles."""

import logging
from collections.abc import Sequence
from math import atan2, cos, radians, sin, sqrt

from .location import Location

logger = logging.getLogger(__name__)

EARTH_RADIUS_MI = 3959


def haversine_distance_mi(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
) -> float:
    """Calculate the great-circle distance between two points in miles.

    Args:
        lat1: Latitude of first point in degrees
        lng1: Longitude of first point in degrees
        lat2: Latitude of second point in degrees
        lng2: Longitude of second point in degrees

    Returns:
        Distance between the two points in miles
    """
    lat1, lng1, lat2, lng2 = map(radians, [lat1, lng1, lat2, lng2])
    dlat = lat2 - lat1
    dlng = lng2 - lng1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_MI * c


def trip_distance_mi(
    pickup: Location,
    dropoff: Location,
    stops: Sequence[Location] = (),
    provided_miles: float | None = None,
) -> float:
    """Total driven distance for pickup -> stops -> dropoff.

    When either endpoint lacks coordinates the caller-supplied mileage is
    used as-is (0 when absent or not positive) and stops add nothing.
    """
    if not pickup.has_coordinates or not dropoff.has_coordinates:
        if provided_miles and provided_miles > 0:
            logger.debug(f"Using provided miles for distance: {provided_miles}")
            return float(provided_miles)
        logger.debug("No coordinates or provided miles, using 0 distance")
        return 0.0

    waypoints = [pickup, *stops, dropoff]
    total = 0.0
    for start, end in zip(waypoints, waypoints[1:]):
        total += haversine_distance_mi(start.lat, start.lng, end.lat, end.lng)
    return total
