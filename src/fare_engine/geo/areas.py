import logging
from collections.abc import Sequence
from typing import Literal

from pydantic import Field
from shapely.geometry import Polygon
from shapely.validation import explain_validity

from ..core.exceptions import InvalidConfigurationError
from ..core.models import ConfigModel
from .location import LatLng, Location

logger = logging.getLogger(__name__)

AreaType = Literal["zipcode", "city", "polygon"]

MIN_POLYGON_VERTICES = 3


class Area(ConfigModel):
    """Named geographic area an administrator attaches fixed prices to."""

    id: str
    name: str
    type: AreaType
    value: str | None = None
    polygon: tuple[LatLng, ...] = Field(default_factory=tuple)


def point_in_polygon(lat: float, lng: float, polygon: Sequence[LatLng]) -> bool:
    """Ray-casting point-in-polygon test.

    Each edge whose latitude span strictly straddles the point toggles the
    result when the point lies west of the edge at that latitude. Points
    exactly on an edge land on whichever side the arithmetic puts them.
    """
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        yi, xi = polygon[i].lat, polygon[i].lng
        yj, xj = polygon[j].lat, polygon[j].lng
        if (yi > lat) != (yj > lat):
            crossing_lng = (xj - xi) * (lat - yi) / (yj - yi) + xi
            if lng < crossing_lng:
                inside = not inside
        j = i
    return inside


def location_in_area(location: Location, area: Area) -> bool:
    if area.type == "zipcode":
        return location.zipcode is not None and location.zipcode == area.value
    if area.type == "city":
        if location.city is None or area.value is None:
            return False
        return location.city.lower() == area.value.lower()
    if area.type == "polygon":
        if len(area.polygon) < MIN_POLYGON_VERTICES:
            return False
        return point_in_polygon(location.lat, location.lng, area.polygon)
    return False


def validate_area(area: Area) -> None:
    """Reject areas that could never match anything.

    Self-intersecting polygons are still priced with the ray-casting rule,
    so they only produce a warning.
    """
    if area.type in ("zipcode", "city") and not area.value:
        raise InvalidConfigurationError(
            f"Area '{area.name}' of type {area.type} has no value",
            details={"area_id": area.id},
        )

    if area.type != "polygon":
        return

    if len(area.polygon) < MIN_POLYGON_VERTICES:
        raise InvalidConfigurationError(
            f"Polygon area '{area.name}' needs at least {MIN_POLYGON_VERTICES} vertices, "
            f"got {len(area.polygon)}",
            details={"area_id": area.id, "vertices": len(area.polygon)},
        )

    # Shapely uses (x, y) = (lng, lat)
    shape = Polygon([(vertex.lng, vertex.lat) for vertex in area.polygon])
    if not shape.is_valid:
        logger.warning(f"Polygon area '{area.name}' is not simple: {explain_validity(shape)}")
