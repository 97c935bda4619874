from typing import Any

from pydantic import model_validator

from ..core.models import ConfigModel


class LatLng(ConfigModel):
    lat: float
    lng: float

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        # Admin polygon editors export vertices as [lat, lng] pairs
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return {"lat": data[0], "lng": data[1]}
        return data


class Location(ConfigModel):
    """A trip endpoint or stop, already geocoded by the caller.

    ``lat == 0 and lng == 0`` means no coordinates are available; distance
    then comes from the mileage supplied with the request.
    """

    lat: float = 0.0
    lng: float = 0.0
    address: str | None = None
    zipcode: str | None = None
    city: str | None = None

    @property
    def has_coordinates(self) -> bool:
        return not (self.lat == 0 and self.lng == 0)
