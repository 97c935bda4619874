from typing import Literal

from pydantic import Field

from ..core.models import ConfigModel
from ..geo.areas import validate_area
from .area_prices import AreaPrice
from .distance_tiers import DistanceTier, validate_distance_tiers
from .surge import SurgeRule

VehicleCategory = Literal["economy", "standard", "premium", "luxury", "specialty"]


class VehicleType(ConfigModel):
    """Pricing configuration of one bookable vehicle class.

    Read per calculation and never mutated; edits produce a new instance
    through VehicleTypeUpdate.
    """

    id: str
    name: str
    description: str = ""
    category: VehicleCategory = "standard"
    capacity: int = Field(default=1, ge=1)
    is_active: bool = True

    base_price: float = Field(default=55.0, ge=0)
    base_distance_threshold: float = Field(default=12.0, ge=0)
    distance_tiers: tuple[DistanceTier, ...] = ()

    stop_charge: float = Field(default=5.0, ge=0)
    child_seat_charge: float = Field(default=5.0, ge=0)
    round_trip_discount_percent: float = Field(default=10.0, ge=0, le=100)

    surge_pricing: tuple[SurgeRule, ...] = ()
    area_prices: tuple[AreaPrice, ...] = ()

    def validate_configuration(self) -> None:
        """Raise InvalidConfigurationError for broken tiers or priced areas."""
        validate_distance_tiers(self.distance_tiers)
        for area_price in self.area_prices:
            validate_area(area_price.area)


class VehicleTypeUpdate(ConfigModel):
    """Partial edit of a VehicleType.

    Only fields that were explicitly set are applied; everything else keeps
    its previous value, and so does a field explicitly set to None. Setting
    a collection replaces it wholesale.
    """

    name: str | None = None
    description: str | None = None
    category: VehicleCategory | None = None
    capacity: int | None = Field(default=None, ge=1)
    is_active: bool | None = None
    base_price: float | None = Field(default=None, ge=0)
    base_distance_threshold: float | None = Field(default=None, ge=0)
    distance_tiers: tuple[DistanceTier, ...] | None = None
    stop_charge: float | None = Field(default=None, ge=0)
    child_seat_charge: float | None = Field(default=None, ge=0)
    round_trip_discount_percent: float | None = Field(default=None, ge=0, le=100)
    surge_pricing: tuple[SurgeRule, ...] | None = None
    area_prices: tuple[AreaPrice, ...] | None = None

    @property
    def changed_fields(self) -> set[str]:
        return {name for name in self.model_fields_set if getattr(self, name) is not None}

    def apply(self, vehicle_type: VehicleType) -> VehicleType:
        changes = self.model_dump(exclude_unset=True, exclude_none=True)
        updated = VehicleType.model_validate({**vehicle_type.model_dump(), **changes})
        updated.validate_configuration()
        return updated
