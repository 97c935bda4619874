"""Read-only snapshot of pricing configuration.

The snapshot is handed in by whatever loads vehicle types and areas from
storage. Edits return new objects; a quote in flight keeps pricing against
the snapshot it was given.
"""

import logging
from collections.abc import Mapping

from pydantic import Field

from .core.exceptions import NotFoundError
from .core.models import ConfigModel
from .geo.areas import Area, validate_area
from .pricing.area_prices import AreaPrice
from .pricing.vehicle_type import VehicleType, VehicleTypeUpdate

logger = logging.getLogger(__name__)


class PricingCatalog(ConfigModel):
    vehicle_types: tuple[VehicleType, ...] = Field(default_factory=tuple)
    areas: tuple[Area, ...] = Field(default_factory=tuple)

    def get_vehicle_type(self, ref: str | None = None) -> VehicleType:
        """Resolve an active vehicle type by id, then by name.

        Without a reference the first active vehicle type is returned.
        """
        active = [vt for vt in self.vehicle_types if vt.is_active]
        if ref is None:
            if not active:
                raise NotFoundError("No active vehicle type configured")
            return active[0]

        for vehicle_type in active:
            if vehicle_type.id == ref:
                return vehicle_type

        logger.debug(f"Vehicle type not found by id: {ref}, trying by name")
        for vehicle_type in active:
            if vehicle_type.name == ref:
                return vehicle_type

        raise NotFoundError(f"Vehicle type {ref} not found", details={"vehicle_type": ref})

    def get_area(self, area_id: str) -> Area:
        for area in self.areas:
            if area.id == area_id:
                return area
        raise NotFoundError(f"Area {area_id} not found", details={"area_id": area_id})

    def _get_vehicle_type_by_id(self, vehicle_type_id: str) -> VehicleType:
        for vehicle_type in self.vehicle_types:
            if vehicle_type.id == vehicle_type_id:
                return vehicle_type
        raise NotFoundError(
            f"Vehicle type {vehicle_type_id} not found",
            details={"vehicle_type": vehicle_type_id},
        )

    def assign_area_prices(
        self, vehicle_type_id: str, fixed_prices: Mapping[str, float]
    ) -> VehicleType:
        """Add or update fixed area prices without dropping existing ones.

        All referenced areas are checked before anything changes.
        """
        vehicle_type = self._get_vehicle_type_by_id(vehicle_type_id)
        areas = {area_id: self.get_area(area_id) for area_id in fixed_prices}

        area_prices = list(vehicle_type.area_prices)
        for area_id, fixed_price in fixed_prices.items():
            existing = next(
                (i for i, ap in enumerate(area_prices) if ap.area.id == area_id), None
            )
            if existing is not None:
                area_prices[existing] = area_prices[existing].model_copy(
                    update={"fixed_price": fixed_price}
                )
            else:
                area_prices.append(AreaPrice(area=areas[area_id], fixed_price=fixed_price))

        return VehicleTypeUpdate(area_prices=tuple(area_prices)).apply(vehicle_type)

    def remove_area_price(self, vehicle_type_id: str, area_id: str) -> VehicleType:
        vehicle_type = self._get_vehicle_type_by_id(vehicle_type_id)
        remaining = tuple(ap for ap in vehicle_type.area_prices if ap.area.id != area_id)
        return VehicleTypeUpdate(area_prices=remaining).apply(vehicle_type)

    def update_vehicle_type(
        self, vehicle_type_id: str, update: VehicleTypeUpdate
    ) -> "PricingCatalog":
        updated = update.apply(self._get_vehicle_type_by_id(vehicle_type_id))
        vehicle_types = tuple(
            updated if vt.id == vehicle_type_id else vt for vt in self.vehicle_types
        )
        return self.model_copy(update={"vehicle_types": vehicle_types})

    def validate_configuration(self) -> None:
        """Raise InvalidConfigurationError on the first broken area or vehicle type."""
        for area in self.areas:
            validate_area(area)
        for vehicle_type in self.vehicle_types:
            vehicle_type.validate_configuration()
        logger.info(
            f"Validated {len(self.vehicle_types)} vehicle types and {len(self.areas)} areas"
        )
