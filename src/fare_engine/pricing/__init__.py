from .area_prices import AreaPrice, AreaPriceMatch, find_priced_area, resolve_fixed_price
from .distance_tiers import (
    FALLBACK_PRICE_PER_MILE,
    DistanceTier,
    default_distance_tiers,
    price_distance,
    validate_distance_tiers,
)
from .surge import SurgeResolution, SurgeRule, is_rule_applicable, resolve_surge
from .vehicle_type import VehicleType, VehicleTypeUpdate

__all__ = [
    "AreaPrice",
    "AreaPriceMatch",
    "resolve_fixed_price",
    "find_priced_area",
    "DistanceTier",
    "default_distance_tiers",
    "price_distance",
    "validate_distance_tiers",
    "FALLBACK_PRICE_PER_MILE",
    "SurgeRule",
    "SurgeResolution",
    "is_rule_applicable",
    "resolve_surge",
    "VehicleType",
    "VehicleTypeUpdate",
]
