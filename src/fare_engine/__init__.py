"""Fare calculation engine for an airport-shuttle back office."""

from .catalog import PricingCatalog
from .core.exceptions import (
    FareEngineError,
    InvalidConfigurationError,
    MissingParameterError,
    NotFoundError,
)
from .fare import FareAssembler, FareBreakdown, FareOptions, ReturnLeg, TripPrice
from .geo import Area, LatLng, Location, location_in_area
from .payment import PaymentMethod, payment_discount
from .pricing import (
    AreaPrice,
    AreaPriceMatch,
    DistanceTier,
    SurgeResolution,
    SurgeRule,
    VehicleType,
    VehicleTypeUpdate,
    default_distance_tiers,
    price_distance,
    resolve_fixed_price,
    resolve_surge,
)
from .quote import QuoteRequest, calculate_quote

__all__ = [
    "FareAssembler",
    "FareBreakdown",
    "FareOptions",
    "TripPrice",
    "ReturnLeg",
    "QuoteRequest",
    "calculate_quote",
    "PricingCatalog",
    "Location",
    "LatLng",
    "Area",
    "location_in_area",
    "AreaPrice",
    "AreaPriceMatch",
    "resolve_fixed_price",
    "DistanceTier",
    "default_distance_tiers",
    "price_distance",
    "SurgeRule",
    "SurgeResolution",
    "resolve_surge",
    "VehicleType",
    "VehicleTypeUpdate",
    "PaymentMethod",
    "payment_discount",
    "FareEngineError",
    "MissingParameterError",
    "NotFoundError",
    "InvalidConfigurationError",
]
