import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from .core.exceptions import MissingParameterError, NotFoundError
from .core.models import ConfigModel
from .core.money import round_money
from .geo.distance import trip_distance_mi
from .geo.location import Location
from .payment import PaymentMethod, payment_discount, payment_discount_description
from .pricing.area_prices import resolve_fixed_price
from .pricing.distance_tiers import price_distance
from .pricing.surge import SurgeResolution, resolve_surge
from .pricing.vehicle_type import VehicleType
from .settings import PricingSettings, get_settings

logger = logging.getLogger(__name__)

PricingMethod = Literal["fixed", "distance"]


class FareOptions(ConfigModel):
    """Per-request inputs besides the route.

    ``stops_count`` and ``child_seats_count`` are required; they default to
    None only so that their absence can be reported explicitly.

    Without ``pickup_date_time`` surge rules are evaluated against the
    current clock, so repeated calls only price identically when the caller
    supplies the pickup time.
    """

    stops_count: int | None = Field(default=None, ge=0)
    child_seats_count: int | None = Field(default=None, ge=0)
    round_trip: bool = False
    payment_method: PaymentMethod | None = None
    pickup_date_time: datetime | None = None
    provided_miles: float | None = Field(default=None, ge=0)

    def missing_parameters(self) -> list[str]:
        required = {"stops_count": self.stops_count, "child_seats_count": self.child_seats_count}
        return [name for name, value in required.items() if value is None]


class TripPrice(ConfigModel):
    """One-way price of a trip for a single vehicle type."""

    base_price: float
    distance_price: float
    surge: SurgeResolution = Field(default_factory=SurgeResolution)
    stops_charge: float
    child_seats_charge: float
    trip_price: float
    distance: float
    pricing_method: PricingMethod
    area_name: str | None = None


class ReturnLeg(ConfigModel):
    discount_percent: float
    return_price: float
    discount: float


class FareBreakdown(ConfigModel):
    """Itemized fare returned to the caller.

    Every monetary field is already rounded to cents, and the totals are
    sums of the rounded items shown.
    """

    base_price: float = Field(ge=0)
    distance_price: float = Field(ge=0)
    surge_multiplier: float | None = None
    surge_name: str | None = None
    stops_charge: float = Field(ge=0)
    child_seats_charge: float = Field(ge=0)
    trip_price: float = Field(ge=0)
    round_trip_discount: float = Field(ge=0)
    return_trip_price: float = Field(ge=0)
    subtotal: float = Field(ge=0)
    payment_method: PaymentMethod
    payment_discount: float = Field(ge=0)
    payment_discount_description: str = ""
    final_total: float
    distance: float = Field(ge=0)
    pricing_method: PricingMethod
    area_name: str | None = None

    def to_json_dict(self) -> dict[str, Any]:
        """camelCase JSON-ready dict, omitting absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FareAssembler:
    """Turns a vehicle type and a route into a priced fare."""

    def __init__(self, settings: PricingSettings | None = None):
        self.settings = settings or get_settings().pricing

    def price_trip(
        self,
        vehicle_type: VehicleType,
        pickup: Location,
        dropoff: Location,
        stops: Sequence[Location] = (),
        *,
        stops_count: int = 0,
        child_seats_count: int = 0,
        pickup_date_time: datetime | None = None,
        provided_miles: float | None = None,
    ) -> TripPrice:
        """Price the outbound leg.

        A matching fixed-price area replaces base and distance pricing and
        is never surged. Stop and child-seat surcharges apply to both methods.
        """
        distance = trip_distance_mi(pickup, dropoff, stops, provided_miles)
        match = resolve_fixed_price(pickup, dropoff, vehicle_type.area_prices)

        if match is not None:
            pricing_method: PricingMethod = "fixed"
            base_price = round_money(match.price)
            distance_price = 0.0
            surge = SurgeResolution()
            area_name = match.area_name
        else:
            pricing_method = "distance"
            base_price = round_money(vehicle_type.base_price)
            distance_price = round_money(
                price_distance(
                    distance,
                    vehicle_type.base_distance_threshold,
                    vehicle_type.distance_tiers,
                    self.settings.fallback_price_per_mile,
                )
            )
            surge = resolve_surge(pickup_date_time or datetime.now(), vehicle_type.surge_pricing)
            area_name = None

        surged_price = round_money((base_price + distance_price) * surge.multiplier)
        stops_charge = round_money(vehicle_type.stop_charge * stops_count)
        child_seats_charge = round_money(vehicle_type.child_seat_charge * child_seats_count)

        return TripPrice(
            base_price=base_price,
            distance_price=distance_price,
            surge=surge,
            stops_charge=stops_charge,
            child_seats_charge=child_seats_charge,
            trip_price=round_money(surged_price + stops_charge + child_seats_charge),
            distance=distance,
            pricing_method=pricing_method,
            area_name=area_name,
        )

    @staticmethod
    def price_return_leg(trip_price: float, vehicle_type: VehicleType) -> ReturnLeg:
        """Discounted price of the way back; the outbound leg stays at full price."""
        percent = vehicle_type.round_trip_discount_percent
        return_price = round_money(trip_price * (1 - percent / 100))
        return ReturnLeg(
            discount_percent=percent,
            return_price=return_price,
            discount=round_money(trip_price - return_price),
        )

    def compute_fare(
        self,
        vehicle_type: VehicleType,
        pickup: Location,
        dropoff: Location,
        stops: Sequence[Location] = (),
        options: FareOptions | None = None,
    ) -> FareBreakdown:
        """Full checkout price: outbound trip, optional return leg, payment discount.

        Raises:
            MissingParameterError: stops_count or child_seats_count is absent.
            NotFoundError: the vehicle type is inactive.
            InvalidConfigurationError: the vehicle's distance tiers are broken.
        """
        options = options or FareOptions()
        missing = options.missing_parameters()
        if missing:
            raise MissingParameterError.for_parameters(missing)
        if not vehicle_type.is_active:
            raise NotFoundError(
                f"Vehicle type '{vehicle_type.name}' is not active",
                details={"vehicle_type_id": vehicle_type.id},
            )

        trip = self.price_trip(
            vehicle_type,
            pickup,
            dropoff,
            stops,
            stops_count=options.stops_count or 0,
            child_seats_count=options.child_seats_count or 0,
            pickup_date_time=options.pickup_date_time,
            provided_miles=options.provided_miles,
        )

        round_trip_discount = 0.0
        return_trip_price = 0.0
        if options.round_trip:
            leg = self.price_return_leg(trip.trip_price, vehicle_type)
            round_trip_discount = leg.discount
            return_trip_price = leg.return_price

        payment_method = options.payment_method or self.settings.default_payment_method
        subtotal = round_money(trip.trip_price + return_trip_price)
        discount = payment_discount(subtotal, payment_method, self.settings)

        breakdown = FareBreakdown(
            base_price=trip.base_price,
            distance_price=trip.distance_price,
            surge_multiplier=trip.surge.multiplier if trip.surge.multiplier > 1 else None,
            surge_name=trip.surge.name or None,
            stops_charge=trip.stops_charge,
            child_seats_charge=trip.child_seats_charge,
            trip_price=trip.trip_price,
            round_trip_discount=round_trip_discount,
            return_trip_price=return_trip_price,
            subtotal=subtotal,
            payment_method=payment_method,
            payment_discount=discount,
            payment_discount_description=payment_discount_description(
                payment_method, self.settings
            ),
            final_total=round_money(subtotal - discount),
            distance=round_money(trip.distance),
            pricing_method=trip.pricing_method,
            area_name=trip.area_name,
        )
        logger.info(
            f"Priced {vehicle_type.name} by {breakdown.pricing_method}: "
            f"{breakdown.distance} mi, total {breakdown.final_total}"
        )
        return breakdown
