"""Top-level checkout quote.

This is what the booking controller calls: it looks up the vehicle type
in the configuration snapshot, checks the request, and returns the
breakdown that gets stored on the booking and sent to the customer.
"""

import logging
from datetime import datetime
from uuid import uuid4

from pydantic import Field

from .catalog import PricingCatalog
from .core.exceptions import MissingParameterError
from .core.models import ConfigModel
from .fare import FareAssembler, FareBreakdown, FareOptions
from .fare_logging import log_quote_context
from .geo.location import Location
from .payment import PaymentMethod

logger = logging.getLogger(__name__)


class QuoteRequest(ConfigModel):
    pickup: Location | None = None
    dropoff: Location | None = None
    stops: tuple[Location, ...] = ()
    miles: float | None = Field(default=None, ge=0)
    stops_count: int | None = Field(default=None, ge=0)
    child_seats_count: int | None = Field(default=None, ge=0)
    is_round_trip: bool = False
    vehicle_type_id: str | None = None
    payment_method: PaymentMethod | None = None
    pickup_date_time: datetime | None = None

    def missing_parameters(self) -> list[str]:
        required = {
            "pickup": self.pickup,
            "dropoff": self.dropoff,
            "miles": self.miles,
            "stops_count": self.stops_count,
            "child_seats_count": self.child_seats_count,
        }
        return [name for name, value in required.items() if value is None]


def calculate_quote(
    catalog: PricingCatalog,
    request: QuoteRequest,
    assembler: FareAssembler | None = None,
) -> FareBreakdown:
    """Price a booking request against a configuration snapshot.

    Raises:
        MissingParameterError: before any lookup when a required field is absent.
        NotFoundError: when no active vehicle type matches the request.
    """
    missing = request.missing_parameters()
    if missing:
        raise MissingParameterError.for_parameters(missing)

    assembler = assembler or FareAssembler()
    vehicle_type = catalog.get_vehicle_type(request.vehicle_type_id)

    with log_quote_context(quote_id=str(uuid4()), vehicle_type_id=vehicle_type.id):
        logger.info(
            f"Quote for {vehicle_type.name}: {request.miles} mi, "
            f"{request.stops_count} stop(s), {request.child_seats_count} child seat(s)"
        )
        return assembler.compute_fare(
            vehicle_type,
            request.pickup,
            request.dropoff,
            request.stops,
            FareOptions(
                stops_count=request.stops_count,
                child_seats_count=request.child_seats_count,
                round_trip=request.is_round_trip,
                payment_method=request.payment_method,
                pickup_date_time=request.pickup_date_time,
                provided_miles=request.miles,
            ),
        )
