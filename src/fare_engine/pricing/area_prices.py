"""Fixed-price areas.

When a pickup or dropoff falls inside several priced areas, the highest
fixed price wins. The ``priority`` carried on an AreaPrice predates that
rule and is ignored here.
"""

import logging
from collections.abc import Sequence

from pydantic import Field

from ..core.models import ConfigModel
from ..geo.areas import Area, location_in_area
from ..geo.location import Location

logger = logging.getLogger(__name__)


class AreaPrice(ConfigModel):
    area: Area
    fixed_price: float = Field(ge=0)
    priority: int = 1


class AreaPriceMatch(ConfigModel):
    price: float
    matched_area_names: tuple[str, ...]

    @property
    def area_name(self) -> str:
        if len(self.matched_area_names) == 1:
            return self.matched_area_names[0]
        names = ", ".join(self.matched_area_names)
        return f"Multiple areas: {names} (using highest: ${format_price(self.price)})"


def format_price(price: float) -> str:
    """Render a price without a trailing .0 for whole amounts."""
    price = float(price)
    return str(int(price)) if price.is_integer() else repr(price)


def _by_price_desc(area_prices: Sequence[AreaPrice]) -> list[AreaPrice]:
    # sorted() is stable under reverse, so equal prices keep configuration order
    return sorted(area_prices, key=lambda ap: ap.fixed_price, reverse=True)


def resolve_fixed_price(
    pickup: Location,
    dropoff: Location,
    area_prices: Sequence[AreaPrice],
) -> AreaPriceMatch | None:
    """Find every priced area touching the trip and pick the highest price.

    Returns None when no area matches, so the caller falls back to
    distance pricing. The price excludes stop and child-seat surcharges.
    """
    matches = [
        ap
        for ap in area_prices
        if location_in_area(pickup, ap.area) or location_in_area(dropoff, ap.area)
    ]
    if not matches:
        return None

    ranked = _by_price_desc(matches)
    match = AreaPriceMatch(
        price=ranked[0].fixed_price,
        matched_area_names=tuple(ap.area.name for ap in ranked),
    )
    logger.debug(f"Fixed area price {match.price} from {match.area_name}")
    return match


def find_priced_area(location: Location, area_prices: Sequence[AreaPrice]) -> AreaPrice | None:
    """Highest-priced area containing a single location, if any."""
    matches = [ap for ap in area_prices if location_in_area(location, ap.area)]
    if not matches:
        return None
    return _by_price_desc(matches)[0]
