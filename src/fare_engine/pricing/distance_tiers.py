"""Tiered per-mile pricing for distance beyond the base threshold."""

import logging
import math
from collections.abc import Sequence

from pydantic import Field

from ..core.exceptions import InvalidConfigurationError
from ..core.models import ConfigModel

logger = logging.getLogger(__name__)

FALLBACK_PRICE_PER_MILE = 1.0


class DistanceTier(ConfigModel):
    """Per-mile rate for a band of additional miles.

    ``to_miles == 0`` marks the open-ended last tier.
    """

    from_miles: float = Field(ge=0)
    to_miles: float = Field(ge=0)
    price_per_mile: float = Field(ge=0)
    description: str | None = None

    @property
    def is_open_ended(self) -> bool:
        return self.to_miles == 0

    @property
    def width(self) -> float:
        return math.inf if self.is_open_ended else self.to_miles - self.from_miles


def default_distance_tiers() -> tuple[DistanceTier, ...]:
    return (
        DistanceTier(
            from_miles=0,
            to_miles=13,
            price_per_mile=4.0,
            description="Short distance (0-13 additional miles)",
        ),
        DistanceTier(
            from_miles=13,
            to_miles=25,
            price_per_mile=3.5,
            description="Medium distance (13-25 additional miles)",
        ),
        DistanceTier(
            from_miles=25,
            to_miles=50,
            price_per_mile=3.0,
            description="Long distance (25-50 additional miles)",
        ),
        DistanceTier(
            from_miles=50,
            to_miles=0,
            price_per_mile=2.5,
            description="Extended distance (50+ additional miles)",
        ),
    )


def sort_tiers(tiers: Sequence[DistanceTier]) -> list[DistanceTier]:
    return sorted(tiers, key=lambda tier: tier.from_miles)


def validate_distance_tiers(tiers: Sequence[DistanceTier]) -> None:
    """Check that tiers tile the axis from 0 without gaps or overlaps.

    Raises:
        InvalidConfigurationError: on a gap, an overlap, an empty or inverted
            range, or an open-ended tier that is not the last one.
    """
    ordered = sort_tiers(tiers)
    if not ordered:
        return

    if ordered[0].from_miles != 0:
        raise InvalidConfigurationError(
            f"First distance tier starts at {ordered[0].from_miles}, expected 0",
            details={"from_miles": ordered[0].from_miles},
        )

    for index, tier in enumerate(ordered):
        is_last = index == len(ordered) - 1
        if tier.is_open_ended:
            if not is_last:
                raise InvalidConfigurationError(
                    f"Open-ended tier starting at {tier.from_miles} must be the last tier",
                    details={"from_miles": tier.from_miles},
                )
            continue

        if tier.to_miles <= tier.from_miles:
            raise InvalidConfigurationError(
                f"Distance tier {tier.from_miles}-{tier.to_miles} has an empty range",
                details={"from_miles": tier.from_miles, "to_miles": tier.to_miles},
            )

        if not is_last:
            following = ordered[index + 1]
            if following.from_miles > tier.to_miles:
                kind = "gap"
            elif following.from_miles < tier.to_miles:
                kind = "overlap"
            else:
                continue
            raise InvalidConfigurationError(
                f"Distance tiers have a {kind} between {tier.to_miles} and {following.from_miles}",
                details={
                    "kind": kind,
                    "to_miles": tier.to_miles,
                    "next_from": following.from_miles,
                },
            )


def _is_included_band(tier: DistanceTier, base_threshold: float) -> bool:
    return (
        base_threshold > 0
        and tier.from_miles == 0
        and not tier.is_open_ended
        and tier.to_miles == base_threshold
    )


def price_distance(
    total_miles: float,
    base_threshold: float,
    tiers: Sequence[DistanceTier],
    fallback_rate: float = FALLBACK_PRICE_PER_MILE,
) -> float:
    """Distance component of a fare, on top of the vehicle's base price.

    Miles up to ``base_threshold`` are covered by the base price. The
    remaining additional miles are consumed tier by tier in ``from_miles``
    order. A first tier spanning exactly ``[0, base_threshold]`` restates
    the band the base price already covers and is not charged. Without
    tiers every additional mile costs ``fallback_rate``.
    """
    if total_miles <= base_threshold:
        logger.debug(f"{total_miles} miles within base threshold of {base_threshold}")
        return 0.0

    additional = total_miles - base_threshold

    if not tiers:
        logger.debug(f"No distance tiers, {additional} additional miles at {fallback_rate}/mile")
        return additional * fallback_rate

    validate_distance_tiers(tiers)

    ordered = sort_tiers(tiers)
    if _is_included_band(ordered[0], base_threshold):
        logger.debug(f"Tier 0-{base_threshold} is the band included in the base price")
        ordered = ordered[1:]

    remaining = additional
    price = 0.0
    for tier in ordered:
        if remaining <= 0:
            break
        miles_in_tier = min(remaining, tier.width)
        price += miles_in_tier * tier.price_per_mile
        remaining -= miles_in_tier
        logger.debug(
            f"Tier {tier.from_miles}-{tier.to_miles or 'inf'}: "
            f"{miles_in_tier} miles at {tier.price_per_mile}/mile"
        )

    if remaining > 0:
        logger.warning(
            f"{remaining} miles exceed the last bounded distance tier and are not charged"
        )

    return price
