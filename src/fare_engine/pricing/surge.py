"""Calendar-driven surge multipliers.

A rule applies when it is active and every condition it configures holds.
Among applicable rules the highest priority wins; on equal priority the
rule listed first wins.

Time windows compare "HH:MM" strings, so a window that crosses midnight
(22:00-02:00) never matches. That is the configured behaviour until product
decides what such a window should mean.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import Field, field_validator

from ..core.models import ConfigModel

logger = logging.getLogger(__name__)

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

Weekday = Annotated[int, Field(ge=0, le=6)]


class SurgeRule(ConfigModel):
    name: str
    description: str | None = None
    multiplier: float = Field(default=1.5, ge=1.0)
    is_active: bool = True
    days_of_week: tuple[Weekday, ...] = ()
    start_time: str | None = Field(default=None, pattern=HHMM_PATTERN)
    end_time: str | None = Field(default=None, pattern=HHMM_PATTERN)
    start_date: date | None = None
    end_date: date | None = None
    specific_dates: tuple[date, ...] = ()
    priority: int = 1

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _datetime_to_date(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            return v.date()
        return v

    @field_validator("specific_dates", mode="before")
    @classmethod
    def _datetimes_to_dates(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(d.date() if isinstance(d, datetime) else d for d in v)
        return v


class SurgeResolution(ConfigModel):
    multiplier: float = 1.0
    name: str = ""


def sunday_based_weekday(moment: datetime) -> int:
    """Weekday with Sunday as 0, the convention surge rules are stored in."""
    return (moment.weekday() + 1) % 7


def is_rule_applicable(rule: SurgeRule, at_time: datetime) -> bool:
    if not rule.is_active:
        return False

    if rule.days_of_week and sunday_based_weekday(at_time) not in rule.days_of_week:
        return False

    if rule.start_time and rule.end_time:
        current_time = at_time.strftime("%H:%M")
        if current_time < rule.start_time or current_time > rule.end_time:
            return False

    current_date = at_time.date()

    if rule.start_date and rule.end_date:
        if current_date < rule.start_date or current_date > rule.end_date:
            return False

    if rule.specific_dates and current_date not in rule.specific_dates:
        return False

    return True


def resolve_surge(at_time: datetime, rules: Sequence[SurgeRule]) -> SurgeResolution:
    applicable = [rule for rule in rules if is_rule_applicable(rule, at_time)]
    if not applicable:
        return SurgeResolution()

    # max() keeps the first of equally prioritised rules
    selected = max(applicable, key=lambda rule: rule.priority)
    logger.debug(
        f"Surge '{selected.name}' x{selected.multiplier} selected "
        f"from {len(applicable)} applicable rule(s)"
    )
    return SurgeResolution(multiplier=selected.multiplier, name=selected.name)
