"""Evening and weekend surcharge rules."""

from datetime import date
from decimal import ROUND_HALF_EVEN, Decimal

from studios.domain.config import EngineConfig
from studios.domain.models import SurchargeResult
from studios.domain.schedule import weekday_index
from studios.domain.value_objects import Money


def is_weekend(day: date, config: EngineConfig) -> bool:
    return weekday_index(day) in config.weekend_days


def is_evening(start_hour: int, config: EngineConfig) -> bool:
    return start_hour >= config.evening_start_hour


def qualifies_for_surcharge(day: date, start_hour: int, config: EngineConfig) -> bool:
    return is_weekend(day, config) or is_evening(start_hour, config)


def surcharge_for(base: Money, config: EngineConfig) -> Money:
    """Surcharge on a base price, rounded half-even to whole pence."""
    amount = (Decimal(base.pence) * config.surcharge_rate).quantize(
        Decimal(1), rounding=ROUND_HALF_EVEN
    )
    return Money(pence=int(amount))


def apply_surcharge(
    base: Money, day: date, start_hour: int, config: EngineConfig
) -> SurchargeResult:
    """Uplift a base price when the booking falls on an evening or weekend.

    Always pass the un-surcharged base; the result is not meant to be fed
    back in.
    """
    if not qualifies_for_surcharge(day, start_hour, config):
        return SurchargeResult(
            final_price=base, surcharge_applied=False, surcharge_amount=Money.zero()
        )

    surcharge = surcharge_for(base, config)
    return SurchargeResult(
        final_price=base + surcharge, surcharge_applied=True, surcharge_amount=surcharge
    )


def surcharge_percent(config: EngineConfig) -> str:
    """The surcharge rate as a percentage, without trailing zeros."""
    return f"{(config.surcharge_rate * 100).normalize():f}"


def surcharge_notice(config: EngineConfig) -> str:
    """Customer-facing description of the surcharge rule."""
    hour = config.evening_start_hour
    if hour == 12:
        evening = "12pm"
    elif hour > 12:
        evening = f"{hour - 12}pm"
    else:
        evening = f"{hour}am"
    return (
        f"Evening (after {evening}) and weekend bookings include a "
        f"{surcharge_percent(config)}% surcharge"
    )
