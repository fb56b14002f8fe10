"""Engine configuration: schedule, cooldown and surcharge rules.

An EngineConfig is immutable and passed into every engine call, so the same
rules can be exercised against alternate schedules.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping
from zoneinfo import ZoneInfo

from studios.domain.models import OperatingWindow

SUNDAY = 0
SATURDAY = 6


def _default_operating_hours() -> Mapping[int, OperatingWindow]:
    hours = {SUNDAY: OperatingWindow(open_hour=16, close_hour=22)}
    for weekday in range(1, 7):
        hours[weekday] = OperatingWindow(open_hour=10, close_hour=22)
    return MappingProxyType(hours)


@dataclass(frozen=True)
class EngineConfig:
    """Rules for one studio operator. Weekdays run 0=Sunday to 6=Saturday."""

    operating_hours: Mapping[int, OperatingWindow] = field(
        default_factory=_default_operating_hours
    )
    cooldown_minutes: int = 60
    surcharge_rate: Decimal = Decimal("0.15")
    evening_start_hour: int = 18
    weekend_days: frozenset[int] = frozenset({SUNDAY, SATURDAY})
    time_zone: str = "Europe/London"
    slot_interval_minutes: int = 30

    def __post_init__(self) -> None:
        if not isinstance(self.operating_hours, MappingProxyType):
            object.__setattr__(
                self, "operating_hours", MappingProxyType(dict(self.operating_hours))
            )
        if any(day not in range(7) for day in self.operating_hours):
            raise ValueError("Weekdays must be between 0 (Sunday) and 6 (Saturday)")
        if self.cooldown_minutes < 0:
            raise ValueError("Cooldown cannot be negative")
        if self.surcharge_rate < 0:
            raise ValueError("Surcharge rate cannot be negative")
        if not 0 <= self.evening_start_hour <= 23:
            raise ValueError("Evening start hour must be between 0 and 23")
        if self.slot_interval_minutes <= 0:
            raise ValueError("Slot interval must be positive")

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.time_zone)


DEFAULT_ENGINE_CONFIG = EngineConfig()
