"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

PENCE_PER_POUND = 100


class Studio(Enum):
    """Bookable studios, keyed by slug."""

    DOCK_ONE = "studio-dock-one"
    DOCK_TWO = "studio-dock-two"
    WHARF = "studio-wharf"

    @property
    def display_name(self) -> str:
        return _STUDIO_NAMES[self]

    @classmethod
    def from_slug(cls, slug: str) -> Self:
        return cls(slug.strip().lower())


_STUDIO_NAMES = {
    Studio.DOCK_ONE: "Studio Dock One (E16)",
    Studio.DOCK_TWO: "Studio Dock Two (E20)",
    Studio.WHARF: "Studio Wharf (LUX)",
}


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class PaymentType(Enum):
    FULL = "full"
    DEPOSIT = "deposit"


@dataclass(frozen=True)
class Money:
    """Amount in pence. Never negative, never fractional."""

    pence: int

    def __post_init__(self) -> None:
        if isinstance(self.pence, bool) or not isinstance(self.pence, int):
            raise ValueError("Money must be a whole number of pence")
        if self.pence < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(pence=0)

    @classmethod
    def from_pounds(cls, pounds: Decimal | int | float | str) -> Self:
        amount = Decimal(str(pounds)) * PENCE_PER_POUND
        return cls(pence=round_half_up(amount))

    def __add__(self, other: "Money") -> "Money":
        return Money(pence=self.pence + other.pence)

    def __sub__(self, other: "Money") -> "Money":
        return Money(pence=self.pence - other.pence)

    def __lt__(self, other: "Money") -> bool:
        return self.pence < other.pence

    def __le__(self, other: "Money") -> bool:
        return self.pence <= other.pence

    def __bool__(self) -> bool:
        return self.pence != 0

    def __str__(self) -> str:
        pounds = Decimal(self.pence) / PENCE_PER_POUND
        return f"£{pounds:.2f}"


def round_half_up(amount: Decimal) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))
