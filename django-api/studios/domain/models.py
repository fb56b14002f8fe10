"""Domain models for bookings, pricing and discounts.

These are pure domain objects with no API input rules. Catalogue records
from the content store are parsed into them in studios/stores/records.py.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from studios.domain.errors import ErrorCode
from studios.domain.value_objects import DiscountType, Money, PaymentType, Studio


@dataclass(frozen=True)
class OperatingWindow:
    """Opening hours for one weekday, in whole hours."""

    open_hour: int
    close_hour: int

    def __post_init__(self) -> None:
        for hour in (self.open_hour, self.close_hour):
            if not 0 <= hour <= 23:
                raise ValueError("Operating hours must be between 0 and 23")
        if self.open_hour >= self.close_hour:
            raise ValueError("Opening hour must be before closing hour")


@dataclass(frozen=True)
class BusyInterval:
    """A period during which a studio is already taken."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Busy interval cannot end before it starts")


@dataclass(frozen=True)
class BookingRequest:
    studio: Studio
    start_time: datetime
    duration_hours: float


@dataclass(frozen=True)
class PricingPackage:
    """Domain representation of a bookable studio package."""

    studio: Studio
    package_id: str
    label: str
    hours: int
    base_price: Money


@dataclass(frozen=True)
class AddOn:
    """Domain representation of an optional extra."""

    add_on_id: str
    label: str
    price: Money
    max_quantity: int = 1
    category: str | None = None

    def __post_init__(self) -> None:
        if self.max_quantity < 1:
            raise ValueError("Add-on max quantity must be at least 1")


@dataclass(frozen=True)
class AddOnSelection:
    add_on: AddOn
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Add-on quantity cannot be negative")


@dataclass(frozen=True)
class DiscountCode:
    """Domain representation of a discount code record."""

    code: str
    discount_type: DiscountType
    value: Decimal
    valid_from: datetime
    usage_count: int = 0
    min_booking_value: Money | None = None
    max_discount: Money | None = None
    usage_limit: int | None = None
    exclusive_email: str | None = None
    valid_until: datetime | None = None
    applicable_studios: frozenset[Studio] | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Discount value cannot be negative")
        if self.usage_count < 0:
            raise ValueError("Usage count cannot be negative")


@dataclass(frozen=True)
class BreakdownLine:
    label: str
    amount: Money


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemised lines summing to a booking total."""

    lines: tuple[BreakdownLine, ...]
    surcharge_applied: bool = False
    surcharge_amount: Money = field(default_factory=Money.zero)

    @property
    def total(self) -> Money:
        total = Money.zero()
        for line in self.lines:
            total = total + line.amount
        return total


@dataclass(frozen=True)
class SurchargeResult:
    final_price: Money
    surcharge_applied: bool
    surcharge_amount: Money


@dataclass(frozen=True)
class AvailabilityDecision:
    available: bool
    reason: ErrorCode | None = None


@dataclass(frozen=True)
class DiscountContext:
    email: str | None
    studio: Studio
    booking_total: Money
    now: datetime


@dataclass(frozen=True)
class DiscountOutcome:
    code: str
    discount_type: DiscountType
    value: Decimal
    discount_amount: Money
    description: str


@dataclass(frozen=True)
class DiscountResult:
    """Either an accepted discount or the first reason it was refused."""

    outcome: DiscountOutcome | None = None
    reason: ErrorCode | None = None
    message: str | None = None

    @property
    def valid(self) -> bool:
        return self.outcome is not None


@dataclass(frozen=True)
class PaymentSplit:
    payment_type: PaymentType
    due_now: Money
    remaining_balance: Money


@dataclass(frozen=True)
class BookingQuote:
    """Priced booking ready to hand to checkout."""

    studio: Studio
    package: PricingPackage
    starts_at: datetime
    breakdown: PriceBreakdown
    discount: DiscountOutcome | None
    total: Money
    payment: PaymentSplit
