from studios.domain.config import DEFAULT_ENGINE_CONFIG, EngineConfig
from studios.domain.models import (
    AddOn,
    AddOnSelection,
    AvailabilityDecision,
    BookingQuote,
    BookingRequest,
    BusyInterval,
    DiscountCode,
    DiscountContext,
    DiscountResult,
    OperatingWindow,
    PriceBreakdown,
    PricingPackage,
)
from studios.domain.value_objects import DiscountType, Money, PaymentType, Studio

__all__ = [
    "DEFAULT_ENGINE_CONFIG",
    "EngineConfig",
    "AddOn",
    "AddOnSelection",
    "AvailabilityDecision",
    "BookingQuote",
    "BookingRequest",
    "BusyInterval",
    "DiscountCode",
    "DiscountContext",
    "DiscountResult",
    "OperatingWindow",
    "PriceBreakdown",
    "PricingPackage",
    "DiscountType",
    "Money",
    "PaymentType",
    "Studio",
]
