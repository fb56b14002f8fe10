from studios.handlers.views import (
    AvailabilityView,
    DiscountValidateView,
    QuoteView,
    SlotListView,
)

__all__ = [
    "AvailabilityView",
    "DiscountValidateView",
    "QuoteView",
    "SlotListView",
]
