"""Booking service - all business orchestration lives here.

Services:
- Depend only on interfaces (stores)
- Run the pricing data flow: package and add-ons, surcharge, discount
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime

from django.utils import timezone

from studios.domain import (
    AddOnSelection,
    AvailabilityDecision,
    BookingQuote,
    DiscountContext,
    DiscountResult,
    EngineConfig,
    Money,
    PaymentType,
    PricingPackage,
    Studio,
)
from studios.domain.availability import evaluate_slot
from studios.domain.discounts import validate_discount
from studios.domain.errors import (
    DiscountRejectedError,
    InvalidBookingConfigurationError,
    InvalidStudioError,
    PackageNotFoundError,
    UnknownAddOnError,
)
from studios.domain.pricing import compute_total, format_price, split_payment
from studios.domain.schedule import localize
from studios.domain.slots import available_slots
from studios.stores.interfaces import CalendarStore, ContentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteRequest:
    studio: str
    package_id: str
    starts_at: datetime
    add_ons: Mapping[str, int] = field(default_factory=dict)
    email: str | None = None
    discount_code: str | None = None
    payment_type: PaymentType = PaymentType.FULL


class BookingService:
    """Service for availability checks and booking quotes."""

    def __init__(
        self,
        content_store: ContentStore,
        calendar_store: CalendarStore,
        config: EngineConfig,
    ) -> None:
        self._content = content_store
        self._calendar = calendar_store
        self._config = config

    def _studio(self, slug: str) -> Studio:
        try:
            return Studio.from_slug(slug)
        except ValueError:
            raise InvalidStudioError(slug) from None

    def _package(self, studio: Studio, package_id: str) -> PricingPackage:
        package = self._content.get_package(studio, package_id)
        if package is None:
            raise PackageNotFoundError(package_id)
        return package

    def _selections(self, add_ons: Mapping[str, int]) -> list[AddOnSelection]:
        selections = []
        for add_on_id, quantity in add_ons.items():
            add_on = self._content.get_add_on(add_on_id)
            if add_on is None:
                raise UnknownAddOnError(add_on_id)
            selections.append(AddOnSelection(add_on=add_on, quantity=quantity))
        return selections

    def list_available_slots(
        self,
        studio: str,
        day: date,
        duration_hours: float,
        interval_minutes: int | None = None,
    ) -> list[str]:
        """Return start times on a day where the studio can take the booking.

        Raises:
            InvalidStudioError: If the studio slug is not recognised.
        """
        resolved = self._studio(studio)
        busy = self._calendar.get_busy_intervals(resolved, day)
        return available_slots(day, duration_hours, busy, self._config, interval_minutes)

    def check_availability(
        self, studio: str, starts_at: datetime, duration_hours: float
    ) -> AvailabilityDecision:
        """Check one start time against the studio calendar.

        Raises:
            InvalidStudioError: If the studio slug is not recognised.
        """
        resolved = self._studio(studio)
        day = localize(starts_at, self._config).date()
        busy = self._calendar.get_busy_intervals(resolved, day)
        return evaluate_slot(starts_at, duration_hours, busy, self._config)

    def validate_discount(
        self,
        code: str,
        email: str | None,
        studio: str,
        booking_total: Money,
        now: datetime | None = None,
    ) -> DiscountResult:
        """Look up a discount code and evaluate it for a booking total.

        Raises:
            InvalidStudioError: If the studio slug is not recognised.
        """
        context = DiscountContext(
            email=email,
            studio=self._studio(studio),
            booking_total=booking_total,
            now=now or timezone.now(),
        )
        result = validate_discount(self._content.get_discount_code(code), context)
        if not result.valid:
            logger.info("Discount code %s rejected: %s", code, result.reason.value)
        return result

    def quote(self, request: QuoteRequest, now: datetime | None = None) -> BookingQuote:
        """Price a booking end to end.

        Raises:
            InvalidStudioError: If the studio slug is not recognised.
            PackageNotFoundError: If the studio has no such package.
            UnknownAddOnError: If an add-on does not exist.
            AddOnQuantityExceededError: If an add-on quantity is over its cap.
            DiscountRejectedError: If a discount code was given and is refused.
            InvalidBookingConfigurationError: If the booking totals zero.
        """
        studio = self._studio(request.studio)
        package = self._package(studio, request.package_id)
        breakdown = compute_total(
            package, self._selections(request.add_ons), request.starts_at, self._config
        )

        total = breakdown.total
        discount = None
        if request.discount_code:
            result = self.validate_discount(
                request.discount_code, request.email, studio.value, total, now=now
            )
            if not result.valid:
                raise DiscountRejectedError(result.reason, result.message)
            discount = result.outcome
            total = total - discount.discount_amount

        if not total:
            raise InvalidBookingConfigurationError()

        logger.info(
            "Quoted %s/%s at %s: %s (surcharge=%s, discount=%s)",
            studio.value,
            package.package_id,
            request.starts_at.isoformat(),
            format_price(total),
            breakdown.surcharge_applied,
            discount.code if discount else None,
        )
        return BookingQuote(
            studio=studio,
            package=package,
            starts_at=request.starts_at,
            breakdown=breakdown,
            discount=discount,
            total=total,
            payment=split_payment(total, request.payment_type),
        )
