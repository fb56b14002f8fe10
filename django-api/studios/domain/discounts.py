"""Discount code eligibility and amount calculation."""

from decimal import Decimal

from studios.domain.errors import REASON_MESSAGES, ErrorCode
from studios.domain.models import DiscountCode, DiscountContext, DiscountOutcome, DiscountResult
from studios.domain.value_objects import DiscountType, Money, round_half_up


def normalize_code(code: str) -> str:
    return code.strip().upper()


def _reject(reason: ErrorCode, message: str | None = None) -> DiscountResult:
    return DiscountResult(reason=reason, message=message or REASON_MESSAGES[reason])


def _first_failure(code: DiscountCode | None, context: DiscountContext) -> DiscountResult | None:
    if code is None:
        return _reject(ErrorCode.NOT_FOUND)
    if not code.is_active:
        return _reject(ErrorCode.INACTIVE)
    if context.now < code.valid_from:
        return _reject(ErrorCode.NOT_YET_ACTIVE)
    if code.valid_until is not None and context.now > code.valid_until:
        return _reject(ErrorCode.EXPIRED)
    if code.usage_limit is not None and code.usage_count >= code.usage_limit:
        return _reject(ErrorCode.USAGE_LIMIT_REACHED)
    if code.exclusive_email is not None and (
        context.email is None
        or code.exclusive_email.strip().lower() != context.email.strip().lower()
    ):
        return _reject(ErrorCode.EMAIL_MISMATCH)
    if code.applicable_studios and context.studio not in code.applicable_studios:
        return _reject(ErrorCode.STUDIO_NOT_APPLICABLE)
    if code.min_booking_value is not None and context.booking_total < code.min_booking_value:
        return _reject(
            ErrorCode.BELOW_MINIMUM,
            f"Minimum booking value of {code.min_booking_value} required for this code",
        )
    return None


def discount_amount(code: DiscountCode, booking_total: Money) -> Money:
    """Discount in pence, capped by the code's maximum and the booking total."""
    if code.discount_type is DiscountType.PERCENTAGE:
        pence = round_half_up(Decimal(booking_total.pence) * code.value / 100)
    else:
        pence = round_half_up(code.value * 100)

    if code.max_discount is not None:
        pence = min(pence, code.max_discount.pence)
    return Money(pence=min(pence, booking_total.pence))


def describe(code: DiscountCode) -> str:
    if code.discount_type is DiscountType.PERCENTAGE:
        value = code.value.normalize()
        return f"{value:f}% off"
    return f"{Money.from_pounds(code.value)} off"


def validate_discount(code: DiscountCode | None, context: DiscountContext) -> DiscountResult:
    """Evaluate a looked-up code against a booking.

    The first failing rule decides the rejection reason. The code's usage
    count is only read here; recording a redemption belongs to the caller.
    """
    failure = _first_failure(code, context)
    if failure is not None:
        return failure

    return DiscountResult(
        outcome=DiscountOutcome(
            code=code.code,
            discount_type=code.discount_type,
            value=code.value,
            discount_amount=discount_amount(code, context.booking_total),
            description=describe(code),
        )
    )
