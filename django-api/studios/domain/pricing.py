"""Price composition for a studio package plus add-ons."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from studios.domain.config import EngineConfig
from studios.domain.errors import AddOnQuantityExceededError, SurchargeAlreadyAppliedError
from studios.domain.models import (
    AddOnSelection,
    BreakdownLine,
    PaymentSplit,
    PriceBreakdown,
    PricingPackage,
)
from studios.domain.schedule import localize
from studios.domain.surcharge import apply_surcharge, surcharge_percent
from studios.domain.value_objects import Money, PaymentType, round_half_up


def _add_on_line(selection: AddOnSelection) -> BreakdownLine:
    add_on = selection.add_on
    label = add_on.label if selection.quantity == 1 else f"{add_on.label} x{selection.quantity}"
    return BreakdownLine(label=label, amount=Money(pence=add_on.price.pence * selection.quantity))


def compose_base_total(
    package: PricingPackage, selections: Iterable[AddOnSelection]
) -> PriceBreakdown:
    """Itemise the package and any selected add-ons.

    Raises:
        AddOnQuantityExceededError: If a selection exceeds its add-on's cap.
    """
    lines = [
        BreakdownLine(
            label=f"{package.studio.display_name} - {package.label}",
            amount=package.base_price,
        )
    ]
    for selection in selections:
        if selection.quantity > selection.add_on.max_quantity:
            raise AddOnQuantityExceededError(
                add_on_id=selection.add_on.add_on_id,
                requested=selection.quantity,
                max_quantity=selection.add_on.max_quantity,
            )
        if selection.quantity == 0:
            continue
        lines.append(_add_on_line(selection))

    return PriceBreakdown(lines=tuple(lines))


def apply_booking_surcharge(
    breakdown: PriceBreakdown, starts_at: datetime, config: EngineConfig
) -> PriceBreakdown:
    """Add the evening/weekend surcharge line when the start time qualifies.

    Raises:
        SurchargeAlreadyAppliedError: If the breakdown already carries one.
    """
    if breakdown.surcharge_applied:
        raise SurchargeAlreadyAppliedError()

    local_start = localize(starts_at, config)
    result = apply_surcharge(breakdown.total, local_start.date(), local_start.hour, config)
    if not result.surcharge_applied:
        return breakdown

    line = BreakdownLine(
        label=f"Evening/Weekend Surcharge ({surcharge_percent(config)}%)",
        amount=result.surcharge_amount,
    )
    return PriceBreakdown(
        lines=breakdown.lines + (line,),
        surcharge_applied=True,
        surcharge_amount=result.surcharge_amount,
    )


def compute_total(
    package: PricingPackage,
    selections: Iterable[AddOnSelection],
    starts_at: datetime,
    config: EngineConfig,
) -> PriceBreakdown:
    """Package plus add-ons, surcharged when the booking time calls for it."""
    return apply_booking_surcharge(compose_base_total(package, selections), starts_at, config)


def split_payment(total: Money, payment_type: PaymentType) -> PaymentSplit:
    """Work out what is charged now; a deposit is half, rounded half-up."""
    if payment_type is PaymentType.DEPOSIT:
        deposit = Money(pence=round_half_up(Decimal(total.pence) / 2))
        return PaymentSplit(
            payment_type=payment_type, due_now=deposit, remaining_balance=total - deposit
        )
    return PaymentSplit(payment_type=payment_type, due_now=total, remaining_balance=Money.zero())


def format_price(amount: Money) -> str:
    return str(amount)
