"""Parse content-store records into domain models.

Records arrive as loosely-typed dicts using the CMS field names. They are
validated once here and handled as typed domain objects afterwards.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from studios.domain import (
    AddOn,
    BusyInterval,
    DiscountCode,
    DiscountType,
    Money,
    PricingPackage,
    Studio,
)
from studios.domain.discounts import normalize_code


def _require(record: Mapping[str, Any], key: str) -> Any:
    try:
        return record[key]
    except KeyError:
        raise ValueError(f"Record is missing required field '{key}'") from None


def _money(value: Any) -> Money:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected a whole number of pence, got {value!r}")
    return Money(pence=value)


def _optional_money(value: Any) -> Money | None:
    return None if value is None else _money(value)


def _decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Expected a number, got {value!r}") from None


def _datetime(value: Any) -> datetime:
    """Parse a timestamp; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"Expected an ISO timestamp, got {value!r}") from None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _studio(value: Any) -> Studio:
    try:
        return Studio.from_slug(str(value))
    except ValueError:
        raise ValueError(f"Unknown studio '{value}'") from None


def _max_quantity(value: Any) -> int:
    if value is None:
        return 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"Expected maxQuantity to be a whole number of at least 1, got {value!r}")
    return value


def _flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Expected true or false, got {value!r}")
    return value


def packages_from_record(record: Mapping[str, Any]) -> list[PricingPackage]:
    """Parse a studio record ({id, name, packages[]}) into its packages."""
    studio = _studio(_require(record, "id"))
    return [
        PricingPackage(
            studio=studio,
            package_id=str(_require(package, "id")),
            label=str(_require(package, "label")),
            hours=int(_require(package, "hours")),
            base_price=_money(_require(package, "price")),
        )
        for package in _require(record, "packages")
    ]


def add_on_from_record(record: Mapping[str, Any]) -> AddOn:
    """Parse an add-on record; a missing maxQuantity means one."""
    return AddOn(
        add_on_id=str(_require(record, "id")),
        label=str(_require(record, "label")),
        price=_money(_require(record, "price")),
        max_quantity=_max_quantity(record.get("maxQuantity")),
        category=record.get("category"),
    )


def discount_code_from_record(record: Mapping[str, Any]) -> DiscountCode:
    try:
        discount_type = DiscountType(_require(record, "discount_type"))
    except ValueError:
        raise ValueError(f"Unknown discount type {record.get('discount_type')!r}") from None

    studios = record.get("applicable_studios")
    usage_limit = record.get("usage_limit")
    valid_until = record.get("valid_until")
    email = record.get("exclusive_email")

    return DiscountCode(
        code=normalize_code(str(_require(record, "code"))),
        discount_type=discount_type,
        value=_decimal(_require(record, "discount_value")),
        valid_from=_datetime(_require(record, "valid_from")),
        usage_count=int(record.get("usage_count") or 0),
        min_booking_value=_optional_money(record.get("min_booking_value")),
        max_discount=_optional_money(record.get("max_discount_amount")),
        usage_limit=None if usage_limit is None else int(usage_limit),
        exclusive_email=email or None,
        valid_until=None if valid_until is None else _datetime(valid_until),
        applicable_studios=None if studios is None else frozenset(_studio(s) for s in studios),
        is_active=_flag(record.get("is_active", True)),
    )


def busy_intervals_from_records(
    records: Iterable[Mapping[str, Any]],
) -> dict[Studio, list[BusyInterval]]:
    """Group calendar records ({studio, start, end}) into busy intervals per studio."""
    busy: dict[Studio, list[BusyInterval]] = {}
    for record in records:
        studio = _studio(_require(record, "studio"))
        interval = BusyInterval(
            start=_datetime(_require(record, "start")),
            end=_datetime(_require(record, "end")),
        )
        busy.setdefault(studio, []).append(interval)
    return busy
