"""Domain error codes for the studios module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    # availability
    INVALID_DURATION = "INVALID_DURATION"
    OUTSIDE_OPERATING_HOURS = "OUTSIDE_OPERATING_HOURS"
    SLOT_CONFLICT = "SLOT_CONFLICT"

    # pricing
    ADD_ON_QUANTITY_EXCEEDED = "ADD_ON_QUANTITY_EXCEEDED"
    SURCHARGE_ALREADY_APPLIED = "SURCHARGE_ALREADY_APPLIED"
    UNKNOWN_ADD_ON = "UNKNOWN_ADD_ON"
    PACKAGE_NOT_FOUND = "PACKAGE_NOT_FOUND"
    INVALID_STUDIO = "INVALID_STUDIO"
    INVALID_BOOKING_CONFIGURATION = "INVALID_BOOKING_CONFIGURATION"

    # discounts
    NOT_FOUND = "NOT_FOUND"
    INACTIVE = "INACTIVE"
    NOT_YET_ACTIVE = "NOT_YET_ACTIVE"
    EXPIRED = "EXPIRED"
    USAGE_LIMIT_REACHED = "USAGE_LIMIT_REACHED"
    EMAIL_MISMATCH = "EMAIL_MISMATCH"
    STUDIO_NOT_APPLICABLE = "STUDIO_NOT_APPLICABLE"
    BELOW_MINIMUM = "BELOW_MINIMUM"


REASON_MESSAGES = {
    ErrorCode.INVALID_DURATION: "Booking duration must be positive",
    ErrorCode.OUTSIDE_OPERATING_HOURS: "Requested time is outside operating hours",
    ErrorCode.SLOT_CONFLICT: "Requested time overlaps an existing booking",
    ErrorCode.NOT_FOUND: "Invalid discount code",
    ErrorCode.INACTIVE: "This discount code is no longer active",
    ErrorCode.NOT_YET_ACTIVE: "This discount code is not yet active",
    ErrorCode.EXPIRED: "This discount code has expired",
    ErrorCode.USAGE_LIMIT_REACHED: "This discount code has reached its usage limit",
    ErrorCode.EMAIL_MISMATCH: "This discount code is not available for your email",
    ErrorCode.STUDIO_NOT_APPLICABLE: "This discount code is not valid for the selected studio",
    ErrorCode.BELOW_MINIMUM: "Minimum booking value required for this code",
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AddOnQuantityExceededError(DomainError):
    """Raised when an add-on is requested beyond its maximum quantity."""

    def __init__(self, add_on_id: str, requested: int, max_quantity: int) -> None:
        super().__init__(
            code=ErrorCode.ADD_ON_QUANTITY_EXCEEDED,
            message=f"At most {max_quantity} of this add-on can be booked",
        )
        object.__setattr__(self, "add_on_id", add_on_id)
        object.__setattr__(self, "requested", requested)


class SurchargeAlreadyAppliedError(DomainError):
    """Raised when a surcharge is applied to an already surcharged total."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SURCHARGE_ALREADY_APPLIED,
            message="Surcharge has already been applied to this total",
        )


class UnknownAddOnError(DomainError):
    """Raised when a selected add-on does not exist."""

    def __init__(self, add_on_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_ADD_ON,
            message="Unknown add-on selection",
        )
        object.__setattr__(self, "add_on_id", add_on_id)


class PackageNotFoundError(DomainError):
    """Raised when a studio has no package with the requested id."""

    def __init__(self, package_id: str) -> None:
        super().__init__(
            code=ErrorCode.PACKAGE_NOT_FOUND,
            message="Invalid booking length",
        )
        object.__setattr__(self, "package_id", package_id)


class InvalidStudioError(DomainError):
    """Raised when a studio slug is not recognised."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STUDIO,
            message="Invalid studio selection",
        )
        object.__setattr__(self, "slug", slug)


class InvalidBookingConfigurationError(DomainError):
    """Raised when a booking prices out to nothing."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_CONFIGURATION,
            message="Invalid booking configuration",
        )


class DiscountRejectedError(DomainError):
    """Raised when a quote names a discount code that does not validate."""

    def __init__(self, reason: ErrorCode, message: str) -> None:
        super().__init__(code=reason, message=message)
