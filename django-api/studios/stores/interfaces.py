"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. The content store stands
in for the CMS tables and the calendar store for the studio calendars.
"""

from abc import ABC, abstractmethod
from datetime import date

from studios.domain import AddOn, BusyInterval, DiscountCode, PricingPackage, Studio


class ContentStore(ABC):
    """Interface for read-only pricing and discount content."""

    @abstractmethod
    def list_packages(self, studio: Studio) -> list[PricingPackage]:
        """Return a studio's packages in display order."""
        ...

    @abstractmethod
    def get_package(self, studio: Studio, package_id: str) -> PricingPackage | None:
        """Return a package by ID, or None if not found."""
        ...

    @abstractmethod
    def list_add_ons(self) -> list[AddOn]:
        ...

    @abstractmethod
    def get_add_on(self, add_on_id: str) -> AddOn | None:
        ...

    @abstractmethod
    def get_discount_code(self, code: str) -> DiscountCode | None:
        """Return a discount code by its normalised code, or None if not found."""
        ...


class CalendarStore(ABC):
    """Interface for studio calendar lookups."""

    @abstractmethod
    def get_busy_intervals(self, studio: Studio, day: date) -> list[BusyInterval]:
        """Return the studio's busy intervals touching a day, ordered by start."""
        ...
