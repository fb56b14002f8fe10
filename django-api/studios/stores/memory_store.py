"""In-memory store implementations seeded from content records."""

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from studios.domain import AddOn, BusyInterval, DiscountCode, PricingPackage, Studio
from studios.domain.discounts import normalize_code
from studios.stores.defaults import DEFAULT_ADD_ONS, DEFAULT_STUDIOS
from studios.stores.interfaces import CalendarStore, ContentStore
from studios.stores.records import (
    add_on_from_record,
    busy_intervals_from_records,
    discount_code_from_record,
    packages_from_record,
)


class InMemoryContentStore(ContentStore):
    """Catalogue held in process memory."""

    def __init__(
        self,
        packages: Iterable[PricingPackage] = (),
        add_ons: Iterable[AddOn] = (),
        discount_codes: Iterable[DiscountCode] = (),
    ) -> None:
        self._packages = list(packages)
        self._add_ons = {add_on.add_on_id: add_on for add_on in add_ons}
        self._discount_codes = {code.code: code for code in discount_codes}

    @classmethod
    def from_records(
        cls,
        studios: Iterable[Mapping[str, Any]] | None = None,
        add_ons: Iterable[Mapping[str, Any]] | None = None,
        discount_codes: Iterable[Mapping[str, Any]] = (),
    ) -> "InMemoryContentStore":
        """Build a store from CMS records, falling back to the default catalogue."""
        packages = [
            package
            for record in (DEFAULT_STUDIOS if studios is None else studios)
            for package in packages_from_record(record)
        ]
        return cls(
            packages=packages,
            add_ons=[add_on_from_record(r) for r in (DEFAULT_ADD_ONS if add_ons is None else add_ons)],
            discount_codes=[discount_code_from_record(r) for r in discount_codes],
        )

    def list_packages(self, studio: Studio) -> list[PricingPackage]:
        return [package for package in self._packages if package.studio is studio]

    def get_package(self, studio: Studio, package_id: str) -> PricingPackage | None:
        for package in self.list_packages(studio):
            if package.package_id == package_id:
                return package
        return None

    def list_add_ons(self) -> list[AddOn]:
        return list(self._add_ons.values())

    def get_add_on(self, add_on_id: str) -> AddOn | None:
        return self._add_ons.get(add_on_id)

    def get_discount_code(self, code: str) -> DiscountCode | None:
        return self._discount_codes.get(normalize_code(code))


class InMemoryCalendarStore(CalendarStore):
    """Busy intervals held per studio."""

    def __init__(self, busy: Mapping[Studio, Iterable[BusyInterval]] | None = None) -> None:
        self._busy = {studio: list(intervals) for studio, intervals in (busy or {}).items()}

    @classmethod
    def from_records(cls, busy: Iterable[Mapping[str, Any]] = ()) -> "InMemoryCalendarStore":
        """Build a calendar from {studio, start, end} records with ISO timestamps."""
        return cls(busy_intervals_from_records(busy))

    def add_busy_interval(self, studio: Studio, interval: BusyInterval) -> None:
        self._busy.setdefault(studio, []).append(interval)

    def get_busy_intervals(self, studio: Studio, day: date) -> list[BusyInterval]:
        intervals = [
            interval
            for interval in self._busy.get(studio, [])
            if interval.start.date() <= day <= interval.end.date()
        ]
        return sorted(intervals, key=lambda interval: interval.start)


content_store_from_records = InMemoryContentStore.from_records
calendar_store_from_records = InMemoryCalendarStore.from_records
