"""Pure projections deriving calendar cells and assignment options.

Nothing here reads or writes a store; callers pass in the current
collections and get fresh view data back.
"""

import calendar
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date as dt_date

from planner.domain import (
    AvailabilityStatus,
    CalendarDate,
    Event,
    Vendor,
    VendorCategory,
    VendorId,
)

MIN_YEAR = 1
MAX_YEAR = 9999

_STATUS_ORDER ={AvailabilityStatus.AVAILABLE: 0, AvailabilityStatus.PENDING: 1}


@dataclass(frozen=True)
class CategoryCount:
    """Number of vendors of one category available on a day."""

    category: VendorCategory
    count: int


@dataclass(frozen=True)
class CalendarDay:
    """One day cell of the month grid."""

    day: int
    date: str
    events: tuple[Event, ...]
    vendor_categories: tuple[CategoryCount, ...]


@dataclass(frozen=True)
class CalendarMonth:
    """A Sunday-first month grid."""

    year: int
    month: int
    leading_blanks: int
    days: tuple[CalendarDay, ...]

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    def previous(self) -> tuple[int, int] | None:
        """Adjacent earlier month, or None before year 1."""
        return _within_calendar_range(shift_month(self.year, self.month, -1))

    def next(self) -> tuple[int, int] | None:
        """Adjacent later month, or None after year 9999."""
        return _within_calendar_range(shift_month(self.year, self.month, 1))


@dataclass(frozen=True)
class Candidate:
    """A vendor eligible for assignment, with its status on the event date."""

    vendor: Vendor
    status: AvailabilityStatus


@dataclass(frozen=True)
class CandidateGroup:
    """Candidates of a single category."""

    category: VendorCategory
    candidates: tuple[Candidate, ...]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return the (year, month) that lies delta months away."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _within_calendar_range(year_month: tuple[int, int]) -> tuple[int, int] | None:
    year, _ = year_month
    if not MIN_YEAR <= year <= MAX_YEAR:
        return None
    return year_month


def leading_blanks(year: int, month: int) -> int:
    """Weekday index of day 1 with Sunday as 0."""
    return (dt_date(year, month, 1).weekday() + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def group_events_by_date(events: Iterable[Event]) -> dict[str, list[Event]]:
    """Group events by exact date string, keeping creation order."""
    grouped: dict[str, list[Event]] = {}
    for event in events:
        grouped.setdefault(event.date, []).append(event)
    return grouped


def vendor_status(vendor: Vendor, date: str) -> AvailabilityStatus:
    return vendor.status_on(date)


def available_categories(vendors: Iterable[Vendor], date: str) -> tuple[CategoryCount, ...]:
    """Count vendors available on date per category, in first-seen order."""
    counts: dict[VendorCategory, int] = {}
    for vendor in vendors:
        if vendor.is_available_on(date):
            counts[vendor.category] = counts.get(vendor.category, 0) + 1
    return tuple(CategoryCount(category, count) for category, count in counts.items())


def project_calendar(
    events: Iterable[Event],
    vendors: Iterable[Vendor],
    year: int,
    month: int,
    events_by_date: Mapping[str, list[Event]] | None = None,
) -> CalendarMonth:
    """Build the month grid for (year, month).

    events_by_date may be a precomputed grouping of events; when omitted it
    is derived from events.
    """
    if events_by_date is None:
        events_by_date = group_events_by_date(events)
    vendor_list = list(vendors)

    days = []
    for day in range(1, days_in_month(year, month) + 1):
        date = CalendarDate.for_day(year, month, day).value
        days.append(
            CalendarDay(
                day=day,
                date=date,
                events=tuple(events_by_date.get(date, ())),
                vendor_categories=available_categories(vendor_list, date),
            )
        )

    return CalendarMonth(
        year=year,
        month=month,
        leading_blanks=leading_blanks(year, month),
        days=tuple(days),
    )


def project_assignment_candidates(
    vendors: Iterable[Vendor],
    assigned_vendor_ids: Iterable[VendorId],
    event_date: str,
) -> tuple[CandidateGroup, ...]:
    """Group unassigned vendors by category, Available before Pending.

    Categories follow their declared order and empty ones are dropped.
    sorted() is stable, so ties keep vendor insertion order.
    """
    assigned = set(assigned_vendor_ids)
    unassigned = [vendor for vendor in vendors if vendor.id not in assigned]

    groups = []
    for category in VendorCategory:
        candidates = [
            Candidate(vendor=vendor, status=vendor_status(vendor, event_date))
            for vendor in unassigned
            if vendor.category is category
        ]
        if not candidates:
            continue
        candidates.sort(key=lambda candidate: _STATUS_ORDER[candidate.status])
        groups.append(CandidateGroup(category=category, candidates=tuple(candidates)))
    return tuple(groups)
