"""Domain models representing in-memory planner state.

Events are immutable once created. A Vendor keeps its availability as a
set so marking the same date twice never produces a duplicate.
"""

from dataclasses import dataclass, field
from enum import Enum

from planner.domain.value_objects import EventId, VendorId


class VendorCategory(Enum):
    """Vendor categories, declared in display order."""

    CATERING = "Catering"
    VENUE = "Venue"
    ENTERTAINMENT = "Entertainment"
    DECORATION = "Decoration"
    PHOTOGRAPHY = "Photography"
    OTHER = "Other"


class AvailabilityStatus(Enum):
    """A vendor's availability relative to one date."""

    AVAILABLE = "Available"
    PENDING = "Pending"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    date: str


@dataclass
class Vendor:
    """Domain representation of a Vendor."""

    id: VendorId
    name: str
    category: VendorCategory
    availability: set[str] = field(default_factory=set)

    def is_available_on(self, date: str) -> bool:
        return date in self.availability

    def status_on(self, date: str) -> AvailabilityStatus:
        if self.is_available_on(date):
            return AvailabilityStatus.AVAILABLE
        return AvailabilityStatus.PENDING


@dataclass(frozen=True)
class AssignedVendor:
    """A vendor resolved from an event's assignment list."""

    vendor: Vendor
    status: AvailabilityStatus
