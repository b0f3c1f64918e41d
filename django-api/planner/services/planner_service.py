"""Planner service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

PlannerService is the single owner of the event, vendor and assignment
stores. Every mutation goes through one of its named operations and every
read recomputes its projection from current store contents.
"""

import logging

from planner.cache import get_events_by_date
from planner.domain import (
    AssignedVendor,
    CalendarDate,
    Event,
    EventId,
    Vendor,
    VendorCategory,
    VendorId,
)
from planner.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidVendorIdError,
    PlannerValidationError,
    VendorNotFoundError,
)
from planner.services.email_template import render_vendor_email
from planner.services.projections import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarMonth,
    CandidateGroup,
    project_assignment_candidates,
    project_calendar,
    vendor_status,
)
from planner.signals import event_created
from planner.stores import (
    AssignmentIndex,
    EventStore,
    InMemoryAssignmentIndex,
    InMemoryEventStore,
    InMemoryVendorStore,
    VendorStore,
)

logger = logging.getLogger(__name__)


class PlannerService:
    """Service for event planning and vendor coordination."""

    def __init__(
        self,
        events: EventStore,
        vendors: VendorStore,
        assignments: AssignmentIndex,
    ) -> None:
        self._events = events
        self._vendors = vendors
        self._assignments = assignments

    # Events

    def create_event(self, name: str, date: str) -> Event:
        """Create an event and start its empty assignment list.

        Raises:
            PlannerValidationError: If the name or date is missing or the
                date is not formatted as YYYY-MM-DD.
        """
        name = _require(name, "Event name is required")
        date = _parse_date(_require(date, "Event date is required"))

        event = self._events.add_event(name=name, date=date)
        self._assignments.init_event(event.id)
        event_created.send(sender=self.__class__, store=self._events, event=event)
        logger.info("Created event %s (%r on %s)", event.id.value, event.name, event.date)
        return event

    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        return self._events.list_events()

    def get_event(self, event_id: str | int) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        return self._lookup_event(_parse_event_id(event_id))

    # Vendors

    def create_vendor(self, name: str, category: str | VendorCategory) -> Vendor:
        """Create a vendor with no availability.

        Raises:
            PlannerValidationError: If the name is missing or the category
                is not one of the known vendor categories.
        """
        name = _require(name, "Vendor name is required")
        category = _parse_category(category)

        vendor = self._vendors.add_vendor(name=name, category=category)
        logger.info(
            "Created vendor %s (%r, %s)", vendor.id.value, vendor.name, vendor.category.value
        )
        return vendor

    def list_vendors(self) -> list[Vendor]:
        """Return all vendors in creation order."""
        return self._vendors.list_vendors()

    def get_vendor(self, vendor_id: str | int) -> Vendor:
        """Return a vendor by ID.

        Raises:
            InvalidVendorIdError: If the vendor_id is not a positive integer.
            VendorNotFoundError: If the vendor does not exist.
        """
        return self._lookup_vendor(_parse_vendor_id(vendor_id))

    def mark_vendor_available(self, vendor_id: str | int, date: str) -> Vendor:
        """Record that a vendor is available on date. Repeats are no-ops."""
        vendor = self.get_vendor(vendor_id)
        date = _parse_date(_require(date, "Availability date is required"))

        if self._vendors.mark_available(vendor.id, date):
            logger.info("Vendor %s marked available on %s", vendor.id.value, date)
        else:
            logger.debug("Vendor %s already available on %s", vendor.id.value, date)
        return vendor

    def remove_vendor(self, vendor_id: str | int) -> None:
        """Remove a vendor.

        Assignment lists keep any reference to it; those dangling ids are
        skipped when assignments are resolved.
        """
        vendor = self.get_vendor(vendor_id)
        self._vendors.remove_vendor(vendor.id)
        logger.info("Removed vendor %s", vendor.id.value)

    def generate_email_template(self, vendor_id: str | int) -> str:
        """Return the inquiry email text for a vendor."""
        return render_vendor_email(self.get_vendor(vendor_id))

    # Assignments

    def assign_vendor(self, event_id: str | int, vendor_id: str | int) -> None:
        """Assign a vendor to an event regardless of its availability.

        Assigning an already assigned vendor is a no-op.
        """
        event = self.get_event(event_id)
        vendor = self.get_vendor(vendor_id)

        if self._assignments.assign(event.id, vendor.id):
            logger.info("Assigned vendor %s to event %s", vendor.id.value, event.id.value)
        else:
            logger.debug(
                "Vendor %s already assigned to event %s", vendor.id.value, event.id.value
            )

    def unassign_vendor(self, event_id: str | int, vendor_id: str | int) -> None:
        """Remove a vendor from an event. Unknown vendor ids are a no-op.

        The vendor itself need not exist, so dangling ids can be cleared.
        """
        event = self.get_event(event_id)
        parsed_vendor_id = _parse_vendor_id(vendor_id)

        if self._assignments.unassign(event.id, parsed_vendor_id):
            logger.info(
                "Unassigned vendor %s from event %s", parsed_vendor_id.value, event.id.value
            )

    def assigned_vendors(self, event_id: str | int) -> tuple[AssignedVendor, ...]:
        """Resolve an event's assignment list, omitting vendors that no longer exist."""
        event = self.get_event(event_id)

        resolved = []
        for vendor_id in self._assignments.vendors_for(event.id):
            vendor = self._vendors.get_vendor(vendor_id)
            if vendor is None:
                continue
            resolved.append(AssignedVendor(vendor=vendor, status=vendor_status(vendor, event.date)))
        return tuple(resolved)

    # Projections

    def project_calendar(self, year: int, month: int) -> CalendarMonth:
        """Return the month grid for (year, month).

        Raises:
            PlannerValidationError: If month is outside 1..12 or year is
                outside 1..9999.
        """
        if not 1 <= month <= 12:
            raise PlannerValidationError("Month must be between 1 and 12")
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise PlannerValidationError("Year must be between 1 and 9999")

        return project_calendar(
            self._events.list_events(),
            self._vendors.list_vendors(),
            year,
            month,
            events_by_date=get_events_by_date(self._events),
        )

    def project_assignment_candidates(self, event_id: str | int) -> tuple[CandidateGroup, ...]:
        """Return the vendors that can still be assigned to an event."""
        event = self.get_event(event_id)
        return project_assignment_candidates(
            self._vendors.list_vendors(),
            self._assignments.vendors_for(event.id),
            event.date,
        )

    def _lookup_event(self, event_id: EventId) -> Event:
        event = self._events.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id.value)
        return event

    def _lookup_vendor(self, vendor_id: VendorId) -> Vendor:
        vendor = self._vendors.get_vendor(vendor_id)
        if vendor is None:
            raise VendorNotFoundError(vendor_id.value)
        return vendor


def build_planner_service() -> PlannerService:
    """Create a service backed by fresh in-memory stores."""
    return PlannerService(
        events=InMemoryEventStore(),
        vendors=InMemoryVendorStore(),
        assignments=InMemoryAssignmentIndex(),
    )


def _require(value: str | None, message: str) -> str:
    if value is None or not str(value).strip():
        raise PlannerValidationError(message)
    return str(value).strip()


def _parse_date(value: str) -> str:
    try:
        return CalendarDate(value).value
    except ValueError:
        raise PlannerValidationError("Date must be formatted as YYYY-MM-DD") from None


def _parse_category(value: str | VendorCategory) -> VendorCategory:
    if isinstance(value, VendorCategory):
        return value
    try:
        return VendorCategory(value)
    except ValueError:
        raise PlannerValidationError("Unknown vendor category") from None


def _parse_event_id(value: str | int) -> EventId:
    try:
        return EventId.from_string(str(value))
    except ValueError:
        raise InvalidEventIdError() from None


def _parse_vendor_id(value: str | int) -> VendorId:
    try:
        return VendorId.from_string(str(value))
    except ValueError:
        raise InvalidVendorIdError() from None
