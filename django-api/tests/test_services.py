"""Unit tests for PlannerService.

These test operation semantics, error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import logging

import pytest

from planner.domain import AvailabilityStatus, VendorCategory
from planner.domain.errors import (
    ErrorCode,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidVendorIdError,
    PlannerValidationError,
    VendorNotFoundError,
)


class TestCreate:
    """Tests for create_event and create_vendor."""

    def test_create_event_initialises_empty_assignments(self, service):
        """create_event starts the event with no assigned vendors."""
        event = service.create_event("Gala", "2024-06-01")
        assert service.get_event(event.id.value) == event
        assert service.assigned_vendors(event.id.value) == ()

    def test_create_event_strips_name(self, service):
        """Surrounding whitespace is trimmed from the event name."""
        assert service.create_event("  Gala ", "2024-06-01").name == "Gala"

    @pytest.mark.parametrize("name, date", [("", "2024-06-01"), ("   ", "2024-06-01"), ("Gala", "")])
    def test_create_event_requires_fields(self, service, name, date):
        """Missing name or date raises PlannerValidationError and stores nothing."""
        with pytest.raises(PlannerValidationError):
            service.create_event(name, date)
        assert service.list_events() == []

    @pytest.mark.parametrize("date", ["06/01/2024", "2024-W22-6", "2024-6-1"])
    def test_create_event_rejects_malformed_date(self, service, date):
        """Dates not in YYYY-MM-DD form, ISO week dates included, are rejected."""
        with pytest.raises(PlannerValidationError) as exc_info:
            service.create_event("Gala", date)
        assert exc_info.value.code is ErrorCode.VALIDATION_ERROR
        assert service.list_events() == []

    def test_create_event_date_lands_on_calendar(self, service):
        """An accepted date shows up on its calendar day."""
        service.create_event("Gala", "2024-06-01")
        month = service.project_calendar(2024, 6)
        assert [event.name for event in month.days[0].events] == ["Gala"]

    def test_rapid_creations_get_unique_ids(self, service):
        """Back-to-back creations never reuse an id."""
        ids = {service.create_event(f"Event {i}", "2024-06-01").id for i in range(50)}
        assert len(ids) == 50

    def test_create_vendor_accepts_category_name(self, service):
        """create_vendor maps a category name to VendorCategory."""
        vendor = service.create_vendor("Chef", "Catering")
        assert vendor.category is VendorCategory.CATERING
        assert vendor.availability == set()

    def test_create_vendor_rejects_unknown_category(self, service):
        """An unknown category raises PlannerValidationError."""
        with pytest.raises(PlannerValidationError):
            service.create_vendor("Chef", "Plumbing")
        assert service.list_vendors() == []

    def test_create_logs_mutation(self, service, caplog):
        """Creating an event is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="planner"):
            service.create_event("Gala", "2024-06-01")
        assert "Created event" in caplog.text


class TestLookups:
    """Tests for id parsing and not-found errors."""

    def test_get_event_invalid_id_raises_error(self, service):
        """get_event raises InvalidEventIdError for a non-numeric id."""
        with pytest.raises(InvalidEventIdError):
            service.get_event("not-a-number")

    def test_get_event_not_found_raises_error(self, service):
        """get_event raises EventNotFoundError when the store returns None."""
        with pytest.raises(EventNotFoundError) as exc_info:
            service.get_event(404)
        assert exc_info.value.event_id == 404

    def test_get_vendor_invalid_id_raises_error(self, service):
        """get_vendor raises InvalidVendorIdError for ids below 1."""
        with pytest.raises(InvalidVendorIdError):
            service.get_vendor("0")

    def test_get_vendor_not_found_raises_error(self, service):
        """get_vendor raises VendorNotFoundError for an unknown vendor."""
        with pytest.raises(VendorNotFoundError):
            service.get_vendor(12)


class TestAvailability:
    """Tests for mark_vendor_available."""

    def test_mark_twice_keeps_single_date(self, service):
        """Marking the same date twice leaves one occurrence."""
        vendor = service.create_vendor("Chef", "Catering")
        service.mark_vendor_available(vendor.id.value, "2024-06-01")
        service.mark_vendor_available(vendor.id.value, "2024-06-01")
        assert service.get_vendor(vendor.id.value).availability == {"2024-06-01"}

    def test_mark_unknown_vendor_raises_error(self, service):
        """Marking an unknown vendor raises VendorNotFoundError."""
        with pytest.raises(VendorNotFoundError):
            service.mark_vendor_available(3, "2024-06-01")

    def test_mark_rejects_missing_date(self, service):
        """An empty availability date raises PlannerValidationError."""
        vendor = service.create_vendor("Chef", "Catering")
        with pytest.raises(PlannerValidationError):
            service.mark_vendor_available(vendor.id.value, "")


class TestAssignments:
    """Tests for assign_vendor, unassign_vendor and assigned_vendors."""

    def test_assign_twice_is_idempotent(self, service):
        """Assigning the same vendor twice keeps it once."""
        event = service.create_event("Gala", "2024-06-01")
        vendor = service.create_vendor("Chef", "Catering")
        service.assign_vendor(event.id.value, vendor.id.value)
        service.assign_vendor(event.id.value, vendor.id.value)
        assigned = service.assigned_vendors(event.id.value)
        assert [a.vendor.id for a in assigned] == [vendor.id]

    def test_assign_pending_vendor_is_permitted(self, service):
        """Vendors not available on the event date can still be assigned."""
        event = service.create_event("Gala", "2024-06-01")
        vendor = service.create_vendor("Chef", "Catering")
        service.assign_vendor(event.id.value, vendor.id.value)
        assert service.assigned_vendors(event.id.value)[0].status is AvailabilityStatus.PENDING

    def test_assign_unknown_event_raises_error(self, service):
        """assign_vendor raises EventNotFoundError for an unknown event."""
        vendor = service.create_vendor("Chef", "Catering")
        with pytest.raises(EventNotFoundError):
            service.assign_vendor(1, vendor.id.value)

    def test_assign_unknown_vendor_raises_error(self, service):
        """assign_vendor raises VendorNotFoundError for an unknown vendor."""
        event = service.create_event("Gala", "2024-06-01")
        with pytest.raises(VendorNotFoundError):
            service.assign_vendor(event.id.value, 1)

    def test_unassign_absent_vendor_is_noop(self, service):
        """Unassigning a vendor that is not assigned changes nothing."""
        event = service.create_event("Gala", "2024-06-01")
        service.unassign_vendor(event.id.value, 99)
        assert service.assigned_vendors(event.id.value) == ()

    def test_unassign_restores_candidate_with_current_status(self, service):
        """An unassigned vendor becomes a candidate again with its current status."""
        event = service.create_event("Gala", "2024-06-01")
        vendor = service.create_vendor("Chef", "Catering")
        service.assign_vendor(event.id.value, vendor.id.value)
        assert service.project_assignment_candidates(event.id.value) == ()

        service.mark_vendor_available(vendor.id.value, "2024-06-01")
        service.unassign_vendor(event.id.value, vendor.id.value)

        groups = service.project_assignment_candidates(event.id.value)
        assert len(groups) == 1
        candidate = groups[0].candidates[0]
        assert candidate.vendor.id == vendor.id
        assert candidate.status is AvailabilityStatus.AVAILABLE

    def test_dangling_vendor_is_omitted_without_error(self, service):
        """Assigned ids of removed vendors are skipped when resolving."""
        event = service.create_event("Gala", "2024-06-01")
        kept = service.create_vendor("Chef", "Catering")
        removed = service.create_vendor("Hall", "Venue")
        service.assign_vendor(event.id.value, kept.id.value)
        service.assign_vendor(event.id.value, removed.id.value)

        service.remove_vendor(removed.id.value)

        assigned = service.assigned_vendors(event.id.value)
        assert [a.vendor.name for a in assigned] == ["Chef"]

    def test_dangling_vendor_can_still_be_unassigned(self, service):
        """The id of a removed vendor can be cleared from an event."""
        event = service.create_event("Gala", "2024-06-01")
        vendor = service.create_vendor("Hall", "Venue")
        service.assign_vendor(event.id.value, vendor.id.value)
        service.remove_vendor(vendor.id.value)
        service.unassign_vendor(event.id.value, vendor.id.value)
        assert service.assigned_vendors(event.id.value) == ()


class TestProjections:
    """Tests for the service-level projections."""

    def test_candidates_available_before_pending(self, service):
        """Candidates list Available vendors before Pending ones."""
        event = service.create_event("Gala", "2024-06-01")
        vendor_a = service.create_vendor("A", "Catering")
        vendor_b = service.create_vendor("B", "Catering")
        service.mark_vendor_available(vendor_a.id.value, "2024-06-01")

        groups = service.project_assignment_candidates(event.id.value)
        assert [c.vendor.id for c in groups[0].candidates] == [vendor_a.id, vendor_b.id]

    def test_candidates_for_unknown_event_raises_error(self, service):
        """Candidates for an unknown event raise EventNotFoundError."""
        with pytest.raises(EventNotFoundError):
            service.project_assignment_candidates(1)

    def test_calendar_reflects_live_stores(self, service):
        """The calendar shows current events and vendor availability."""
        service.create_event("Gala", "2024-06-01")
        vendor = service.create_vendor("Chef", "Catering")
        service.mark_vendor_available(vendor.id.value, "2024-06-01")

        month = service.project_calendar(2024, 6)
        first = month.days[0]
        assert [event.name for event in first.events] == ["Gala"]
        assert first.vendor_categories[0].category is VendorCategory.CATERING
        assert first.vendor_categories[0].count == 1

    @pytest.mark.parametrize("year, month", [(2024, 0), (2024, 13), (0, 1), (10000, 1)])
    def test_calendar_rejects_out_of_range(self, service, year, month):
        """Months outside 1..12 and years outside 1..9999 are rejected."""
        with pytest.raises(PlannerValidationError):
            service.project_calendar(year, month)


class TestEmailTemplate:
    """Tests for generate_email_template."""

    def test_template_embeds_name_and_category(self, service):
        """The email names the vendor and its category."""
        vendor = service.create_vendor("Chef Co", "Catering")
        body = service.generate_email_template(vendor.id.value)
        assert body.startswith("Dear Chef Co,\n\n")
        assert "provide your Catering services" in body
        assert body.endswith("Best regards,\nEvent Planner")

    def test_template_unknown_vendor_raises_error(self, service):
        """An unknown vendor raises VendorNotFoundError."""
        with pytest.raises(VendorNotFoundError):
            service.generate_email_template(1)
