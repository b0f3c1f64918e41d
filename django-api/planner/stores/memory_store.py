"""In-memory implementations of the planner stores.

State lives only for the lifetime of the process.
"""

import uuid

from planner.domain import Event, EventId, IdSequence, Vendor, VendorCategory, VendorId
from planner.stores.interfaces import AssignmentIndex, EventStore, VendorStore


class InMemoryEventStore(EventStore):
    """Insertion-ordered event collection."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}
        self._ids = IdSequence()
        self._namespace = f"planner:{uuid.uuid4().hex}"

    def add_event(self, name: str, date: str) -> Event:
        event = Event(id=EventId(self._ids.next()), name=name, date=date)
        self._events[event.id] = event
        return event

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._events

    @property
    def cache_namespace(self) -> str:
        return self._namespace


class InMemoryVendorStore(VendorStore):
    """Insertion-ordered vendor collection."""

    def __init__(self) -> None:
        self._vendors: dict[VendorId, Vendor] = {}
        self._ids = IdSequence()

    def add_vendor(self, name: str, category: VendorCategory) -> Vendor:
        vendor = Vendor(id=VendorId(self._ids.next()), name=name, category=category)
        self._vendors[vendor.id] = vendor
        return vendor

    def list_vendors(self) -> list[Vendor]:
        return list(self._vendors.values())

    def get_vendor(self, vendor_id: VendorId) -> Vendor | None:
        return self._vendors.get(vendor_id)

    def mark_available(self, vendor_id: VendorId, date: str) -> bool:
        vendor = self._vendors.get(vendor_id)
        if vendor is None or date in vendor.availability:
            return False
        vendor.availability.add(date)
        return True

    def remove_vendor(self, vendor_id: VendorId) -> bool:
        return self._vendors.pop(vendor_id, None) is not None


class InMemoryAssignmentIndex(AssignmentIndex):
    """Event id -> ordered, duplicate-free list of vendor ids."""

    def __init__(self) -> None:
        self._assignments: dict[EventId, list[VendorId]] = {}

    def init_event(self, event_id: EventId) -> None:
        self._assignments.setdefault(event_id, [])

    def vendors_for(self, event_id: EventId) -> list[VendorId]:
        return list(self._assignments.get(event_id, []))

    def assign(self, event_id: EventId, vendor_id: VendorId) -> bool:
        assigned = self._assignments.setdefault(event_id, [])
        if vendor_id in assigned:
            return False
        assigned.append(vendor_id)
        return True

    def unassign(self, event_id: EventId, vendor_id: VendorId) -> bool:
        assigned = self._assignments.get(event_id)
        if not assigned or vendor_id not in assigned:
            return False
        assigned.remove(vendor_id)
        return True
