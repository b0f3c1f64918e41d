"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every operation is
total: unknown ids yield None or are ignored rather than raising.
"""

from abc import ABC, abstractmethod

from planner.domain import Event, EventId, Vendor, VendorCategory, VendorId


class EventStore(ABC):
    """Interface for event collection operations."""

    @abstractmethod
    def add_event(self, name: str, date: str) -> Event:
        """Create an event with a fresh id and append it."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @property
    @abstractmethod
    def cache_namespace(self) -> str:
        """Key prefix for caches derived from this store's contents."""
        ...


class VendorStore(ABC):
    """Interface for vendor collection operations."""

    @abstractmethod
    def add_vendor(self, name: str, category: VendorCategory) -> Vendor:
        """Create a vendor with a fresh id and empty availability."""
        ...

    @abstractmethod
    def list_vendors(self) -> list[Vendor]:
        """Return all vendors in creation order."""
        ...

    @abstractmethod
    def get_vendor(self, vendor_id: VendorId) -> Vendor | None:
        """Return a vendor by ID, or None if not found."""
        ...

    @abstractmethod
    def mark_available(self, vendor_id: VendorId, date: str) -> bool:
        """Add a date to a vendor's availability.

        Returns True only when the date was newly added.
        """
        ...

    @abstractmethod
    def remove_vendor(self, vendor_id: VendorId) -> bool:
        """Remove a vendor. Assignment lists are left untouched."""
        ...


class AssignmentIndex(ABC):
    """Interface for the event -> assigned vendors relation."""

    @abstractmethod
    def init_event(self, event_id: EventId) -> None:
        """Start an empty assignment list for an event."""
        ...

    @abstractmethod
    def vendors_for(self, event_id: EventId) -> list[VendorId]:
        """Return the ordered vendor ids assigned to an event."""
        ...

    @abstractmethod
    def assign(self, event_id: EventId, vendor_id: VendorId) -> bool:
        """Append a vendor unless already present. Returns True if appended."""
        ...

    @abstractmethod
    def unassign(self, event_id: EventId, vendor_id: VendorId) -> bool:
        """Remove a vendor if present. Returns True if removed."""
        ...
