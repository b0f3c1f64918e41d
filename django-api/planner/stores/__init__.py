from planner.stores.interfaces import AssignmentIndex, EventStore, VendorStore
from planner.stores.memory_store import (
    InMemoryAssignmentIndex,
    InMemoryEventStore,
    InMemoryVendorStore,
)

__all__ = [
    "EventStore",
    "VendorStore",
    "AssignmentIndex",
    "InMemoryEventStore",
    "InMemoryVendorStore",
    "InMemoryAssignmentIndex",
]
