from planner.domain.models import (
    AssignedVendor,
    AvailabilityStatus,
    Event,
    Vendor,
    VendorCategory,
)
from planner.domain.value_objects import CalendarDate, EventId, IdSequence, VendorId

__all__ = [
    "Event",
    "Vendor",
    "AssignedVendor",
    "VendorCategory",
    "AvailabilityStatus",
    "EventId",
    "VendorId",
    "CalendarDate",
    "IdSequence",
]
