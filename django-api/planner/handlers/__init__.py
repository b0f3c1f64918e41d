from planner.handlers.views import (
    CalendarView,
    CandidateListView,
    EventDetailView,
    EventListView,
    EventVendorDetailView,
    EventVendorListView,
    VendorAvailabilityView,
    VendorDetailView,
    VendorEmailTemplateView,
    VendorListView,
)

__all__ = [
    "CalendarView",
    "CandidateListView",
    "EventDetailView",
    "EventListView",
    "EventVendorDetailView",
    "EventVendorListView",
    "VendorAvailabilityView",
    "VendorDetailView",
    "VendorEmailTemplateView",
    "VendorListView",
]
