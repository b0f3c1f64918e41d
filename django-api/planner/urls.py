from django.urls import path

from planner.handlers import (
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

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/vendors",
        EventVendorListView.as_view(),
        name="event-vendor-list",
    ),
    path(
        "events/<str:event_id>/vendors/<str:vendor_id>",
        EventVendorDetailView.as_view(),
        name="event-vendor-detail",
    ),
    path(
        "events/<str:event_id>/candidates",
        CandidateListView.as_view(),
        name="candidate-list",
    ),
    path("vendors", VendorListView.as_view(), name="vendor-list"),
    path("vendors/<str:vendor_id>", VendorDetailView.as_view(), name="vendor-detail"),
    path(
        "vendors/<str:vendor_id>/availability",
        VendorAvailabilityView.as_view(),
        name="vendor-availability",
    ),
    path(
        "vendors/<str:vendor_id>/email-template",
        VendorEmailTemplateView.as_view(),
        name="vendor-email-template",
    ),
    path("calendar", CalendarView.as_view(), name="calendar-current"),
    path("calendar/<int:year>/<int:month>", CalendarView.as_view(), name="calendar-month"),
]
