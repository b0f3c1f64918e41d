"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from datetime import date

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from planner.domain import VendorId
from planner.domain.errors import DomainError, ErrorCode
from planner.handlers.serializers import (
    AssignmentSerializer,
    AvailabilitySerializer,
    CalendarMonthSerializer,
    CandidateGroupSerializer,
    EventCreateSerializer,
    EventSerializer,
    VendorCreateSerializer,
    VendorSerializer,
    VendorStatusSerializer,
)
from planner.services.planner_service import PlannerService

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VENDOR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_VENDOR_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


def get_planner_service() -> PlannerService:
    return apps.get_app_config("planner").service


def error_response(code: ErrorCode, message: str, **extra) -> Response:
    body = {"error": {"code": code.value, "message": message, **extra}}
    return Response(body, status=_STATUS_BY_CODE[code])


class PlannerAPIView(APIView):
    """Base view mapping domain errors to error responses."""

    @property
    def service(self) -> PlannerService:
        return get_planner_service()

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            logger.debug("Request failed with %s", exc)
            return error_response(exc.code, exc.message)
        return super().handle_exception(exc)

    def parse_body(self, serializer_class, request: Request):
        """Validate the request body, returning (data, error_response)."""
        serializer = serializer_class(data=request.data)
        if not serializer.is_valid():
            return None, error_response(
                ErrorCode.VALIDATION_ERROR,
                "Invalid request body",
                fields=serializer.errors,
            )
        return serializer.validated_data, None


class EventListView(PlannerAPIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = self.service.list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        data, error = self.parse_body(EventCreateSerializer, request)
        if error:
            return error
        event = self.service.create_event(name=data["name"], date=data["date"])
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(PlannerAPIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.service.get_event(event_id)
        return Response(EventSerializer(event).data)


class EventVendorListView(PlannerAPIView):
    """Handler for GET/POST /api/events/{event_id}/vendors"""

    def get(self, request: Request, event_id: str) -> Response:
        assigned = self.service.assigned_vendors(event_id)
        return Response(VendorStatusSerializer(assigned, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        data, error = self.parse_body(AssignmentSerializer, request)
        if error:
            return error
        self.service.assign_vendor(event_id, data["vendor_id"])
        assigned = self.service.assigned_vendors(event_id)
        return Response(VendorStatusSerializer(assigned, many=True).data)


class EventVendorDetailView(PlannerAPIView):
    """Handler for DELETE /api/events/{event_id}/vendors/{vendor_id}"""

    def delete(self, request: Request, event_id: str, vendor_id: str) -> Response:
        self.service.unassign_vendor(event_id, vendor_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CandidateListView(PlannerAPIView):
    """Handler for GET /api/events/{event_id}/candidates"""

    def get(self, request: Request, event_id: str) -> Response:
        groups = self.service.project_assignment_candidates(event_id)
        return Response(CandidateGroupSerializer(groups, many=True).data)


class VendorListView(PlannerAPIView):
    """Handler for GET/POST /api/vendors"""

    def get(self, request: Request) -> Response:
        vendors = self.service.list_vendors()
        return Response(VendorSerializer(vendors, many=True).data)

    def post(self, request: Request) -> Response:
        data, error = self.parse_body(VendorCreateSerializer, request)
        if error:
            return error
        vendor = self.service.create_vendor(name=data["name"], category=data["category"])
        return Response(VendorSerializer(vendor).data, status=status.HTTP_201_CREATED)


class VendorDetailView(PlannerAPIView):
    """Handler for GET/DELETE /api/vendors/{vendor_id}"""

    def get(self, request: Request, vendor_id: str) -> Response:
        vendor = self.service.get_vendor(vendor_id)
        return Response(VendorSerializer(vendor).data)

    def delete(self, request: Request, vendor_id: str) -> Response:
        self.service.remove_vendor(vendor_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class VendorAvailabilityView(PlannerAPIView):
    """Handler for POST /api/vendors/{vendor_id}/availability"""

    def post(self, request: Request, vendor_id: str) -> Response:
        data, error = self.parse_body(AvailabilitySerializer, request)
        if error:
            return error
        vendor = self.service.mark_vendor_available(vendor_id, data["date"])
        return Response(VendorSerializer(vendor).data)


class VendorEmailTemplateView(PlannerAPIView):
    """Handler for GET /api/vendors/{vendor_id}/email-template"""

    def get(self, request: Request, vendor_id: str) -> Response:
        body = self.service.generate_email_template(vendor_id)
        return Response({"vendor_id": VendorId.from_string(vendor_id).value, "body": body})


class CalendarView(PlannerAPIView):
    """Handler for GET /api/calendar and /api/calendar/{year}/{month}"""

    def get(self, request: Request, year: int | None = None, month: int | None = None) -> Response:
        if year is None or month is None:
            today = date.today()
            year, month = today.year, today.month
        calendar_month = self.service.project_calendar(year, month)
        return Response(CalendarMonthSerializer(calendar_month).data)
