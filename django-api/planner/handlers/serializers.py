"""Serializers for request bodies and for transforming domain models to API responses."""

from rest_framework import serializers

from planner.domain import VendorCategory


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    date = serializers.CharField()


class VendorSerializer(serializers.Serializer):
    """Serializer for Vendor domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    category = serializers.CharField(source="category.value")
    availability = serializers.SerializerMethodField()

    def get_availability(self, vendor) -> list[str]:
        return sorted(vendor.availability)


class VendorStatusSerializer(serializers.Serializer):
    """Serializer for a vendor paired with its status on an event date.

    Used for both AssignedVendor and Candidate.
    """

    id = serializers.IntegerField(source="vendor.id.value")
    name = serializers.CharField(source="vendor.name")
    category = serializers.CharField(source="vendor.category.value")
    status = serializers.CharField(source="status.value")


class CandidateGroupSerializer(serializers.Serializer):
    category = serializers.CharField(source="category.value")
    candidates = VendorStatusSerializer(many=True)


class CategoryCountSerializer(serializers.Serializer):
    category = serializers.CharField(source="category.value")
    count = serializers.IntegerField()


class CalendarDaySerializer(serializers.Serializer):
    day = serializers.IntegerField()
    date = serializers.CharField()
    events = EventSerializer(many=True)
    vendor_categories = CategoryCountSerializer(many=True)


class CalendarMonthSerializer(serializers.Serializer):
    """Serializer for a projected month grid."""

    year = serializers.IntegerField()
    month = serializers.IntegerField()
    label = serializers.CharField()
    leading_blanks = serializers.IntegerField()
    days = CalendarDaySerializer(many=True)
    previous = serializers.SerializerMethodField()
    next = serializers.SerializerMethodField()

    def get_previous(self, calendar_month) -> dict | None:
        return _month_link(calendar_month.previous())

    def get_next(self, calendar_month) -> dict | None:
        return _month_link(calendar_month.next())


def _month_link(year_month: tuple[int, int] | None) -> dict | None:
    if year_month is None:
        return None
    year, month = year_month
    return {"year": year, "month": month}


class EventCreateSerializer(serializers.Serializer):
    """Request body for creating an event."""

    name = serializers.CharField(max_length=255)
    date = serializers.CharField(max_length=10)


class VendorCreateSerializer(serializers.Serializer):
    """Request body for creating a vendor."""

    name = serializers.CharField(max_length=255)
    category = serializers.ChoiceField(choices=[category.value for category in VendorCategory])


class AvailabilitySerializer(serializers.Serializer):
    date = serializers.CharField(max_length=10)


class AssignmentSerializer(serializers.Serializer):
    vendor_id = serializers.IntegerField(min_value=1)
