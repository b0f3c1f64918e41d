"""Vendor inquiry email text."""

from planner.domain import Vendor

SIGNATURE = "Event Planner"


def render_vendor_email(vendor: Vendor) -> str:
    return (
        f"Dear {vendor.name},\n\n"
        "I hope this email finds you well. We are organizing an event and "
        "would like to inquire about your availability.\n\n"
        "Please let us know if you would be available to provide your "
        f"{vendor.category.value} services for our event.\n\n"
        f"Best regards,\n{SIGNATURE}"
    )
