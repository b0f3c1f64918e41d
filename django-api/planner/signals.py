"""Django signals for cache invalidation."""

import logging

from django.dispatch import Signal, receiver

from planner.cache import invalidate_events_by_date

logger = logging.getLogger(__name__)

# Sent with store=<EventStore>, event=<Event> after an event is created.
event_created = Signal()


@receiver(event_created)
def invalidate_events_by_date_cache(sender, store, event, **kwargs):
    """Drop the date -> events grouping when the event collection grows."""
    invalidate_events_by_date(store)
    logger.debug("Invalidated events-by-date cache after creating event %s", event.id.value)
