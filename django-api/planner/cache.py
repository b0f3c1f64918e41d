"""Cache access for the memoized date -> events grouping.

The grouping is stored under a key scoped to the owning EventStore and is
dropped whenever an event is created (see planner/signals.py).
"""

import logging

from django.core.cache import cache

from planner.domain import Event
from planner.services.projections import group_events_by_date
from planner.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def events_by_date_key(store: EventStore) -> str:
    return f"{store.cache_namespace}:events:by_date"


def get_events_by_date(store: EventStore) -> dict[str, list[Event]]:
    key = events_by_date_key(store)
    grouped = cache.get(key)
    if grouped is None:
        logger.debug("Rebuilding events-by-date grouping for %s", key)
        grouped = group_events_by_date(store.list_events())
        cache.set(key, grouped, timeout=None)
    return grouped


def invalidate_events_by_date(store: EventStore) -> None:
    cache.delete(events_by_date_key(store))
