"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from django.core.cache import cache

from planner.cache import events_by_date_key, get_events_by_date
from planner.signals import event_created
from planner.stores import InMemoryEventStore


class TestEventsByDateCache:
    """Tests for the memoized date -> events grouping."""

    def test_grouping_is_cached_after_first_read(self):
        """Reading the grouping stores it under the store's cache key."""
        store = InMemoryEventStore()
        store.add_event("Gala", "2024-06-01")
        assert cache.get(events_by_date_key(store)) is None

        get_events_by_date(store)

        cached = cache.get(events_by_date_key(store))
        assert [event.name for event in cached["2024-06-01"]] == ["Gala"]

    def test_event_created_signal_invalidates_grouping(self):
        """Sending event_created deletes the cached grouping."""
        store = InMemoryEventStore()
        event = store.add_event("Gala", "2024-06-01")
        get_events_by_date(store)

        event_created.send(sender=None, store=store, event=event)

        assert cache.get(events_by_date_key(store)) is None

    def test_create_event_invalidates_grouping(self, service):
        """The calendar shows events created after a cached read."""
        service.create_event("Gala", "2024-06-01")
        service.project_calendar(2024, 6)

        service.create_event("Launch", "2024-06-01")
        month = service.project_calendar(2024, 6)

        assert [event.name for event in month.days[0].events] == ["Gala", "Launch"]

    def test_stores_do_not_share_groupings(self):
        """One store's cached grouping is never served for another."""
        first = InMemoryEventStore()
        second = InMemoryEventStore()
        first.add_event("Gala", "2024-06-01")

        get_events_by_date(first)

        assert get_events_by_date(second) == {}
