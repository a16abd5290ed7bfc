"""Unit tests for InMemoryEventStore."""

import datetime

import pytest

from booking.domain import Event
from booking.domain.errors import EventNotFoundError

DAY = datetime.date(2026, 11, 14)


class TestEventSearch:
    """Tests for title and day search."""

    def test_scenario_jazz_pagination(self, make_event, event_store):
        """Title search pages through matches in store order."""
        make_event("Jazz Night", DAY)
        make_event("Opera", DAY)
        make_event("Jazz Brunch", DAY)
        make_event("Late Jazz", DAY)

        first = event_store.find_by_title("Jazz", 2, 1)
        second = event_store.find_by_title("Jazz", 2, 2)

        assert [e.title for e in first] == ["Jazz Night", "Jazz Brunch"]
        assert [e.title for e in second] == ["Late Jazz"]

    def test_find_by_title_no_match(self, make_event, event_store):
        """find_by_title returns an empty list when nothing matches."""
        make_event("Opera", DAY)
        assert event_store.find_by_title("Jazz", 10, 1) == []

    def test_find_for_day_exact_date(self, make_event, event_store):
        """find_for_day returns only events on that exact day."""
        make_event("Jazz Night", DAY)
        make_event("Opera", DAY + datetime.timedelta(days=1))
        make_event("Undated", None)

        events = event_store.find_for_day(DAY, 10, 1)

        assert [e.title for e in events] == ["Jazz Night"]

    def test_find_for_day_pages(self, make_event, event_store):
        """find_for_day applies pagination."""
        for i in range(3):
            make_event(f"Show {i}", DAY)
        assert [e.title for e in event_store.find_for_day(DAY, 2, 2)] == ["Show 2"]


class TestEventUpdate:
    """Tests for create, update and delete."""

    def test_update_overwrites_provided_fields(self, make_event, event_store):
        """update overwrites title and date on the stored instance."""
        event = make_event("Jazz Night", DAY)
        later = DAY + datetime.timedelta(days=7)

        updated = event_store.update(Event(id=event.id, title="Jazz Evening", date=later))

        assert updated is event
        assert (updated.title, updated.date) == ("Jazz Evening", later)

    def test_update_keeps_missing_fields(self, make_event, event_store):
        """update leaves fields alone when title is empty and date is None."""
        event = make_event("Jazz Night", DAY)
        updated = event_store.update(Event(id=event.id, title="", date=None))
        assert (updated.title, updated.date) == ("Jazz Night", DAY)

    def test_update_unknown_id(self, event_store):
        """update raises EventNotFoundError for an unknown id."""
        with pytest.raises(EventNotFoundError):
            event_store.update(Event(id=42, title="Ghost", date=DAY))

    def test_delete(self, make_event, event_store):
        """delete removes the event and reports False on repeat."""
        event = make_event("Jazz Night", DAY)
        assert event_store.delete(event.id) is True
        assert event_store.get(event.id) is None
        assert event_store.delete(event.id) is False
