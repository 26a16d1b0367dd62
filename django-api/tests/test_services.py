"""Unit tests for EventAggregateManager and AdminSession.

These test cascade rules, edition ownership and status notifications.
Run with: pytest tests/test_services.py -v
"""

import datetime
import json

import pytest

from catalog.domain.errors import (
    AccessDeniedError,
    EditionNotFoundError,
    EventNotFoundError,
    InvalidPatchError,
)
from catalog.domain.value_objects import IdGenerator
from catalog.services import EventAggregateManager, PaperRepository, build_catalog
from catalog.signals import status_reported


class TestEvents:
    """Tests for event lifecycle."""

    def test_create_event_starts_without_editions(self, events):
        event = events.create_event({"name": "ICML", "category": "ML"})
        assert event.editions == ()
        assert event.description == ""
        assert events.list_events() == [event]

    def test_update_event_keeps_editions(self, events):
        event = events.create_event({"name": "ICML"})
        edition = events.create_edition(event.id, {"year": 2024})
        updated = events.update_event(event.id, {"category": "ML"})
        assert updated.name == "ICML"
        assert updated.editions == (edition,)

    def test_editions_cannot_be_patched_through_event(self, events):
        event = events.create_event({"name": "ICML"})
        with pytest.raises(InvalidPatchError):
            events.update_event(event.id, {"editions": []})

    def test_get_missing_event_raises(self, events):
        with pytest.raises(EventNotFoundError):
            events.get_event("missing")


class TestCascade:
    """Tests for cascade deletion."""

    def test_scenario_icml(self, store, events):
        """Create an event and edition, delete the event: nothing survives."""
        e1 = events.create_event({"name": "ICML", "category": "ML"})
        x1 = events.create_edition(
            e1.id, {"year": 2024, "location": "Vienna", "date": "2024-07-20"}
        )
        assert events.get_event(e1.id).editions == (x1,)
        assert x1.date == datetime.date(2024, 7, 20)

        assert events.delete_event(e1.id) is True

        assert EventAggregateManager(store).load_all() == []
        assert x1.id not in store.read("events").decode()

    def test_delete_event_keeps_other_events_editions(self, store, events):
        doomed = events.create_event({"name": "A"})
        kept = events.create_event({"name": "B"})
        events.create_edition(doomed.id, {"year": 2020})
        events.create_edition(doomed.id, {"year": 2021})
        survivor = events.create_edition(kept.id, {"year": 2022})

        events.delete_event(doomed.id)

        stored = json.loads(store.read("events"))
        assert [record["id"] for record in stored] == [kept.id]
        assert [ed["id"] for ed in stored[0]["editions"]] == [survivor.id]
        assert all(
            ed["eventId"] != doomed.id for record in stored for ed in record["editions"]
        )

    def test_delete_missing_event_is_noop(self, store, events):
        event = events.create_event({"name": "A"})
        before = store.read("events")
        assert events.delete_event("missing") is False
        assert store.read("events") == before
        assert events.list_events() == [event]


class TestEditions:
    """Tests for edition lifecycle."""

    def test_create_edition_for_missing_event_raises(self, store, events):
        """No edition can exist without its event; nothing is written."""
        with pytest.raises(EventNotFoundError):
            events.create_edition("missing", {"year": 2024})
        assert store.read("events") is None

    def test_create_edition_stamps_event_id(self, events):
        event = events.create_event({"name": "ICML"})
        edition = events.create_edition(event.id, {"location": "Vienna"})
        assert edition.event_id == event.id
        assert edition.date is None

    def test_edition_ids_unique_across_events(self, events):
        a = events.create_event({"name": "A"})
        b = events.create_event({"name": "B"})
        ids = [events.create_edition(event.id, {}).id for event in (a, b, a, b)]
        assert len(set(ids)) == 4

    def test_duplicate_year_and_location_permitted(self, events):
        event = events.create_event({"name": "ICML"})
        first = events.create_edition(event.id, {"year": 2024, "location": "Vienna"})
        second = events.create_edition(event.id, {"year": 2024, "location": "Vienna"})
        assert first.id != second.id
        assert events.list_editions(event.id) == [first, second]

    def test_update_edition_in_place(self, events):
        """Only the given field changes and sibling order is preserved."""
        event = events.create_event({"name": "ICML"})
        first = events.create_edition(event.id, {"year": 2023, "location": "Honolulu"})
        second = events.create_edition(event.id, {"year": 2024, "location": "Vienna"})

        updated = events.update_edition(event.id, first.id, {"location": "Hawaii"})

        assert updated.year == 2023
        assert events.list_editions(event.id) == [updated, second]

    def test_update_edition_missing_ids(self, events):
        event = events.create_event({"name": "ICML"})
        with pytest.raises(EventNotFoundError):
            events.update_edition("missing", "x", {"year": 2020})
        with pytest.raises(EditionNotFoundError):
            events.update_edition(event.id, "x", {"year": 2020})

    def test_update_edition_rejects_event_id(self, events):
        event = events.create_event({"name": "ICML"})
        edition = events.create_edition(event.id, {})
        with pytest.raises(InvalidPatchError):
            events.update_edition(event.id, edition.id, {"eventId": "other"})

    def test_delete_edition(self, events):
        event = events.create_event({"name": "ICML"})
        first = events.create_edition(event.id, {"year": 2023})
        second = events.create_edition(event.id, {"year": 2024})
        assert events.delete_edition(event.id, first.id) is True
        assert events.list_editions(event.id) == [second]

    def test_delete_edition_missing_is_noop(self, events):
        event = events.create_event({"name": "ICML"})
        edition = events.create_edition(event.id, {})
        assert events.delete_edition(event.id, "missing") is False
        assert events.delete_edition("missing", edition.id) is False
        assert events.list_editions(event.id) == [edition]

    def test_round_trip_after_restart(self, store, events):
        a = events.create_event({"name": "A"})
        events.create_edition(a.id, {"year": 2020, "date": "2020-06-01"})
        b = events.create_event({"name": "B"})
        events.create_edition(b.id, {"location": "Paris"})
        events.update_event(a.id, {"description": "First"})
        before = events.list_events()

        assert EventAggregateManager(store).load_all() == before


class TestSharedStore:
    """Tests for two managers writing to one store in turn."""

    @pytest.fixture
    def other(self, store, clock) -> EventAggregateManager:
        return EventAggregateManager(store, ids=IdGenerator(clock=clock))

    def test_editions_from_both_managers_persist(self, store, events, other):
        event = events.create_event({"name": "ICML"})
        other.list_events()
        first = events.create_edition(event.id, {"year": 2023})

        second = other.create_edition(event.id, {"year": 2024})

        assert first.id != second.id
        assert EventAggregateManager(store).list_editions(event.id) == [first, second]

    def test_event_update_keeps_editions_added_elsewhere(self, store, events, other):
        event = events.create_event({"name": "ICML"})
        other.list_events()
        edition = events.create_edition(event.id, {"year": 2024})

        other.update_event(event.id, {"category": "ML"})

        stored = EventAggregateManager(store).get_event(event.id)
        assert stored.category == "ML"
        assert stored.editions == (edition,)

    def test_cascade_covers_editions_added_elsewhere(self, store, events, other):
        event = events.create_event({"name": "ICML"})
        other.list_events()
        events.create_edition(event.id, {"year": 2024})

        assert other.delete_event(event.id) is True

        assert json.loads(store.read("events")) == []


class TestAdminSession:
    """Tests for the authorization gate and status notifications."""

    @pytest.fixture
    def statuses(self):
        received = []

        def listener(sender, message, ok, **kwargs):
            received.append((message, ok))

        status_reported.connect(listener)
        yield received
        status_reported.disconnect(listener)

    @pytest.fixture
    def session(self, store, ids):
        return build_catalog(store, ids=ids).open_session(authorized=True)

    def test_unauthorized_session_is_refused(self, store, statuses):
        with pytest.raises(AccessDeniedError):
            build_catalog(store).open_session(authorized=False)
        assert statuses == [("Access denied. Admin privileges required.", False)]

    def test_success_is_reported(self, session, statuses):
        event = session.create_event({"name": "ICML"})
        session.create_edition(event.id, {"year": 2024})
        session.delete_event(event.id)
        assert statuses == [
            ("Event created successfully", True),
            ("Edition created successfully", True),
            ("Event deleted successfully", True),
        ]

    def test_failure_is_reported_and_raised(self, session, statuses):
        with pytest.raises(EditionNotFoundError):
            session.update_edition(session.create_event({}).id, "missing", {"year": 2020})
        assert statuses[-1] == ("Edition could not be updated: Edition not found", False)

    def test_unexpected_failure_is_reported_and_raised(self, session, statuses, monkeypatch):
        def broken_create(fields):
            raise RuntimeError("cache backend down")

        monkeypatch.setattr(session.papers, "create", broken_create)

        with pytest.raises(RuntimeError):
            session.create_paper({"title": "X"})
        assert statuses == [("Paper could not be created: unexpected error", False)]

    def test_failing_receiver_does_not_break_operation(self, session):
        def broken(sender, **kwargs):
            raise RuntimeError("sink down")

        status_reported.connect(broken)
        try:
            paper = session.create_paper({"title": "X"})
        finally:
            status_reported.disconnect(broken)
        assert session.get_paper(paper.id) == paper

    def test_paper_scenario(self, store, session):
        """Create, partially update and delete a paper."""
        p1 = session.create_paper({"title": "X", "year": 2020})
        updated = session.update_paper(p1.id, {"year": 2021})
        assert (updated.title, updated.year) == ("X", 2021)

        session.delete_paper(p1.id)

        assert PaperRepository(store).load_all() == []
        assert session.list_papers() == []

    def test_deleting_unknown_ids_succeeds(self, session, statuses):
        session.delete_paper("missing")
        session.delete_event("missing")
        session.delete_edition("missing", "missing")
        assert all(ok for _message, ok in statuses)
