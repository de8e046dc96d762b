"""Unit tests for Event model."""
import pytest
from datetime import datetime

from src.models.event import Event
from src.models.person import Person


@pytest.fixture
def organizer():
    return Person("Org")


@pytest.fixture
def sample_event(organizer):
    """Create an unlimited event."""
    return Event(
        invitor=organizer,
        title="Launch",
        scheduled_at=datetime(2030, 12, 1, 18, 0)
    )


@pytest.fixture
def limited_event(organizer):
    """Create an event with two places."""
    return Event(
        invitor=organizer,
        title="Workshop",
        scheduled_at=datetime(2030, 12, 2, 9, 0),
        max_participators=2
    )


class TestEventValidation:
    """Test Event data validation."""

    def test_valid_event(self, sample_event, organizer):
        assert sample_event.title == "Launch"
        assert sample_event.invitor == organizer
        assert sample_event.participants == []
        assert sample_event.max_participators is None

    def test_missing_invitor_raises_error(self):
        with pytest.raises(ValueError, match="Invitor is required"):
            Event(invitor=None, title="Launch", scheduled_at=datetime(2030, 1, 1))

    def test_empty_title_raises_error(self, organizer):
        with pytest.raises(ValueError, match="Title cannot be empty"):
            Event(invitor=organizer, title="  ", scheduled_at=datetime(2030, 1, 1))

    def test_non_datetime_raises_error(self, organizer):
        with pytest.raises(ValueError, match="Date must be a datetime"):
            Event(invitor=organizer, title="Launch", scheduled_at="2030-01-01")

    @pytest.mark.parametrize("capacity", [0, -1, True, 2.5])
    def test_invalid_capacity_raises_error(self, organizer, capacity):
        with pytest.raises(ValueError, match="Capacity must be a positive integer"):
            Event(
                invitor=organizer,
                title="Launch",
                scheduled_at=datetime(2030, 1, 1),
                max_participators=capacity
            )

    def test_duplicate_participants_raise_error(self, organizer):
        with pytest.raises(ValueError, match="Participants must be unique"):
            Event(
                invitor=organizer,
                title="Launch",
                scheduled_at=datetime(2030, 1, 1),
                participants=[Person("Alice"), Person("Alice")]
            )

    def test_participants_over_capacity_raise_error(self, organizer):
        with pytest.raises(ValueError, match="cannot exceed capacity"):
            Event(
                invitor=organizer,
                title="Launch",
                scheduled_at=datetime(2030, 1, 1),
                max_participators=1,
                participants=[Person("Alice"), Person("Bob")]
            )


class TestEventCapacity:
    """Test limited and unlimited capacity helpers."""

    def test_unlimited_event(self, sample_event):
        assert sample_event.is_limited is False
        assert sample_event.is_full() is False
        assert sample_event.free_places() is None

    def test_limited_event_free_places(self, limited_event):
        assert limited_event.is_limited is True
        assert limited_event.free_places() == 2

        limited_event.add_participant(Person("Alice"))
        assert limited_event.free_places() == 1
        assert limited_event.is_full() is False

    def test_limited_event_full(self, limited_event):
        limited_event.add_participant(Person("Alice"))
        limited_event.add_participant(Person("Bob"))

        assert limited_event.is_full() is True
        assert limited_event.free_places() == 0


class TestEventParticipants:
    """Test participant helpers."""

    def test_add_and_remove(self, sample_event):
        alice = Person("Alice")
        sample_event.add_participant(alice)
        assert sample_event.has_participant(alice)

        sample_event.remove_participant(alice)
        assert not sample_event.has_participant(alice)

    def test_participant_names_in_order(self, sample_event):
        sample_event.add_participant(Person("Bob"))
        sample_event.add_participant(Person("Alice"))
        assert sample_event.participant_names() == ["Bob", "Alice"]

    def test_events_compare_by_identity(self, organizer):
        """Two events with equal fields are different events."""
        first = Event(invitor=organizer, title="Launch", scheduled_at=datetime(2030, 1, 1))
        second = Event(invitor=organizer, title="Launch", scheduled_at=datetime(2030, 1, 1))

        assert first != second
        assert first == first

    def test_repr_shows_capacity(self, limited_event):
        limited_event.add_participant(Person("Alice"))
        assert "participants=1/2" in repr(limited_event)
        assert "'Workshop'" in repr(limited_event)
