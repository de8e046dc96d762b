"""Registry service: owns all events and handles registrations."""
import logging
from collections import Counter
from datetime import datetime
from threading import RLock
from typing import Callable, List, Optional

from src.models.event import Event
from src.models.person import Person
from src.utils.date_utils import sort_by_datetime
from src.utils.validation import (
    validate_event_datetime,
    validate_title,
)

logger = logging.getLogger(__name__)


class Registry:
    """
    Single source of truth for events.

    Every operation reports rejection through its return value (False, None
    or an empty list) and never raises for bad input. All operations hold one
    re-entrant lock, so cross-event queries see a consistent snapshot.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Args:
            clock: Returns the current time; used to reject past dates
        """
        self._events: List[Event] = []
        self._clock = clock
        self._lock = RLock()

    @property
    def events_count(self) -> int:
        """Number of stored events."""
        with self._lock:
            return len(self._events)

    def get_all_events(self) -> List[Event]:
        """All stored events in creation order."""
        with self._lock:
            return list(self._events)

    def _is_stored(self, event: Event) -> bool:
        return any(item is event for item in self._events)

    def _find(self, title: str) -> Optional[Event]:
        for item in self._events:
            if item.title == title:
                return item
        return None

    def create_event(
        self,
        invitor: Person,
        title: str,
        date_time: datetime,
        max_participators: int = 0
    ) -> bool:
        """
        Create an event for the invitor.

        Args:
            invitor: Organizing person
            title: Title, unique across the registry (case-sensitive)
            date_time: Scheduled date/time, strictly in the future
            max_participators: Capacity; > 0 creates a limited event,
                anything else an unlimited one

        Returns:
            True if the event was created, False otherwise (no change)
        """
        if not isinstance(invitor, Person):
            logger.info(f"Event {title!r} rejected: invitor is required")
            return False

        is_valid, error_msg = validate_title(title)
        if not is_valid:
            logger.info(f"Event rejected: {error_msg}")
            return False

        if isinstance(max_participators, bool) or not isinstance(max_participators, int):
            logger.info(f"Event {title!r} rejected: capacity must be an integer")
            return False
        capacity = max_participators if max_participators > 0 else None

        with self._lock:
            is_valid, error_msg = validate_event_datetime(date_time, self._clock())
            if not is_valid:
                logger.info(f"Event {title!r} rejected: {error_msg}")
                return False

            if self._find(title) is not None:
                logger.info(f"Event {title!r} rejected: title already exists")
                return False

            event = Event(
                invitor=invitor,
                title=title,
                scheduled_at=date_time,
                max_participators=capacity
            )
            self._events.append(event)

        logger.debug(f"Created {event!r}")
        return True

    def get_event(self, title: str) -> Optional[Event]:
        """
        Get event by exact title.

        Returns:
            Event if found, None otherwise
        """
        with self._lock:
            return self._find(title)

    def register_person_for_event(self, person: Person, event: Event) -> bool:
        """
        Register a person for an event; a person registers at most once.

        Returns:
            True on success. False if either argument is missing, the event
            is not in this registry, the person is already registered, or a
            limited event is full.
        """
        if not isinstance(person, Person) or not isinstance(event, Event):
            return False

        with self._lock:
            if not self._is_stored(event):
                logger.info(f"Registration of {person} rejected: unknown event {event.title!r}")
                return False

            if event.has_participant(person):
                logger.info(f"Registration of {person} rejected: already registered for {event.title!r}")
                return False

            if event.is_full():
                logger.info(f"Registration of {person} rejected: {event.title!r} is full")
                return False

            event.add_participant(person)

        logger.debug(f"Registered {person} for {event.title!r}")
        return True

    def unregister_person_for_event(self, person: Person, event: Event) -> bool:
        """
        Remove a person's registration.

        Returns:
            True if the person was registered and has been removed,
            False otherwise (no change)
        """
        if not isinstance(person, Person) or not isinstance(event, Event):
            return False

        with self._lock:
            if not self._is_stored(event):
                logger.info(f"Unregistration of {person} rejected: unknown event {event.title!r}")
                return False

            if not event.has_participant(person):
                logger.info(f"Unregistration of {person} rejected: not registered for {event.title!r}")
                return False

            event.remove_participant(person)

        logger.debug(f"Unregistered {person} from {event.title!r}")
        return True

    def get_participators_for_event(self, event: Event) -> Optional[List[Person]]:
        """
        Get the participants of an event.

        Sorted descending by each person's number of registrations across
        the registry, then ascending by name.

        Returns:
            List of participants, [] if the event is unknown or empty,
            None if event is None
        """
        if event is None:
            return None

        with self._lock:
            if not self._is_stored(event):
                return []

            counts = Counter(
                person for item in self._events for person in item.participants
            )
            return sorted(
                event.participants,
                key=lambda person: (-counts[person], person.name)
            )

    def get_events_for_person(self, person: Person) -> Optional[List[Event]]:
        """
        Get all events a person is registered for, ascending by date.

        Returns:
            List of events, None if person is None
        """
        if person is None:
            return None

        with self._lock:
            events = [item for item in self._events if item.has_participant(person)]
        return sort_by_datetime(events, key=lambda item: item.scheduled_at)

    def count_events_for_person(self, person: Person) -> int:
        """
        Count the events a person is registered for.

        Returns:
            Number of events, 0 if person is None
        """
        with self._lock:
            events = self.get_events_for_person(person)
        return len(events) if events is not None else 0
