"""Event data model."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from src.models.person import Person
from src.utils.validation import validate_capacity, validate_title


@dataclass(eq=False)
class Event:
    """
    Scheduled gathering with registration information.

    An event with max_participators set is a limited event; None means
    unlimited. Events compare by identity.
    """

    invitor: Person
    title: str
    scheduled_at: datetime
    max_participators: Optional[int] = None
    participants: List[Person] = field(default_factory=list)

    def __post_init__(self):
        """Validate event data after initialization."""
        if self.invitor is None:
            raise ValueError("Invitor is required")

        is_valid, error_msg = validate_title(self.title)
        if not is_valid:
            raise ValueError(error_msg)

        if not isinstance(self.scheduled_at, datetime):
            raise ValueError("Date must be a datetime")

        is_valid, error_msg = validate_capacity(self.max_participators)
        if not is_valid:
            raise ValueError(error_msg)

        if len(set(self.participants)) != len(self.participants):
            raise ValueError("Participants must be unique")

        if self.is_limited and len(self.participants) > self.max_participators:
            raise ValueError(
                f"Participants count ({len(self.participants)}) cannot exceed "
                f"capacity ({self.max_participators})"
            )

    @property
    def is_limited(self) -> bool:
        """True if the event caps its participants."""
        return self.max_participators is not None

    def is_full(self) -> bool:
        """Check if a limited event is at capacity."""
        return self.is_limited and len(self.participants) >= self.max_participators

    def free_places(self) -> Optional[int]:
        """Remaining places, or None for unlimited events."""
        if not self.is_limited:
            return None
        return max(self.max_participators - len(self.participants), 0)

    def has_participant(self, person: Person) -> bool:
        return person in self.participants

    def add_participant(self, person: Person) -> None:
        """
        Append a participant.

        Callers check has_participant() and is_full() first; the Registry
        is the only caller that mutates participants.
        """
        self.participants.append(person)

    def remove_participant(self, person: Person) -> None:
        self.participants.remove(person)

    def participant_names(self) -> List[str]:
        """
        Get participant names in registration order.

        Returns:
            List of names (ordered by registration time)
        """
        return [p.name for p in self.participants]

    def __repr__(self) -> str:
        count = str(len(self.participants))
        if self.is_limited:
            count = f"{count}/{self.max_participators}"
        return (
            f"Event(title={self.title!r}, scheduled_at={self.scheduled_at.isoformat()}, "
            f"invitor={self.invitor.name!r}, participants={count})"
        )
