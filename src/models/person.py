"""Person data model."""
from dataclasses import dataclass

from src.utils.validation import validate_name


@dataclass(frozen=True)
class Person:
    """Someone who organizes or attends events. Equal when names are equal."""

    name: str

    def __post_init__(self):
        """Validate person data after initialization."""
        is_valid, error_msg = validate_name(self.name)
        if not is_valid:
            raise ValueError(error_msg)

    def __str__(self) -> str:
        return self.name
