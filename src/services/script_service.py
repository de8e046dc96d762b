"""Command-script execution against a Registry."""
import logging
import shlex
from dataclasses import dataclass
from typing import Dict, Iterable, List

from src.models.person import Person
from src.services.registry import Registry
from src.utils.date_utils import format_datetime, parse_datetime

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

# command name -> accepted argument counts
COMMANDS: Dict[str, tuple] = {
    "create": (3, 4),
    "register": (2,),
    "unregister": (2,),
    "participants": (1,),
    "events": (1,),
    "count": (1,),
}


class ScriptError(ValueError):
    """Raised when a script line cannot be parsed."""
    pass


@dataclass
class Command:
    """One parsed script line."""

    name: str
    args: List[str]
    line_number: int = 0


def parse_line(line: str, line_number: int = 0) -> Command:
    """
    Parse one script line.

    Args:
        line: Raw line, e.g. 'create Org "Launch Party" "2026-12-01 18:00" 20'
        line_number: 1-based position in the script, for messages

    Returns:
        Command

    Raises:
        ScriptError: If quoting is broken, the command is unknown or the
            argument count is wrong
    """
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as e:
        raise ScriptError(f"line {line_number}: {e}") from e

    if not tokens:
        raise ScriptError(f"line {line_number}: empty command")

    name, args = tokens[0].lower(), tokens[1:]
    if name not in COMMANDS:
        raise ScriptError(f"line {line_number}: unknown command {tokens[0]!r}")

    if len(args) not in COMMANDS[name]:
        expected = " or ".join(str(n) for n in COMMANDS[name])
        raise ScriptError(
            f"line {line_number}: {name} expects {expected} arguments, got {len(args)}"
        )
    return Command(name=name, args=args, line_number=line_number)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


class ScriptRunner:
    """
    Executes script commands against one Registry.

    Persons are interned by name, so every mention of "Alice" refers to the
    same Person instance.
    """

    def __init__(self, registry: Registry):
        self.registry = registry
        self._people: Dict[str, Person] = {}

    def person(self, name: str) -> Person:
        """
        Get or create the Person with this name.

        Raises:
            ScriptError: If the name is invalid
        """
        if name not in self._people:
            try:
                self._people[name] = Person(name)
            except ValueError as e:
                raise ScriptError(str(e)) from e
        return self._people[name]

    def execute(self, command: Command) -> str:
        """
        Run one command.

        Returns:
            Result line: "true"/"false", comma-separated names or titles,
            or an integer for count

        Raises:
            ScriptError: If an argument cannot be converted
        """
        handler = getattr(self, f"_do_{command.name}")
        try:
            return handler(*command.args)
        except ScriptError as e:
            raise ScriptError(f"line {command.line_number}: {e}") from e

    def run(self, lines: Iterable[str]) -> List[str]:
        """
        Run a whole script; malformed lines yield "error: ..." and do not stop it.

        Returns:
            One output line per command
        """
        output = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip() or line.strip().startswith(COMMENT_PREFIX):
                continue
            try:
                output.append(self.execute(parse_line(line, line_number)))
            except ScriptError as e:
                logger.info(f"Script error: {e}")
                output.append(f"error: {e}")
        return output

    def _do_create(self, invitor: str, title: str, when: str, capacity: str = "0") -> str:
        try:
            date_time = parse_datetime(when)
        except ValueError as e:
            raise ScriptError(str(e)) from e

        try:
            max_participators = int(capacity)
        except ValueError as e:
            raise ScriptError(f"Capacity must be an integer: {capacity}") from e

        created = self.registry.create_event(
            self.person(invitor), title, date_time, max_participators
        )
        return _format_bool(created)

    def _do_register(self, name: str, title: str) -> str:
        event = self.registry.get_event(title)
        return _format_bool(self.registry.register_person_for_event(self.person(name), event))

    def _do_unregister(self, name: str, title: str) -> str:
        event = self.registry.get_event(title)
        return _format_bool(self.registry.unregister_person_for_event(self.person(name), event))

    def _do_participants(self, title: str) -> str:
        event = self.registry.get_event(title)
        if event is None:
            raise ScriptError(f"Event not found: {title}")
        return ", ".join(p.name for p in self.registry.get_participators_for_event(event))

    def _do_events(self, name: str) -> str:
        events = self.registry.get_events_for_person(self.person(name))
        return ", ".join(f"{e.title} ({format_datetime(e.scheduled_at)})" for e in events)

    def _do_count(self, name: str) -> str:
        return str(self.registry.count_events_for_person(self.person(name)))
