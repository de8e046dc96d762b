"""
Event Calendar command-line entry point.

Runs command scripts against an in-memory registry.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

import click

from src.models.person import Person
from src.services.registry import Registry
from src.services.script_service import ScriptRunner
from src.utils.config import get_log_level


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging with the given or configured level."""
    logging.basicConfig(
        level=(level or get_log_level()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_demo(registry: Registry) -> list:
    """
    Run the launch scenario.

    Returns:
        List of (step description, result) tuples
    """
    now = datetime.now()
    organizer = Person("Org")
    alice = Person("Alice")

    steps = [
        ("create Launch tomorrow",
         registry.create_event(organizer, "Launch", now + timedelta(days=1))),
        ("create Launch next week",
         registry.create_event(organizer, "Launch", now + timedelta(days=7))),
    ]
    launch = registry.get_event("Launch")
    steps.append(("register Alice", registry.register_person_for_event(alice, launch)))
    steps.append(("register Alice again", registry.register_person_for_event(alice, launch)))
    steps.append(("count Alice", registry.count_events_for_person(alice)))
    return steps


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override EVENT_CALENDAR_LOG_LEVEL",
)
def main(log_level):
    """Event Calendar."""
    configure_logging(log_level)


@main.command()
@click.argument("script", type=click.File("r", encoding="utf-8"))
def run(script):
    """Execute a command script (use - for stdin)."""
    runner = ScriptRunner(Registry())
    for line in runner.run(script):
        click.echo(line)


@main.command()
def demo():
    """Run the built-in launch scenario."""
    for description, result in run_demo(Registry()):
        if isinstance(result, bool):
            result = "true" if result else "false"
        click.echo(f"{description}: {result}")


if __name__ == "__main__":
    main()
