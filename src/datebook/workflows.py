"""
Interactive search workflow.

One request/response cycle: show the menu, read a criterion and its
parameters from the console, scan the events and report every match.
"""

import logging
from typing import Sequence

from .core.errors import InputError
from .core.events import CalendarEvent
from .core.search import (
    INVALID_CHOICE_MESSAGE,
    Criterion,
    SearchQuery,
    render_results,
    search_events,
)
from .ports.console import Console

logger = logging.getLogger(__name__)

MENU = [
    "Choose search criteria:",
    "1. By event name",
    "2. By day",
    "3. By month",
    "4. By year",
    "5. By full date",
]


def _read_int(console: Console, text: str) -> int:
    raw = console.prompt(text).strip()
    # Plain digits with an optional leading minus, no "+" or "_"
    if not raw.removeprefix("-").isdecimal():
        raise InputError(f"Expected a whole number, got {raw!r}")
    return int(raw)


def read_query(console: Console) -> SearchQuery | None:
    """
    Show the menu and read a query.

    Returns None for a menu selection outside 1-5. Raises InputError when a
    number was expected but something else was entered.
    """
    for line in MENU:
        console.echo(line)

    choice = _read_int(console, "Enter choice")
    try:
        criterion = Criterion(choice)
    except ValueError:
        return None

    match criterion:
        case Criterion.LABEL:
            return SearchQuery(criterion, text=console.prompt("Enter event name"))
        case Criterion.DAY:
            return SearchQuery(criterion, day=_read_int(console, "Enter day"))
        case Criterion.MONTH:
            return SearchQuery(criterion, month=_read_int(console, "Enter month"))
        case Criterion.YEAR:
            return SearchQuery(criterion, year=_read_int(console, "Enter year"))
        case Criterion.DATE:
            day = _read_int(console, "Enter day")
            month = _read_int(console, "Enter month")
            year = _read_int(console, "Enter year")
            return SearchQuery(criterion, day=day, month=month, year=year)


def run_search(console: Console, events: Sequence[CalendarEvent]) -> list[CalendarEvent]:
    """Run a single search cycle against the given events and return the matches."""
    query = read_query(console)
    if query is None:
        logger.debug("Invalid menu selection, nothing searched")
        console.echo(INVALID_CHOICE_MESSAGE)
        return []

    found = search_events(events, query)
    logger.debug(f"{query.criterion.name} search matched {len(found)} of {len(events)} events")

    for line in render_results(found, query.criterion):
        console.echo(line)
    return found
