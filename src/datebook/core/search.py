"""Event lookup by criterion - pure functions, no I/O."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .events import CalendarEvent


class Criterion(IntEnum):
    """Search mode, numbered as in the interactive menu."""

    LABEL = 1
    DAY = 2
    MONTH = 3
    YEAR = 4
    DATE = 5


NOT_FOUND_MESSAGES = {
    Criterion.LABEL: "Event not found.",
    Criterion.DAY: "No events on this day.",
    Criterion.MONTH: "No events in this month.",
    Criterion.YEAR: "No events in this year.",
    Criterion.DATE: "No events on this date.",
}

INVALID_CHOICE_MESSAGE = "Invalid choice."


@dataclass(frozen=True)
class SearchQuery:
    """
    A criterion plus its parameter(s).

    Numeric parameters are not range-checked: a query for day 42 is valid
    and simply matches nothing.
    """

    criterion: Criterion
    text: str = ""
    day: int | None = None
    month: int | None = None
    year: int | None = None


def matches(event: CalendarEvent, query: SearchQuery) -> bool:
    """Check a single event against a query."""
    match query.criterion:
        case Criterion.LABEL:
            return event.matches_label(query.text)
        case Criterion.DAY:
            return event.matches_day(query.day)
        case Criterion.MONTH:
            return event.matches_month(query.month)
        case Criterion.YEAR:
            return event.matches_year(query.year)
        case Criterion.DATE:
            return event.matches_date(query.day, query.month, query.year)
    raise ValueError(f"Unknown criterion: {query.criterion!r}")


def search_events(events: Iterable[CalendarEvent], query: SearchQuery) -> list[CalendarEvent]:
    """
    All events matching the query, in their original order.

    Pure function - single pass, no I/O.
    """
    return [e for e in events if matches(e, query)]


def format_event(event: CalendarEvent) -> str:
    return f"{event.formatted_date()} - {event.label}"


def render_results(found: list[CalendarEvent], criterion: Criterion) -> list[str]:
    """Output lines for a search: one per match, or the not-found message."""
    if not found:
        return [NOT_FOUND_MESSAGES[criterion]]
    return [format_event(e) for e in found]


def sort_events_by_date(events: Iterable[CalendarEvent]) -> list[CalendarEvent]:
    """Sort events chronologically, keeping the original order for ties."""
    return sorted(events, key=lambda e: (e.year, e.month, e.day))
