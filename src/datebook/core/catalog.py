"""Ordered, caller-owned collection of calendar events."""

from dataclasses import dataclass, field
from typing import Iterator

from .events import CalendarEvent
from .search import SearchQuery, search_events, sort_events_by_date


@dataclass
class EventCatalog:
    """
    An ordered sequence of events.

    Events have no identity beyond their position and duplicates are allowed.
    """

    events: list[CalendarEvent] = field(default_factory=list)

    def add(self, event: CalendarEvent) -> None:
        self.events.append(event)

    def find(self, query: SearchQuery) -> list[CalendarEvent]:
        """All matching events, in catalog order."""
        return search_events(self.events, query)

    def sorted_by_date(self) -> list[CalendarEvent]:
        return sort_events_by_date(self.events)

    def __iter__(self) -> Iterator[CalendarEvent]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)
