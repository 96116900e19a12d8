"""Catalog repository interface."""

from typing import Protocol

from datebook.core.events import CalendarEvent


class CatalogRepository(Protocol):
    """Interface for loading the events to search."""

    def load_events(self) -> list[CalendarEvent]:
        """Return a fresh, caller-owned list of events."""
        ...
