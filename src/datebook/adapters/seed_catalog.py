"""Built-in example events."""

import logging

from datebook.core.events import CalendarEvent

logger = logging.getLogger(__name__)

SEED_EVENTS: list[tuple[int, int, int, str]] = [
    (5, 1, 2024, "Birthday"),
    (25, 12, 2024, "Christmas"),
    (1, 1, 2024, "New Year"),
    (8, 3, 2024, "International Women's Day"),
]


class SeedCatalog:
    """
    Fixed in-memory catalog.

    Implements CatalogRepository protocol. Every call builds new events, so
    callers may mutate what they get back. An invalid seed entry raises
    InvalidDate here rather than being skipped.
    """

    def __init__(self, seed: list[tuple[int, int, int, str]] | None = None):
        self.seed = SEED_EVENTS if seed is None else seed

    def load_events(self) -> list[CalendarEvent]:
        events = [CalendarEvent(day, month, year, label) for day, month, year, label in self.seed]
        logger.debug(f"Loaded {len(events)} seed events")
        return events
