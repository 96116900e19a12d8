"""Functional core - pure business logic with no I/O."""

from .errors import DatebookError, InvalidDate, InputError
from .events import CalendarEvent, days_in_month, is_leap_year, parse_date, validate_date
from .search import Criterion, SearchQuery, search_events, format_event, render_results
from .catalog import EventCatalog

__all__ = [
    # Errors
    "DatebookError",
    "InvalidDate",
    "InputError",
    # Events
    "CalendarEvent",
    "days_in_month",
    "is_leap_year",
    "parse_date",
    "validate_date",
    # Search
    "Criterion",
    "SearchQuery",
    "search_events",
    "format_event",
    "render_results",
    # Catalog
    "EventCatalog",
]
