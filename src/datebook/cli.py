"""datebook CLI - search a small calendar of events."""

import json
import logging
import sys
from dataclasses import dataclass, field

import click

from .adapters import ClickConsole, SeedCatalog
from .config import Config, load_config
from .core.catalog import EventCatalog
from .core.errors import DatebookError, InputError
from .core.events import CalendarEvent, parse_date
from .core.search import NOT_FOUND_MESSAGES, Criterion, SearchQuery, format_event
from .ports import CatalogRepository
from .workflows import run_search

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Shared state handed to every command through ``ctx.obj``."""

    config: Config
    repo: CatalogRepository = field(default_factory=SeedCatalog)

    def load_catalog(self) -> EventCatalog:
        """Build a fresh, caller-owned catalog from the repository."""
        return EventCatalog(self.repo.load_events())


@click.group(invoke_without_command=True)
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """datebook - look up calendar events by name, day, month, year or date."""
    if ctx.obj is None:
        ctx.obj = AppContext(config=load_config())
    if debug or ctx.obj.config.debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    if ctx.invoked_subcommand is None:
        ctx.invoke(search)


def _show_events(events: list[CalendarEvent], as_json: bool, empty_msg: str) -> None:
    """Shared event display logic."""
    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "date": e.formatted_date(),
                        "day": e.day,
                        "month": e.month,
                        "year": e.year,
                        "label": e.label,
                    }
                    for e in events
                ],
                indent=2,
            )
        )
        return

    if not events:
        click.echo(empty_msg)
        return

    for event in events:
        click.echo(format_event(event))


@main.command()
@click.pass_obj
def search(app: AppContext):
    """Interactive search of the event catalog."""
    events = app.load_catalog().events
    try:
        run_search(ClickConsole(), events)
    except InputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option("--name", default=None, help="Part of the event name (case-sensitive)")
@click.option("--day", type=int, default=None, help="Day of the month")
@click.option("--month", type=int, default=None, help="Month number")
@click.option("--year", type=int, default=None, help="Year")
@click.option("--date", "full_date", default=None, help="Full date as D/M/Y")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def find(
    app: AppContext,
    name: str | None,
    day: int | None,
    month: int | None,
    year: int | None,
    full_date: str | None,
    as_json: bool,
):
    """Search the event catalog without prompting."""
    given = [v for v in (name, day, month, year, full_date) if v is not None]
    if len(given) != 1:
        raise click.UsageError("Give exactly one of --name, --day, --month, --year or --date.")

    if name is not None:
        query = SearchQuery(Criterion.LABEL, text=name)
    elif day is not None:
        query = SearchQuery(Criterion.DAY, day=day)
    elif month is not None:
        query = SearchQuery(Criterion.MONTH, month=month)
    elif year is not None:
        query = SearchQuery(Criterion.YEAR, year=year)
    else:
        try:
            d, m, y = parse_date(full_date)
        except InputError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        query = SearchQuery(Criterion.DATE, day=d, month=m, year=y)

    catalog = app.load_catalog()
    found = catalog.find(query)
    logger.debug(f"{query.criterion.name} search matched {len(found)} events")
    _show_events(found, as_json, NOT_FOUND_MESSAGES[query.criterion])


@main.command("list")
@click.option("--sorted", "by_date", is_flag=True, help="Order by date instead of catalog order")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_events(app: AppContext, by_date: bool, as_json: bool):
    """Show every event in the catalog."""
    catalog = app.load_catalog()
    events = catalog.sorted_by_date() if by_date else list(catalog)
    _show_events(events, as_json, "No events.")


@main.command()
@click.argument("date_text", metavar="D/M/Y")
@click.option("--days", type=int, required=True, help="Days to move (negative moves back)")
@click.option("--label", default=None, help="Event label (default from DEFAULT_LABEL in datebook.conf)")
@click.pass_obj
def shift(app: AppContext, date_text: str, days: int, label: str | None):
    """Move a date forward or back by a number of days."""
    try:
        day, month, year = parse_date(date_text)
        event = CalendarEvent(day, month, year, label if label is not None else app.config.default_label)
        moved = event.shifted(days)
    except DatebookError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.debug(f"Shifted {event.formatted_date()} by {days} days to {moved.formatted_date()}")
    click.echo(format_event(moved))


if __name__ == "__main__":
    main()
