"""Tests for the interactive search workflow."""

import pytest

from datebook.adapters.seed_catalog import SeedCatalog
from datebook.core.errors import InputError
from datebook.workflows import MENU, read_query, run_search
from datebook.core.search import Criterion


class ScriptedConsole:
    """Console that replays canned answers and records output."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        return self.answers.pop(0)

    def echo(self, line: str = "") -> None:
        self.lines.append(line)

    @property
    def results(self) -> list[str]:
        """Output after the menu."""
        return self.lines[len(MENU):]


@pytest.fixture
def events():
    return SeedCatalog().load_events()


class TestReadQuery:
    def test_prints_menu(self):
        console = ScriptedConsole("4", "2024")
        read_query(console)
        assert console.lines == MENU
        assert console.lines[0] == "Choose search criteria:"
        assert console.lines[-1] == "5. By full date"

    def test_full_date_prompts_in_order(self):
        console = ScriptedConsole("5", "8", "3", "2024")
        query = read_query(console)
        assert console.prompts == ["Enter choice", "Enter day", "Enter month", "Enter year"]
        assert query.criterion == Criterion.DATE
        assert (query.day, query.month, query.year) == (8, 3, 2024)

    def test_label_text_kept_verbatim(self):
        query = read_query(ScriptedConsole("1", "New Year"))
        assert query.text == "New Year"

    def test_invalid_choice_returns_none(self):
        console = ScriptedConsole("9")
        assert read_query(console) is None
        assert console.prompts == ["Enter choice"]

    def test_non_numeric_choice(self):
        with pytest.raises(InputError):
            read_query(ScriptedConsole("two"))

    def test_non_numeric_parameter(self):
        with pytest.raises(InputError):
            read_query(ScriptedConsole("3", "January"))

    @pytest.mark.parametrize("raw", ["+3", "1_0", "", "-", "--3", "3.0"])
    def test_only_plain_integers_accepted(self, raw):
        with pytest.raises(InputError):
            read_query(ScriptedConsole("3", raw))

    def test_negative_integer_accepted(self):
        query = read_query(ScriptedConsole("2", "-5"))
        assert query.day == -5


class TestRunSearch:
    def test_by_month(self, events):
        console = ScriptedConsole("3", "1")
        found = run_search(console, events)
        assert [e.label for e in found] == ["Birthday", "New Year"]
        assert console.results == ["5/1/2024 - Birthday", "1/1/2024 - New Year"]

    def test_by_year_not_found(self, events):
        console = ScriptedConsole("4", "2025")
        assert run_search(console, events) == []
        assert console.results == ["No events in this year."]

    def test_by_label_substring(self, events):
        console = ScriptedConsole("1", "Day")
        run_search(console, events)
        assert console.results == ["8/3/2024 - International Women's Day"]

    def test_by_label_single_match(self, events):
        console = ScriptedConsole("1", "ew")
        run_search(console, events)
        assert console.results == ["1/1/2024 - New Year"]

    def test_by_label_multiple_in_catalog_order(self, events):
        console = ScriptedConsole("1", "i")
        run_search(console, events)
        assert console.results == [
            "5/1/2024 - Birthday",
            "25/12/2024 - Christmas",
            "8/3/2024 - International Women's Day",
        ]

    def test_by_label_not_found(self, events):
        console = ScriptedConsole("1", "Easter")
        run_search(console, events)
        assert console.results == ["Event not found."]

    def test_by_day(self, events):
        console = ScriptedConsole("2", "25")
        run_search(console, events)
        assert console.results == ["25/12/2024 - Christmas"]

    def test_by_day_not_found(self, events):
        console = ScriptedConsole("2", "40")
        run_search(console, events)
        assert console.results == ["No events on this day."]

    def test_by_month_not_found(self, events):
        console = ScriptedConsole("3", "7")
        run_search(console, events)
        assert console.results == ["No events in this month."]

    def test_by_full_date(self, events):
        console = ScriptedConsole("5", "1", "1", "2024")
        run_search(console, events)
        assert console.results == ["1/1/2024 - New Year"]

    def test_by_full_date_not_found(self, events):
        console = ScriptedConsole("5", "2", "1", "2024")
        run_search(console, events)
        assert console.results == ["No events on this date."]

    @pytest.mark.parametrize("choice", ["0", "6", "-1"])
    def test_invalid_choice(self, events, choice):
        console = ScriptedConsole(choice)
        assert run_search(console, events) == []
        assert console.results == ["Invalid choice."]

    def test_whitespace_around_numbers(self, events):
        console = ScriptedConsole(" 4 ", " 2024\n")
        assert len(run_search(console, events)) == 4
