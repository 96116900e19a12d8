"""Pure date/event domain logic - no I/O dependencies."""

from dataclasses import dataclass

from .errors import InputError, InvalidDate

DEFAULT_LABEL = "No event"

_DATE_FIELDS = frozenset({"day", "month", "year"})


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in a month of a given year."""
    match month:
        case 4 | 6 | 9 | 11:
            return 30
        case 2:
            return 29 if is_leap_year(year) else 28
        case _:
            return 31


def validate_date(day: int, month: int, year: int) -> None:
    """Raise InvalidDate unless day/month/year form a calendar date."""
    if month < 1 or month > 12:
        raise InvalidDate("Invalid month.")
    if day < 1 or day > days_in_month(month, year):
        raise InvalidDate("Invalid day.")
    if year < 0:
        raise InvalidDate("Invalid year.")


def parse_date(text: str) -> tuple[int, int, int]:
    """
    Parse a "D/M/Y" string into (day, month, year).

    Only the shape is checked here; the result may still be an invalid date.
    """
    parts = text.strip().split("/")
    if len(parts) != 3:
        raise InputError(f"Expected a date as D/M/Y, got {text!r}")
    try:
        day, month, year = (int(p) for p in parts)
    except ValueError as e:
        raise InputError(f"Expected a date as D/M/Y, got {text!r}") from e
    return day, month, year


def _roll_forward(day: int, month: int, year: int) -> tuple[int, int, int]:
    # Month length is re-read every step so February follows the current year.
    while day > days_in_month(month, year):
        day -= days_in_month(month, year)
        month += 1
        if month > 12:
            month = 1
            year += 1
    return day, month, year


def _roll_back(day: int, month: int, year: int) -> tuple[int, int, int]:
    while day < 1:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day += days_in_month(month, year)
    return day, month, year


@dataclass(eq=False)
class CalendarEvent:
    """
    A calendar date with a free-text label.

    The date is always valid. Construction, assign(), the day arithmetic and
    direct assignment to day/month/year all validate first and leave the
    event untouched when they raise InvalidDate.

    Equality and ordering intentionally disagree: ``==`` compares the label
    as well, while ``<``, ``<=``, ``>`` and ``>=`` only look at
    (year, month, day). Two events on the same date with different labels
    are therefore unequal, yet neither sorts before the other.
    """

    day: int = 1
    month: int = 1
    year: int = 2000
    label: str = DEFAULT_LABEL

    def __post_init__(self) -> None:
        validate_date(self.day, self.month, self.year)

    def __setattr__(self, name: str, value) -> None:
        if name in _DATE_FIELDS and _DATE_FIELDS.issubset(self.__dict__):
            candidate = {f: self.__dict__[f] for f in _DATE_FIELDS}
            candidate[name] = value
            validate_date(candidate["day"], candidate["month"], candidate["year"])
        super().__setattr__(name, value)

    def _commit(self, day: int, month: int, year: int) -> None:
        """Validate, then replace all three date fields at once."""
        validate_date(day, month, year)
        self.__dict__.update(day=day, month=month, year=year)

    def _date_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def assign(self, other: "CalendarEvent") -> "CalendarEvent":
        """Copy date and label from another event."""
        if other is not self:
            self._commit(other.day, other.month, other.year)
            self.label = other.label
        return self

    def add_days(self, days: int) -> "CalendarEvent":
        """Move forward N days, carrying into following months and years."""
        if days < 0:
            return self.subtract_days(-days)
        self._commit(*_roll_forward(self.day + days, self.month, self.year))
        return self

    def subtract_days(self, days: int) -> "CalendarEvent":
        """Move back N days, borrowing from preceding months and years."""
        if days < 0:
            return self.add_days(-days)
        self._commit(*_roll_back(self.day - days, self.month, self.year))
        return self

    def shifted(self, days: int) -> "CalendarEvent":
        """Return a copy moved by N days (negative moves back)."""
        copy = CalendarEvent(self.day, self.month, self.year, self.label)
        return copy.add_days(days)

    def __iadd__(self, days):
        if not isinstance(days, int):
            return NotImplemented
        return self.add_days(days)

    def __isub__(self, days):
        if not isinstance(days, int):
            return NotImplemented
        return self.subtract_days(days)

    def __eq__(self, other):
        if not isinstance(other, CalendarEvent):
            return NotImplemented
        return (
            self.day == other.day
            and self.month == other.month
            and self.year == other.year
            and self.label == other.label
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __gt__(self, other):
        if not isinstance(other, CalendarEvent):
            return NotImplemented
        return self._date_key() > other._date_key()

    def __ge__(self, other):
        if not isinstance(other, CalendarEvent):
            return NotImplemented
        return self > other or self._date_key() == other._date_key()

    def __lt__(self, other):
        if not isinstance(other, CalendarEvent):
            return NotImplemented
        return not self >= other

    def __le__(self, other):
        if not isinstance(other, CalendarEvent):
            return NotImplemented
        return not self > other

    def matches_label(self, text: str) -> bool:
        """Case-sensitive substring match on the label."""
        return text in self.label

    def matches_date(self, day: int, month: int, year: int) -> bool:
        return self.day == day and self.month == month and self.year == year

    def matches_day(self, day: int) -> bool:
        return self.day == day

    def matches_month(self, month: int) -> bool:
        return self.month == month

    def matches_year(self, year: int) -> bool:
        return self.year == year

    def formatted_date(self) -> str:
        """Format as D/M/Y, no zero padding."""
        return f"{self.day}/{self.month}/{self.year}"

    def set_label(self, label: str) -> None:
        self.label = label
