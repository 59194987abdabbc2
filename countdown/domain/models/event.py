"""Value objects for the countdown domain.

An Event is a named calendar date. A CountdownEntry pairs an event with the
number of whole days left until it, relative to some "today".
"""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from countdown.domain.errors import InvalidArgument, ValidationError

DATE_FORMAT_HINT = "dd-mm-yyyy"

_DATE_PATTERN = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class SortOrder(str, Enum):
    """Display order for upcoming events."""

    SHUFFLE = "shuffle"
    TIME_ASC = "time-asc"
    TIME_DESC = "time-desc"


DEFAULT_ORDER = SortOrder.TIME_ASC


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Returns the number of days in a Gregorian month."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_calendar_date(day: int, month: int, year: int) -> bool:
    if not 1 <= year <= 9999:
        return False
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def parse_date(text: str) -> date:
    """Parses a ``d-m-yyyy`` string into a date.

    Day and month may be one or two digits; the year is exactly four.

    Raises:
        InvalidArgument: If the text does not match the format or does not
            name a real calendar day (e.g. 31-02-2025, 29-02-2023).
    """
    match = _DATE_PATTERN.match(text.strip())
    if not match:
        raise InvalidArgument(f"Invalid date '{text}': expected format {DATE_FORMAT_HINT}")

    day, month, year = (int(part) for part in match.groups())
    if not is_valid_calendar_date(day, month, year):
        raise InvalidArgument(f"Invalid date '{text}': {day:02d}-{month:02d}-{year:04d} is not a calendar day")
    return date(year, month, day)


def format_date(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


@dataclass(frozen=True)
class Event:
    """A named future (or past) calendar date the user counts down to."""

    name: str
    date: date

    def validate(self) -> None:
        """Checks the persistence invariants.

        Raises:
            ValidationError: If the name is empty or the date is not a date.
        """
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Event name must not be empty")
        if not isinstance(self.date, date):
            raise ValidationError(f"Event '{self.name}' has no valid date")

    def days_until(self, today: date) -> int:
        """Whole calendar days from ``today`` to the event; negative once it has passed."""
        return (self.date - today).days


@dataclass(frozen=True)
class CountdownEntry:
    """An event that has not happened yet, with its remaining days."""

    event: Event
    days_remaining: int

    @property
    def name(self) -> str:
        return self.event.name
