"""Join-date validation and ``dd/MM/yyyy`` parsing."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

MIN_JOIN_YEAR = 1950
DATE_PATTERN = "dd/MM/yyyy"

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})
_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


class DateValidationError(ValueError):
    """Raised when a join date component is out of range or unparsable."""


def check_year(year: int, *, today: Optional[date] = None, min_year: int = MIN_JOIN_YEAR) -> int:
    current_year = (today or date.today()).year
    if year < min_year or year > current_year:
        raise DateValidationError(
            f"Year {year} is outside the accepted range {min_year}-{current_year}."
        )
    return year


def check_month(month: int) -> int:
    if month < 1 or month > 12:
        raise DateValidationError(f"Month {month} is not between 1 and 12.")
    return month


def check_day(day: int, month: int) -> int:
    """Apply the fixed day-count rule.

    February is capped at 28 in every year, so 29 February is never accepted.
    """

    if (
        day < 1
        or day > 31
        or (day > 30 and month in _THIRTY_DAY_MONTHS)
        or (day > 28 and month == 2)
    ):
        raise DateValidationError(f"Day {day} is not valid for month {month}.")
    return day


def validate_join_date(
    day: int,
    month: int,
    year: int,
    *,
    today: Optional[date] = None,
    min_year: int = MIN_JOIN_YEAR,
) -> date:
    check_year(year, today=today, min_year=min_year)
    check_month(month)
    check_day(day, month)
    return date(year, month, day)


def parse_join_date(
    text: str,
    *,
    today: Optional[date] = None,
    min_year: int = MIN_JOIN_YEAR,
) -> date:
    match = _DATE_RE.match(text.strip())
    if match is None:
        raise DateValidationError(f"Date {text!r} does not match {DATE_PATTERN}.")
    day, month, year = (int(part) for part in match.groups())
    return validate_join_date(day, month, year, today=today, min_year=min_year)


def format_join_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
