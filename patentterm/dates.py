"""
patentterm.dates
================

Calendar-date helpers used by the term rules.

Year and month offsets follow plain calendar rollover: when the target
month is shorter than the source day, the surplus days spill into the
following month.  Adding a year to 2020-02-29 therefore gives 2021-03-01.
This is a known imprecision accepted for all rules and fee dates alike.
"""

from __future__ import annotations

import math
from datetime import MAXYEAR, MINYEAR, date, datetime, time, timedelta
from typing import Optional, Union

Moment = Union[date, datetime]


class DateOutOfRange(ValueError):
    """A year or month offset lands outside the years a date can hold."""


def parse_date(value) -> Optional[date]:
    """
    Return *value* as a :class:`datetime.date`, or None if it is empty or
    not an ISO ``YYYY-MM-DD`` string.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def _rolled(year: int, month: int, day: int) -> date:
    if not MINYEAR <= year <= MAXYEAR:
        raise DateOutOfRange(f"year {year} is outside the supported range {MINYEAR}-{MAXYEAR}")
    return date(year, month, 1) + timedelta(days=day - 1)


def add_months(d: date, months: int) -> date:
    """Shift *d* by a (possibly negative) number of months."""
    index = d.year * 12 + (d.month - 1) + months
    return _rolled(index // 12, index % 12 + 1, d.day)


def add_years(d: date, years: int) -> date:
    """Shift *d* by whole years, keeping month and day-of-month."""
    return _rolled(d.year + years, d.month, d.day)


def _as_datetime(moment: Moment) -> datetime:
    if isinstance(moment, datetime):
        return moment.replace(tzinfo=None)
    return datetime.combine(moment, time())


def days_until(target: date, now: Moment) -> int:
    """
    Whole days from *now* to midnight starting *target*, floored.

    With a plain date for *now* this is the calendar-day difference; with a
    datetime part-days round toward the past, so the expiration day itself
    counts as -1 once the clock has passed midnight.
    """
    delta = _as_datetime(target) - _as_datetime(now)
    return math.floor(delta.total_seconds() / 86400)


def is_before(target: date, now: Moment) -> bool:
    """True when midnight starting *target* lies strictly before *now*."""
    return _as_datetime(target) < _as_datetime(now)


def format_long_date(d: date) -> str:
    """en-US long form, e.g. ``January 1, 2040``."""
    return f"{d:%B} {d.day}, {d.year}"
