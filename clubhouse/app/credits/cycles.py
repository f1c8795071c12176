"""Calendar arithmetic for monthly credit cycles."""
from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from .models import CycleDates

DateLike = Union[date, datetime]

_END_OF_DAY = time(23, 59, 59, 999000)


def _last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: date, months: int) -> date:
    """Shift ``value`` by whole calendar months, clamping to shorter months.

    ``2024-01-31`` plus one month is ``2024-02-29``, not a day in March.
    Results outside the supported calendar saturate at ``date.min``/``date.max``.
    """

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    if year > date.max.year:
        return date.max
    if year < date.min.year:
        return date.min
    day = min(value.day, _last_day_of_month(year, month))
    return date(year, month, day)


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _anniversary_in_month(year: int, month: int, anchor_day: int) -> date:
    # A month without the anchor day renews on the 1st of the following month.
    # December always has the day, so the rollover never crosses a year.
    if anchor_day <= _last_day_of_month(year, month):
        return date(year, month, anchor_day)
    return date(year, month + 1, 1)


def next_billing_anniversary(anchor_day: int, after: date) -> Optional[date]:
    """Return the first renewal date strictly after ``after`` for a member anchored on ``anchor_day``.

    ``None`` when that date would fall past ``date.max``.
    """

    year, month = after.year, after.month
    while True:
        candidate = _anniversary_in_month(year, month, anchor_day)
        if candidate > after:
            return candidate
        if year == date.max.year and month == 12:
            return None
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def calculate_cycle_dates(start_date: DateLike, anchor_date: Optional[DateLike] = None) -> CycleDates:
    """Return the credit cycle beginning on ``start_date``.

    The cycle ends the day before the member's next billing anniversary and its
    credits expire at the end of that day. Anniversaries fall on the day-of-month
    of ``anchor_date`` (``start_date`` when omitted); in a month too short to
    hold that day the anniversary moves to the 1st of the next month, so a cycle
    starting Jan 31, 2024 runs through Feb 29, 2024.

    An aware ``datetime`` start keeps its timezone on ``expires_at``; dates and
    naive datetimes yield a naive ``expires_at``.
    """

    cycle_start = _as_date(start_date)
    anchor_day = _as_date(anchor_date).day if anchor_date is not None else cycle_start.day

    next_start = next_billing_anniversary(anchor_day, cycle_start)
    cycle_end = date.max if next_start is None else next_start - timedelta(days=1)

    tzinfo = start_date.tzinfo if isinstance(start_date, datetime) else None
    expires_at = datetime.combine(cycle_end, _END_OF_DAY, tzinfo=tzinfo)

    return CycleDates(cycle_start=cycle_start, cycle_end=cycle_end, expires_at=expires_at)


def is_billing_anniversary(start_date: DateLike, today: DateLike) -> bool:
    """Return ``True`` when ``today`` starts a new credit cycle for a member who began on ``start_date``.

    Members who started on a day the previous month lacks renew on the 1st.
    Dates before the membership starts are never anniversaries.
    """

    start = _as_date(start_date)
    current = _as_date(today)
    if current < start:
        return False
    if current.day == start.day:
        return True
    return current.day == 1 and start.day > (current - timedelta(days=1)).day
