"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
import logging
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta

from calendar_day import CalendarDay

logger = logging.getLogger(__name__)

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

GRID_ROWS = 6
GRID_CELLS = GRID_ROWS * 7

# Leading and trailing cells spill a week into the neighbouring years
MIN_YEAR = MINYEAR + 1
MAX_YEAR = MAXYEAR - 1


def _as_date(d: date) -> date:
    # datetime is a date subclass; compare on the calendar day only
    return d.date() if isinstance(d, datetime) else d


def _check(month: int, first_weekday: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month!r}")
    if not 0 <= first_weekday <= 6:
        raise ValueError(f"first_weekday must be in 0..6, got {first_weekday!r}")


def in_display_range(year: int) -> bool:
    """Return True if a grid for ``year`` stays within datetime's limits."""
    return MIN_YEAR <= year <= MAX_YEAR


def weekday_abbrs(first_weekday: int = 0) -> list[str]:
    """Return the column headers, starting at ``first_weekday`` (0 = Monday)."""
    _check(1, first_weekday)
    return DAY_ABBR[first_weekday:] + DAY_ABBR[:first_weekday]


def grid_dates(year: int, month: int, first_weekday: int = 0) -> list[date]:
    """Return the 42 consecutive dates shown for a month.

    Starts on the last ``first_weekday`` before the 1st, so a month that
    begins on ``first_weekday`` still gets a full leading week, and runs
    into the following month until the grid is 6 rows high.
    """
    _check(month, first_weekday)
    if not in_display_range(year):
        raise ValueError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year!r}")
    cal = calendar.Calendar(firstweekday=first_weekday)
    dates = list(cal.itermonthdates(year, month))
    if dates[0].day == 1:
        dates[:0] = [dates[0] - timedelta(days=n) for n in range(7, 0, -1)]
    # Pad to exactly 6 rows
    while len(dates) < GRID_CELLS:
        dates.append(dates[-1] + timedelta(days=1))
    return dates


def month_days(
    year: int,
    month: int,
    today: date,
    selected: date | None = None,
    first_weekday: int = 0,
) -> list[CalendarDay]:
    """Build one CalendarDay per grid cell for the given month.

    ``today`` is supplied by the caller so a whole pass shares one "now",
    even if building straddles midnight.
    """
    today = _as_date(today)
    if selected is not None:
        selected = _as_date(selected)

    days = [
        CalendarDay(
            d,
            is_current_month=(d.year == year and d.month == month),
            is_today=(d == today),
            is_selected=(d == selected),
        )
        for d in grid_dates(year, month, first_weekday)
    ]
    logger.debug("Built %d cells for %04d-%02d (today=%s, selected=%s)",
                 len(days), year, month, today, selected)
    return days


def month_weeks(days: list[CalendarDay]) -> list[list[CalendarDay]]:
    """Split a flat grid into rows of 7."""
    return [days[i:i + 7] for i in range(0, len(days), 7)]


def iso_week_numbers(days: list[CalendarDay]) -> list[str]:
    """Return the ISO week number for each grid row.

    Taken from the first current-month day of the row; rows made only of
    adjacent-month days get an empty string.
    """
    weeks: list[str] = []
    for row in month_weeks(days):
        day = next((c for c in row if c.is_current_month), None)
        if day is None:
            weeks.append("")
        else:
            weeks.append(str(day.date.isocalendar()[1]))
    return weeks


def find_day(days: list[CalendarDay], d: date) -> CalendarDay | None:
    """Return the cell showing ``d``, or None if it is not on the grid."""
    d = _as_date(d)
    return next((c for c in days if _as_date(c.date) == d), None)


def select_day(days: list[CalendarDay], d: date) -> date | None:
    """Toggle the selection on ``d`` and return the new selected date.

    Selecting the already-selected day clears the selection. At most one
    cell is selected afterwards.
    """
    target = find_day(days, d)
    new_selected: date | None = None
    if target is not None and not target.is_selected:
        new_selected = _as_date(target.date)
    for cell in days:
        cell.is_selected = cell is target and new_selected is not None
    logger.debug("Selection is now %s", new_selected)
    return new_selected


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
