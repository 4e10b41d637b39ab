"""Month grid of day cells with books bucketed by log date."""
import calendar
from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from librolog.config import CALENDAR_VISIBLE_PER_DAY
from librolog.models.book import Book
from librolog.models.calendar import CalendarGrid, DayCell


def month_bounds(reference: date) -> tuple[date, date]:
    """Return (first day, last day) of the month containing reference."""
    last_day = calendar.monthrange(reference.year, reference.month)[1]
    return reference.replace(day=1), reference.replace(day=last_day)


def week_start(d: date) -> date:
    """Most recent Sunday on or before d."""
    # date.weekday(): Monday=0 .. Sunday=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def week_end(d: date) -> date:
    """Next Saturday on or after d."""
    return week_start(d) + timedelta(days=6)


def shift_month(reference: date, months: int) -> date:
    """Move by whole months, clamping the day (Jan 31 + 1 -> Feb 28/29)."""
    index = reference.year * 12 + (reference.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(reference.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def month_label(reference: date) -> str:
    """e.g. 'March 2024'."""
    return f"{calendar.month_name[reference.month]} {reference.year}"


def bucket_by_log_date(books: Iterable[Book]) -> Dict[date, List[Book]]:
    """Group books by log_date, keeping collection order within each bucket."""
    buckets: Dict[date, List[Book]] = defaultdict(list)
    for b in books:
        buckets[b.log_date].append(b)
    return buckets


def books_on(books: Iterable[Book], day: date) -> List[Book]:
    """Every book logged on day (no visible cap)."""
    return [b for b in books if b.log_date == day]


def build_month_grid(
    reference: date,
    books: Iterable[Book],
    today: Optional[date] = None,
    visible: int = CALENDAR_VISIBLE_PER_DAY,
) -> CalendarGrid:
    """Build the Sunday-first grid of whole weeks covering reference's month.

    Each cell shows at most `visible` books; the rest are counted in
    overflow_count. today defaults to the current date.
    """
    if today is None:
        today = date.today()
    month_start, month_end = month_bounds(reference)
    grid_start, grid_end = week_start(month_start), week_end(month_end)
    buckets = bucket_by_log_date(books)

    cells = []
    day = grid_start
    while day <= grid_end:
        bucket = buckets.get(day, [])
        cells.append(
            DayCell(
                date=day,
                is_in_current_month=month_start <= day <= month_end,
                is_today=day == today,
                books=bucket[:visible],
                overflow_count=max(0, len(bucket) - visible),
            )
        )
        day += timedelta(days=1)
    return CalendarGrid(month_start=month_start, month_end=month_end, cells=cells)
