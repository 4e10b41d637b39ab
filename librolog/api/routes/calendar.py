"""Month calendar and day detail."""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from librolog.api.state import AppState, get_state
from librolog.config import WEEKDAY_HEADERS
from librolog.core.book_store import book_to_dict
from librolog.core.calendar_grid import books_on, build_month_grid, month_label, shift_month
from librolog.models.calendar import DayCell

router = APIRouter()


def _cell_to_dict(cell: DayCell) -> dict:
    return {
        "date": cell.date.isoformat(),
        "isInCurrentMonth": cell.is_in_current_month,
        "isToday": cell.is_today,
        "books": [book_to_dict(b) for b in cell.books],
        "overflowCount": cell.overflow_count,
    }


@router.get("/")
def get_month(
    ref: Optional[date] = Query(default=None, alias="date"),
    offset: int = 0,
    state: AppState = Depends(get_state),
):
    """Grid for the month containing `date` (default today), moved by `offset` months."""
    reference = shift_month(ref or date.today(), offset)
    grid = build_month_grid(reference, state.store.books)
    return {
        "label": month_label(reference),
        "reference": reference.isoformat(),
        "monthStart": grid.month_start.isoformat(),
        "monthEnd": grid.month_end.isoformat(),
        "previous": shift_month(reference, -1).isoformat(),
        "next": shift_month(reference, 1).isoformat(),
        "weekdays": list(WEEKDAY_HEADERS),
        "weeks": [[_cell_to_dict(c) for c in week] for week in grid.weeks],
    }


@router.get("/day/{day}")
def get_day(day: date, state: AppState = Depends(get_state)):
    """All books logged on one day."""
    return {
        "date": day.isoformat(),
        "books": [book_to_dict(b) for b in books_on(state.store.books, day)],
    }
