"""Calendar projection: day cells and month grid."""
from dataclasses import dataclass, field
from datetime import date
from typing import List

from librolog.models.book import Book


@dataclass
class DayCell:
    """One grid square; books holds at most the visible cap."""
    date: date
    is_in_current_month: bool
    is_today: bool
    books: List[Book] = field(default_factory=list)
    overflow_count: int = 0


@dataclass
class CalendarGrid:
    month_start: date
    month_end: date
    cells: List[DayCell]

    @property
    def weeks(self) -> List[List[DayCell]]:
        return [self.cells[i:i + 7] for i in range(0, len(self.cells), 7)]
