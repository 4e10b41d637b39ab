"""Reading-log entries and their derived status."""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class BookStatus(str, Enum):
    FINISHED = "finished"
    READING = "reading"


class ListFilter(str, Enum):
    """Status filter for the list view."""
    ALL = "all"
    FINISHED = "finished"
    READING = "reading"


@dataclass
class Book:
    """One reading-log entry.

    log_date anchors the entry on the calendar and is independent of the
    reading period. end_date is None while the book is still being read.
    """
    id: str
    title: str
    log_date: date
    start_date: date
    end_date: Optional[date] = None
    image_url: str = ""
    rating: Optional[int] = None  # 1..5, only once finished
    review: Optional[str] = None
    quotes: List[str] = field(default_factory=list)
    description: Optional[str] = None
    category: Optional[str] = None


@dataclass
class BookDetails:
    """Enrichment result for a title lookup."""
    description: str
    category: str
    image_url: Optional[str] = None


@dataclass
class Recommendation:
    title: str
    author: str
    description: str
    category: str
