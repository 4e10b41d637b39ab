"""Data models for books, calendar cells, and summaries."""
from librolog.models.book import Book, BookDetails, BookStatus, ListFilter, Recommendation
from librolog.models.calendar import CalendarGrid, DayCell
from librolog.models.summary import Summary

__all__ = [
    "Book",
    "BookDetails",
    "BookStatus",
    "CalendarGrid",
    "DayCell",
    "ListFilter",
    "Recommendation",
    "Summary",
]
