"""Reading status and summary counts derived from stored fields."""
from typing import Iterable, List

from librolog.config import CURRENTLY_READING_LIMIT
from librolog.models.book import Book, BookStatus
from librolog.models.summary import Summary


def is_finished(book: Book) -> bool:
    """A book is finished iff it has an end date. Every status check goes through here."""
    return book.end_date is not None


def status_of(book: Book) -> BookStatus:
    return BookStatus.FINISHED if is_finished(book) else BookStatus.READING


def summarize(books: Iterable[Book]) -> Summary:
    """Return total/completed/in-progress counts; completed + in_progress == total."""
    total = completed = 0
    for b in books:
        total += 1
        if is_finished(b):
            completed += 1
    return Summary(total=total, completed=completed, in_progress=total - completed)


def currently_reading(books: Iterable[Book], limit: int = CURRENTLY_READING_LIMIT) -> List[Book]:
    """First `limit` in-progress books in collection order."""
    out = []
    for b in books:
        if len(out) >= limit:
            break
        if not is_finished(b):
            out.append(b)
    return out


def in_progress_titles(books: Iterable[Book]) -> List[str]:
    return [b.title for b in books if not is_finished(b)]
