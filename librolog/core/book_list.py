"""List view: status filter, text search, and multi-select over the store."""
import logging
from typing import Iterable, List, Set

from librolog.core.book_store import BookStore
from librolog.core.status import status_of
from librolog.models.book import Book, ListFilter

logger = logging.getLogger(__name__)


def matches_filter(book: Book, list_filter: ListFilter) -> bool:
    return list_filter == ListFilter.ALL or status_of(book).value == list_filter.value


def matches_query(book: Book, query: str) -> bool:
    """Case-insensitive substring match on title or review; empty query matches all."""
    q = query.lower()
    if not q:
        return True
    return q in book.title.lower() or q in (book.review or "").lower()


def filter_books(books: Iterable[Book], list_filter: ListFilter = ListFilter.ALL, query: str = "") -> List[Book]:
    """Books matching both the status filter and the query, in collection order."""
    return [b for b in books if matches_filter(b, list_filter) and matches_query(b, query)]


class BookListView:
    """Filter/query parameters and the selection set for bulk actions.

    Changing the filter or query clears the selection, so it never holds
    ids of books that are no longer visible because of a parameter change.
    """

    def __init__(self, store: BookStore) -> None:
        self._store = store
        self.list_filter = ListFilter.ALL
        self.query = ""
        self._selected: Set[str] = set()

    @property
    def selected(self) -> Set[str]:
        return set(self._selected)

    def visible(self) -> List[Book]:
        return filter_books(self._store.books, self.list_filter, self.query)

    def visible_ids(self) -> Set[str]:
        return {b.id for b in self.visible()}

    def set_params(self, list_filter: ListFilter | None = None, query: str | None = None) -> None:
        changed = False
        if list_filter is not None and list_filter != self.list_filter:
            self.list_filter = list_filter
            changed = True
        if query is not None and query != self.query:
            self.query = query
            changed = True
        if changed:
            self._selected.clear()

    def all_selected(self) -> bool:
        ids = self.visible_ids()
        return bool(ids) and self._selected == ids

    def toggle(self, book_id: str) -> None:
        if book_id in self._selected:
            self._selected.discard(book_id)
        else:
            self._selected.add(book_id)

    def toggle_all(self) -> None:
        """Clear if exactly the visible books are selected, otherwise select exactly them."""
        if self.all_selected():
            self._selected.clear()
        else:
            self._selected = self.visible_ids()

    def clear_selection(self) -> None:
        self._selected.clear()

    def delete_selected(self) -> int:
        """Delete every selected book from the store, then clear the selection."""
        removed = self._store.delete_many(self._selected)
        logger.info("Bulk delete: %d selected, %d removed", len(self._selected), removed)
        self._selected.clear()
        return removed
