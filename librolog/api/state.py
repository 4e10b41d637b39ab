"""Shared application state (injected into routes)."""
from typing import Optional

from librolog.core.book_list import BookListView
from librolog.core.book_store import BookStorage, BookStore, JsonBookStorage
from librolog.core.enrichment import Enrichment, GoogleBooksClient


class AppState:
    def __init__(
        self,
        storage: Optional[BookStorage] = None,
        enrichment: Optional[Enrichment] = None,
    ) -> None:
        self.store = BookStore(storage if storage is not None else JsonBookStorage())
        self.list_view = BookListView(self.store)
        self._enrichment = enrichment

    def load_books(self) -> None:
        self.store.load()
        self.list_view.clear_selection()

    @property
    def enrichment(self) -> Enrichment:
        if self._enrichment is None:
            self._enrichment = GoogleBooksClient()
        return self._enrichment


_state = AppState()


def get_state() -> AppState:
    return _state
