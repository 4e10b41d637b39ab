"""Core services: book store, calendar and list projections, enrichment."""
from librolog.core.book_list import BookListView
from librolog.core.book_store import BookStore, JsonBookStorage

__all__ = ["BookListView", "BookStore", "JsonBookStorage"]
