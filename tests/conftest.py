from datetime import date
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from librolog.api.app import app
from librolog.api.state import AppState, get_state
from librolog.core.book_store import BookStore, JsonBookStorage
from librolog.models.book import Book, BookDetails, Recommendation


def make_book(
    book_id: str,
    title: str = "Untitled",
    log_date: date = date(2024, 3, 5),
    end_date: Optional[date] = None,
    **kwargs,
) -> Book:
    return Book(
        id=book_id,
        title=title,
        log_date=log_date,
        start_date=kwargs.pop("start_date", log_date),
        end_date=end_date,
        **kwargs,
    )


class FakeEnrichment:
    """Returns canned results and records the calls it received."""

    def __init__(self, details: Optional[BookDetails] = None, recommendation: Optional[Recommendation] = None):
        self.details = details
        self.recommendation = recommendation
        self.lookups: List[str] = []
        self.recommendation_calls: List[List[str]] = []

    def lookup_book_details(self, title: str) -> Optional[BookDetails]:
        self.lookups.append(title)
        return self.details

    def daily_recommendation(self, in_progress_titles: List[str]) -> Optional[Recommendation]:
        self.recommendation_calls.append(list(in_progress_titles))
        return self.recommendation


@pytest.fixture
def books_path(tmp_path):
    return tmp_path / "data" / "librolog_books.json"


@pytest.fixture
def store(books_path):
    s = BookStore(JsonBookStorage(books_path))
    s.load()
    return s


@pytest.fixture
def enrichment():
    return FakeEnrichment()


@pytest.fixture
def state(books_path, enrichment):
    s = AppState(storage=JsonBookStorage(books_path), enrichment=enrichment)
    s.load_books()
    return s


@pytest.fixture
def client(state):
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()
