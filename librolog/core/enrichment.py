"""Book details and daily recommendation via the Google Books API.

Every call is best effort: no key, a network error, or an unexpected
payload all come back as None.
"""
import logging
from dataclasses import replace
from datetime import date
from typing import List, Optional, Protocol

import requests

from librolog.config import ENRICHMENT_TIMEOUT, GOOGLE_BOOKS_API_KEY, GOOGLE_BOOKS_URL
from librolog.core.book_store import BookStore
from librolog.models.book import Book, BookDetails, Recommendation

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "fiction"


class Enrichment(Protocol):
    def lookup_book_details(self, title: str) -> Optional[BookDetails]: ...

    def daily_recommendation(self, in_progress_titles: List[str]) -> Optional[Recommendation]: ...


def _volume_info(item: dict) -> dict:
    return item.get("volumeInfo") or {}


def details_from_volume(item: dict) -> Optional[BookDetails]:
    info = _volume_info(item)
    description = info.get("description") or ""
    categories = info.get("categories") or []
    category = categories[0] if categories else ""
    if not description and not category:
        return None
    image_url = (info.get("imageLinks") or {}).get("thumbnail")
    return BookDetails(description=description, category=category, image_url=image_url)


def recommendation_from_volume(item: dict) -> Optional[Recommendation]:
    info = _volume_info(item)
    title = info.get("title")
    if not title:
        return None
    authors = info.get("authors") or []
    categories = info.get("categories") or []
    return Recommendation(
        title=title,
        author=", ".join(authors),
        description=info.get("description") or "",
        category=categories[0] if categories else "",
    )


class GoogleBooksClient:
    """Thin requests-based client; disabled when no API key is configured."""

    def __init__(
        self,
        api_key: str = GOOGLE_BOOKS_API_KEY,
        timeout: float = ENRICHMENT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def _search(self, query: str, max_results: int = 10) -> List[dict]:
        if not self.enabled:
            return []
        params = {"q": query, "maxResults": min(max_results, 40), "key": self.api_key}
        try:
            response = self.session.get(GOOGLE_BOOKS_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            items = response.json().get("items") or []
        except (requests.RequestException, ValueError, AttributeError) as e:
            logger.warning("Google Books search failed for %r: %s", query, e)
            return []
        return [i for i in items if isinstance(i, dict)]

    def lookup_book_details(self, title: str) -> Optional[BookDetails]:
        """Description, category and cover for the best match on title, or None."""
        if not title.strip():
            return None
        for item in self._search(f"intitle:{title.strip()}", max_results=5):
            details = details_from_volume(item)
            if details is not None:
                return details
        return None

    def daily_recommendation(self, in_progress_titles: List[str]) -> Optional[Recommendation]:
        """One book similar to what is being read (or a well-known one), stable for the day."""
        subject = DEFAULT_SUBJECT
        if in_progress_titles:
            details = self.lookup_book_details(in_progress_titles[0])
            if details is not None and details.category:
                subject = details.category
        reading = {t.lower() for t in in_progress_titles}
        candidates = []
        for item in self._search(f"subject:{subject}", max_results=20):
            rec = recommendation_from_volume(item)
            if rec is not None and rec.title.lower() not in reading:
                candidates.append(rec)
        if not candidates:
            return None
        return candidates[date.today().toordinal() % len(candidates)]


def enrich_book(store: BookStore, client: Enrichment, book_id: str) -> Optional[Book]:
    """Fill description/category (and an empty cover) for an existing book.

    Returns the updated book, or None when the book is unknown or nothing
    was found; the stored book is left untouched in that case.
    """
    book = store.get(book_id)
    if book is None:
        return None
    details = client.lookup_book_details(book.title)
    if details is None:
        return None
    current = store.get(book_id)
    if current is None:
        return None
    return store.update(
        replace(
            current,
            description=details.description or current.description,
            category=details.category or current.category,
            image_url=current.image_url or details.image_url or "",
        )
    )
