"""Persist and load reading-log books (JSON), and the in-memory store over them."""
import json
import logging
import uuid
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from librolog.config import BOOKS_PATH
from librolog.models.book import Book

logger = logging.getLogger(__name__)


def _date_or_none(value) -> Optional[date]:
    return date.fromisoformat(value) if value else None


def book_to_dict(b: Book) -> dict:
    """Serialize with the stored field names; dates as yyyy-MM-dd."""
    return {
        "id": b.id,
        "title": b.title,
        "imageUrl": b.image_url,
        "rating": b.rating,
        "logDate": b.log_date.isoformat(),
        "startDate": b.start_date.isoformat(),
        "endDate": b.end_date.isoformat() if b.end_date else None,
        "review": b.review,
        "quotes": [q for q in b.quotes if q.strip()],
        "description": b.description,
        "category": b.category,
    }


def _optional_str(item: dict, key: str) -> Optional[str]:
    value = item.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key} must be a string or null")
    return value


def book_from_dict(item: dict) -> Book:
    """Inverse of book_to_dict. Raises on malformed input."""
    title = item["title"]
    if not isinstance(title, str) or not title.strip():
        raise ValueError("title must be a non-empty string")
    quotes = item.get("quotes") or []
    if not isinstance(quotes, list) or not all(isinstance(q, str) for q in quotes):
        raise ValueError("quotes must be a list of strings")
    rating = item.get("rating")
    return Book(
        id=str(item["id"]),
        title=title,
        image_url=_optional_str(item, "imageUrl") or "",
        rating=int(rating) if rating is not None else None,
        log_date=date.fromisoformat(item["logDate"]),
        start_date=date.fromisoformat(item["startDate"]),
        end_date=_date_or_none(item.get("endDate")),
        review=_optional_str(item, "review"),
        quotes=list(quotes),
        description=_optional_str(item, "description"),
        category=_optional_str(item, "category"),
    )


def normalize_book(b: Book) -> Book:
    """Apply write-time rules: no rating while in progress, no blank quotes."""
    return replace(
        b,
        rating=b.rating if b.end_date is not None else None,
        quotes=[q for q in b.quotes if q.strip()],
    )


def books_from_data(data, source: str = "snapshot") -> List[Book]:
    """Parse a decoded snapshot into books that satisfy the write-time rules.

    Malformed entries are skipped and duplicate ids get a fresh id, so one
    bad entry never costs the rest of the collection.
    """
    if not isinstance(data, list):
        logger.warning("Unexpected format in %s, starting empty", source)
        return []
    out: List[Book] = []
    seen = set()
    for item in data:
        try:
            book = normalize_book(book_from_dict(item))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed book entry in %s: %s", source, e)
            continue
        if book.id in seen:
            new_id = new_book_id(seen)
            logger.warning("Duplicate book id %s in %s, reassigned to %s", book.id, source, new_id)
            book = replace(book, id=new_id)
        seen.add(book.id)
        out.append(book)
    return out


class BookStorage(Protocol):
    """Durable snapshot of the whole collection."""

    def load(self) -> List[Book]: ...

    def save(self, books: List[Book]) -> None: ...


class JsonBookStorage:
    """Snapshot stored as a JSON array in a single file."""

    def __init__(self, path: Path = BOOKS_PATH) -> None:
        self.path = Path(path)

    def load(self) -> List[Book]:
        """Load all books from disk.

        A missing or unreadable file yields an empty collection. This drops
        whatever the corrupt file held on the next save, so it is logged.
        """
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s, starting empty: %s", self.path, e)
            return []
        return books_from_data(data, source=str(self.path))

    def save(self, books: List[Book]) -> None:
        """Overwrite the snapshot with the full collection."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [book_to_dict(b) for b in books]
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


class MemoryBookStorage:
    """Storage that keeps the serialized snapshot in memory."""

    def __init__(self, raw: Optional[str] = None) -> None:
        self.raw = raw

    def load(self) -> List[Book]:
        if self.raw is None:
            return []
        try:
            data = json.loads(self.raw)
        except json.JSONDecodeError as e:
            logger.warning("Could not parse in-memory snapshot, starting empty: %s", e)
            return []
        return books_from_data(data, source="in-memory snapshot")

    def save(self, books: List[Book]) -> None:
        self.raw = json.dumps([book_to_dict(b) for b in books])


def get_book_by_id(books: Iterable[Book], book_id: str) -> Optional[Book]:
    """Return book by id or None."""
    for b in books:
        if b.id == book_id:
            return b
    return None


def new_book_id(existing: Iterable[str] = ()) -> str:
    taken = set(existing)
    book_id = str(uuid.uuid4())
    while book_id in taken:
        book_id = str(uuid.uuid4())
    return book_id


class BookStore:
    """Authoritative collection of books; every mutation is written through to storage."""

    def __init__(self, storage: BookStorage) -> None:
        self._storage = storage
        self._books: List[Book] = []

    @property
    def books(self) -> List[Book]:
        """Snapshot of the collection in insertion order."""
        return list(self._books)

    def load(self) -> List[Book]:
        self._books = self._storage.load()
        logger.info("Loaded %d books", len(self._books))
        return self.books

    def save(self) -> None:
        self._storage.save(self._books)

    def get(self, book_id: str) -> Optional[Book]:
        return get_book_by_id(self._books, book_id)

    def create(self, book: Book) -> Book:
        """Append a new book and save.

        An empty id is replaced by a fresh one, as is an id already in use.
        """
        if book.id and self.get(book.id) is not None:
            logger.warning("Book id %s already exists, assigning a new one", book.id)
            book = replace(book, id="")
        if not book.id:
            book = replace(book, id=new_book_id(b.id for b in self._books))
        book = normalize_book(book)
        self._books.append(book)
        self.save()
        logger.debug("Created book %s", book.id)
        return book

    def update(self, book: Book) -> Optional[Book]:
        """Replace the book with the same id and save. Unknown ids leave the collection as is."""
        for i, b in enumerate(self._books):
            if b.id == book.id:
                updated = normalize_book(book)
                self._books[i] = updated
                self.save()
                return updated
        logger.debug("Update ignored, no book %s", book.id)
        return None

    def delete(self, book_id: str) -> bool:
        """Remove book by id; save. Returns True if found and removed."""
        return self.delete_many({book_id}) > 0

    def delete_many(self, book_ids: Iterable[str]) -> int:
        """Remove every book whose id is in book_ids; save. Returns number removed."""
        ids = set(book_ids)
        kept = [b for b in self._books if b.id not in ids]
        removed = len(self._books) - len(kept)
        if removed:
            self._books = kept
            self.save()
            logger.info("Deleted %d book(s)", removed)
        return removed
