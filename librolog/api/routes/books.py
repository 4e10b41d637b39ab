"""Books CRUD, filtered listing, and enrichment of a stored book."""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, field_validator

from librolog.api.state import AppState, get_state
from librolog.core.book_list import filter_books
from librolog.core.book_store import book_to_dict
from librolog.core.enrichment import enrich_book
from librolog.core.status import currently_reading
from librolog.models.book import Book, ListFilter

router = APIRouter()


class BookBody(BaseModel):
    """Editor payload. Field names match the stored layout."""
    id: Optional[str] = None
    title: str = Field(min_length=1)
    imageUrl: str = ""
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    logDate: date
    startDate: Optional[date] = None
    endDate: Optional[date] = None
    review: Optional[str] = None
    quotes: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    category: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v.strip()

    def to_book(self, book_id: str) -> Book:
        return Book(
            id=book_id,
            title=self.title,
            image_url=self.imageUrl,
            rating=self.rating,
            log_date=self.logDate,
            start_date=self.startDate or self.logDate,
            end_date=self.endDate,
            review=self.review,
            quotes=self.quotes,
            description=self.description,
            category=self.category,
        )


@router.get("/")
def list_books(
    list_filter: ListFilter = Query(default=ListFilter.ALL, alias="filter"),
    q: str = Query(default=""),
    state: AppState = Depends(get_state),
):
    """Books matching the status filter and search text, in stored order."""
    return [book_to_dict(b) for b in filter_books(state.store.books, list_filter, q)]


@router.get("/current")
def list_current(state: AppState = Depends(get_state)):
    """The first few books still being read."""
    return [book_to_dict(b) for b in currently_reading(state.store.books)]


@router.post("/")
def create_book(body: BookBody, state: AppState = Depends(get_state)):
    """Create a book. A missing id is generated."""
    book = state.store.create(body.to_book(body.id or ""))
    return book_to_dict(book)


@router.get("/{book_id}")
def get_book(book_id: str, state: AppState = Depends(get_state)):
    book = state.store.get(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book_to_dict(book)


@router.put("/{book_id}")
def replace_book(book_id: str, body: BookBody, state: AppState = Depends(get_state)):
    """Replace a book wholesale. The id in the path wins over any id in the body."""
    updated = state.store.update(body.to_book(book_id))
    if updated is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book_to_dict(updated)


@router.delete("/{book_id}", status_code=204)
def delete_book(book_id: str, state: AppState = Depends(get_state)):
    """Delete a book. Unknown ids are ignored."""
    state.store.delete(book_id)


@router.post("/{book_id}/enrich")
def enrich(book_id: str, state: AppState = Depends(get_state)):
    """Fill description/category from the enrichment service; the book is unchanged if nothing is found."""
    if state.store.get(book_id) is None:
        raise HTTPException(status_code=404, detail="Book not found")
    updated = enrich_book(state.store, state.enrichment, book_id)
    book = updated or state.store.get(book_id)
    return {"enriched": updated is not None, "book": book_to_dict(book)}
