"""List view state: filter, search text, selection, and bulk delete."""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from librolog.api.state import AppState, get_state
from librolog.core.book_list import BookListView
from librolog.core.book_store import book_to_dict
from librolog.models.book import ListFilter

router = APIRouter()


class ListParamsBody(BaseModel):
    filter: Optional[ListFilter] = None
    query: Optional[str] = None


def _view_to_dict(view: BookListView) -> dict:
    books = view.visible()
    return {
        "filter": view.list_filter.value,
        "query": view.query,
        "books": [book_to_dict(b) for b in books],
        "selected": sorted(view.selected),
        "allSelected": view.all_selected(),
    }


@router.get("/")
def get_list(state: AppState = Depends(get_state)):
    return _view_to_dict(state.list_view)


@router.put("/params")
def set_params(body: ListParamsBody, state: AppState = Depends(get_state)):
    """Change filter and/or search text. Clears the selection when either changes."""
    state.list_view.set_params(list_filter=body.filter, query=body.query)
    return _view_to_dict(state.list_view)


@router.post("/toggle/{book_id}")
def toggle(book_id: str, state: AppState = Depends(get_state)):
    state.list_view.toggle(book_id)
    return _view_to_dict(state.list_view)


@router.post("/toggle-all")
def toggle_all(state: AppState = Depends(get_state)):
    state.list_view.toggle_all()
    return _view_to_dict(state.list_view)


@router.post("/delete-selected")
def delete_selected(state: AppState = Depends(get_state)):
    deleted = state.list_view.delete_selected()
    return {"deleted": deleted, **_view_to_dict(state.list_view)}
