"""Book detail lookup and daily recommendation (best effort; null when unavailable)."""
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from librolog.api.state import AppState, get_state
from librolog.core.status import in_progress_titles

router = APIRouter()


@router.get("/details")
def get_details(title: str = Query(min_length=1), state: AppState = Depends(get_state)):
    details = state.enrichment.lookup_book_details(title)
    if details is None:
        return None
    return {
        "description": details.description,
        "category": details.category,
        "imageUrl": details.image_url,
    }


@router.get("/recommendation")
def get_recommendation(state: AppState = Depends(get_state)):
    rec = state.enrichment.daily_recommendation(in_progress_titles(state.store.books))
    return asdict(rec) if rec is not None else None
