"""Total / completed / in-progress counts."""
from fastapi import APIRouter, Depends

from librolog.api.state import AppState, get_state
from librolog.core.status import summarize

router = APIRouter()


@router.get("/")
def get_summary(state: AppState = Depends(get_state)):
    s = summarize(state.store.books)
    return {"total": s.total, "completed": s.completed, "inProgress": s.in_progress}
