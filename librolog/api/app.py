"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from librolog.api.state import AppState, get_state
from librolog.config import ensure_data_dir, web_origins

# Import routes after state to avoid circular imports
from librolog.api.routes import books, calendar, enrichment, book_list, summary

__all__ = ["app", "AppState", "get_state"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    get_state().load_books()
    logging.getLogger(__name__).info("LibroLog API ready")
    yield


app = FastAPI(
    title="LibroLog API",
    description="Local REST API for the LibroLog reading tracker",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=web_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(books.router, prefix="/api/books", tags=["books"])
app.include_router(book_list.router, prefix="/api/list", tags=["list"])
app.include_router(calendar.router, prefix="/api/calendar", tags=["calendar"])
app.include_router(summary.router, prefix="/api/summary", tags=["summary"])
app.include_router(enrichment.router, prefix="/api/enrichment", tags=["enrichment"])
