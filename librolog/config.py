"""Configuration: env, data paths, enrichment credentials."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of librolog package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so GOOGLE_BOOKS_API_KEY etc. are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("LIBROLOG_DATA_DIR", str(BASE_DIR / "data")))
BOOKS_PATH = Path(os.getenv("LIBROLOG_BOOKS_PATH", str(DATA_DIR / "librolog_books.json")))

# API
API_HOST = os.getenv("LIBROLOG_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("LIBROLOG_API_PORT", "8000"))
API_RELOAD = os.getenv("LIBROLOG_API_RELOAD", "0").lower() in ("1", "true", "yes")
# Web front-end origin(s) allowed by CORS, comma separated; empty means any
LIBROLOG_WEB_ORIGIN = os.getenv("LIBROLOG_WEB_ORIGIN", "")

# Enrichment (Google Books). No key means lookups are disabled.
GOOGLE_BOOKS_API_KEY = os.getenv("GOOGLE_BOOKS_API_KEY", "")
GOOGLE_BOOKS_URL = "https://www.googleapis.com/books/v1/volumes"
ENRICHMENT_TIMEOUT = float(os.getenv("LIBROLOG_ENRICHMENT_TIMEOUT", "10"))

# Views
CALENDAR_VISIBLE_PER_DAY = 3
CURRENTLY_READING_LIMIT = 3
WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def web_origins() -> list[str]:
    if not LIBROLOG_WEB_ORIGIN:
        return ["*"]
    return [o.strip() for o in LIBROLOG_WEB_ORIGIN.split(",") if o.strip()]
