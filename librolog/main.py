"""Run the LibroLog reading-log API with uvicorn."""
import logging
import uvicorn

from librolog.config import API_HOST, API_PORT, API_RELOAD

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
    logging.getLogger(__name__).info("Serving LibroLog on %s:%d", API_HOST, API_PORT)
    uvicorn.run(
        "librolog.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD,
    )
