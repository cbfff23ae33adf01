"""
FastAPI application: the /api/search endpoint plus the static front-end.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from sglocate import __version__
from sglocate.client import SearchGateway
from sglocate.config import Settings, load_settings
from sglocate.models import parse_page

logger = logging.getLogger(__name__)


def _resolve_static(static_dir: Path, path: str) -> Optional[Path]:
    """Return the file for *path* under *static_dir*, or index.html, or None."""
    root = static_dir.resolve()
    if path:
        try:
            candidate = (root / path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return candidate
        except (OSError, ValueError):
            # e.g. embedded null bytes; serve the front-end page instead
            logger.debug(f"Unresolvable static path {path!r}")
    index = root / "index.html"
    return index if index.is_file() else None


def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[SearchGateway] = None,
) -> FastAPI:
    """Build the application around an explicitly configured gateway."""
    if settings is None:
        settings = load_settings()
    if gateway is None:
        gateway = SearchGateway.from_settings(settings)
    static_dir = settings.static_dir

    app = FastAPI(
        title="sglocate",
        description="Singapore address and postal code search",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/search")
    def api_search(q: Optional[str] = None, page: Optional[str] = None):
        """Search OneMap; responds with a JSON array of location records."""
        if not q or not q.strip():
            return JSONResponse(
                status_code=400,
                content={"error": 'Query parameter "q" is required'},
            )
        try:
            records = gateway.search(q, parse_page(page))
            return [record.to_dict() for record in records]
        except Exception:
            logger.exception(f"API error while searching for {q!r}")
            return JSONResponse(
                status_code=500, content={"error": "Internal Server Error"}
            )

    @app.get("/{path:path}", include_in_schema=False)
    def frontend(path: str):
        """Serve static assets, falling back to the front-end page."""
        target = _resolve_static(static_dir, path)
        if target is None:
            return JSONResponse(status_code=404, content={"error": "Not Found"})
        return FileResponse(target)

    return app


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = load_settings()
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    app = create_app(settings)
    logger.info(f"Server is running at http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
