"""Application factory for the playlist API."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from ..playlist_catalog import CatalogError
from .routers import documents, playlists, root
from .settings import PlaylistSettings
from .state import AppState

logger = logging.getLogger(__name__)


def create_app(settings: PlaylistSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or PlaylistSettings()
    app_state = AppState(settings=resolved_settings)

    app = FastAPI(title="Playlist Server", version="0.1.0")
    app.state.app_state = app_state

    app.add_exception_handler(CatalogError, _catalog_error_handler)

    for router in (root.router, documents.router, playlists.router):
        app.include_router(router)

    static_dir = resolved_settings.static_dir
    if static_dir.is_dir():
        app.mount("/songs", StaticFiles(directory=static_dir), name="songs")
    else:
        logger.warning("Static directory %s does not exist; /songs is disabled", static_dir)

    return app


def _catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.error("Failed to serve %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "resource": exc.resource},
    )
