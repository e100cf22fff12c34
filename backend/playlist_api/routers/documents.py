"""Endpoints re-emitting bundled JSON documents as they are stored."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...playlist_catalog import ResourceProvider, load_document
from ..dependencies import get_resource_provider, get_settings
from ..settings import PlaylistSettings

router = APIRouter(tags=["documents"])


@router.get("/feed")
def read_feed(
    settings: PlaylistSettings = Depends(get_settings),
    resources: ResourceProvider = Depends(get_resource_provider),
) -> JSONResponse:
    """Return the home feed document."""

    return JSONResponse(load_document(resources, settings.feed_resource))


@router.get("/playlists")
def read_playlist_summaries(
    settings: PlaylistSettings = Depends(get_settings),
    resources: ResourceProvider = Depends(get_resource_provider),
) -> JSONResponse:
    """Return the playlist summary document."""

    return JSONResponse(load_document(resources, settings.summary_resource))
