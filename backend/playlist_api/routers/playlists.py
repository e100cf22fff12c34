"""Playlist lookup endpoint."""
from fastapi import APIRouter, Depends, Response

from ...playlist_catalog import Found, ResourceProvider, find_by_id, load_catalog
from ..dependencies import get_resource_provider, get_settings
from ..responses import PrettyJSONResponse
from ..settings import PlaylistSettings

router = APIRouter(tags=["playlists"])


@router.get("/playlist/{playlist_id}")
def read_playlist(
    playlist_id: str,
    settings: PlaylistSettings = Depends(get_settings),
    resources: ResourceProvider = Depends(get_resource_provider),
) -> Response:
    """Return the first playlist with a matching id, or an empty body."""

    catalog = load_catalog(resources, settings.catalog_resource)
    result = find_by_id(catalog, playlist_id)
    if isinstance(result, Found):
        return PrettyJSONResponse(result.playlist.model_dump(mode="json"))
    return Response(status_code=200)
