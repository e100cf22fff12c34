"""FastAPI dependencies for the playlist API."""
from fastapi import Depends, Request

from ..playlist_catalog import ResourceProvider
from .settings import PlaylistSettings
from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_settings(app_state: AppState = Depends(get_app_state)) -> PlaylistSettings:
    """Return the settings the application was created with."""
    return app_state.settings


def get_resource_provider(app_state: AppState = Depends(get_app_state)) -> ResourceProvider:
    """Return the provider used to read bundled JSON documents."""
    return app_state.resources
