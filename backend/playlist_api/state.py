"""Shared state container for the playlist API."""
from __future__ import annotations

from dataclasses import dataclass

from ..playlist_catalog import DirectoryResourceProvider, PackageResourceProvider, ResourceProvider
from .settings import PlaylistSettings


@dataclass(slots=True)
class AppState:
    """Read-only collaborators shared across routers."""

    settings: PlaylistSettings
    resources: ResourceProvider

    def __init__(self, settings: PlaylistSettings) -> None:
        self.settings = settings
        if settings.resource_dir is not None:
            self.resources = DirectoryResourceProvider(settings.resource_dir)
        else:
            self.resources = PackageResourceProvider()
