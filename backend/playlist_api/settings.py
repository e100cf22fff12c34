"""Runtime configuration for the playlist API."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_STATIC_SONGS = Path(__file__).resolve().parent / "static" / "songs"


class PlaylistSettings(BaseSettings):
    """Environment-aware settings for the playlist API service."""

    host: str = Field("0.0.0.0", description="Interface the development server binds to.")
    port: int = Field(8080, description="Port the development server listens on.")
    resource_dir: Path | None = Field(
        default=None,
        description="Directory holding the JSON documents; bundled package data when unset.",
    )
    static_dir: Path = Field(
        default=PACKAGE_STATIC_SONGS,
        description="Directory served under /songs.",
    )
    feed_resource: str = Field("feed.json", description="Document returned by /feed.")
    summary_resource: str = Field("playlist.json", description="Document returned by /playlists.")
    catalog_resource: str = Field(
        "playlists.json", description="Catalog document searched by /playlist/{id}."
    )
    log_level: str = Field("INFO", description="Root logger level for the server process.")

    model_config = SettingsConfigDict(
        env_prefix="PLAYLIST_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
