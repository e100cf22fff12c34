"""Console entry point for ``python -m backend.playlist_cli``."""
from __future__ import annotations

from .app import app


def main() -> None:
    """Run the playlist CLI under its installed script name."""

    app(prog_name="playlist-cli")


if __name__ == "__main__":
    main()
