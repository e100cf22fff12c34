"""CLI entry point for launching the playlist API with Uvicorn."""
import uvicorn

from .app import create_app
from .logging_config import setup_logging
from .settings import PlaylistSettings


def main() -> None:
    """Start a development server for the playlist API."""
    settings = PlaylistSettings()
    setup_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
