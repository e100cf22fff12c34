"""Router exports for the playlist API."""
from . import documents, playlists, root

__all__ = ["documents", "playlists", "root"]
