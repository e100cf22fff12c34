"""HTTP API serving the bundled playlist catalog."""

from .app import create_app

__all__ = ["create_app"]
