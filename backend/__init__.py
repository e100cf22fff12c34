"""Playlist server backend packages."""
