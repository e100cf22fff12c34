"""Command line client for the playlist API."""
