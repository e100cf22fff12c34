"""Command line interface for the playlist API."""
from __future__ import annotations

import json

import typer

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8080"

app = typer.Typer(help="Browse playlists served by the playlist API.")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the playlist API service.",
        show_default=True,
        envvar="PLAYLIST_SERVER_API_BASE",
    )


def _echo_json(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def hello(api_base: str = _api_base_option()) -> None:
    """Call the root endpoint and print its greeting."""

    with create_client(api_base) as client:
        response = client.get("/")
        response.raise_for_status()
        typer.echo(response.text)


@app.command()
def feed(api_base: str = _api_base_option()) -> None:
    """Display the home feed document."""

    with create_client(api_base) as client:
        response = client.get("/feed")
        response.raise_for_status()
        _echo_json(response.json())


@app.command()
def playlists(api_base: str = _api_base_option()) -> None:
    """Display the playlist summaries."""

    with create_client(api_base) as client:
        response = client.get("/playlists")
        response.raise_for_status()
        _echo_json(response.json())


@app.command()
def playlist(
    playlist_id: str = typer.Argument(..., help="Identifier of the playlist to show."),
    api_base: str = _api_base_option(),
) -> None:
    """Display a single playlist with its songs."""

    with create_client(api_base) as client:
        response = client.get(f"/playlist/{playlist_id}")
        response.raise_for_status()
        if not response.content:
            typer.echo("No playlist found.", err=True)
            raise typer.Exit(code=1)
        _echo_json(response.json())
