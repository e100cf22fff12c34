"""Tests for the Typer-based playlist CLI."""
from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.playlist_api import create_app  # noqa: E402
from backend.playlist_api.settings import PlaylistSettings  # noqa: E402
from backend.playlist_cli import client as client_module  # noqa: E402

cli_app_module = importlib.import_module("backend.playlist_cli.app")
cli_app = cli_app_module.app


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def cli_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """Provide a TestClient and patch the CLI HTTP client factory."""

    resources = tmp_path / "resources"
    resources.mkdir()
    (resources / "playlists.json").write_text(
        json.dumps(
            [
                {
                    "id": 11,
                    "songs": [
                        {"name": "Intro", "lyric": "", "src": "intro.mp3", "length": "0:45"}
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )
    (resources / "feed.json").write_text('{"sections": []}', encoding="utf-8")
    (resources / "playlist.json").write_text('[{"id": 11, "name": "Demo"}]', encoding="utf-8")

    settings = PlaylistSettings(resource_dir=resources, static_dir=tmp_path)
    test_client = TestClient(create_app(settings=settings))

    def _factory(base_url: str, *, timeout: float = 10.0, transport: Any = None):  # type: ignore[override]
        return test_client

    monkeypatch.setattr(client_module, "create_client", _factory)
    monkeypatch.setattr(cli_app_module, "create_client", _factory)
    return test_client


def test_cli_hello_prints_greeting(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["hello"])

    assert result.exit_code == 0
    assert "Hello World!" in result.output


def test_cli_feed_prints_document(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["feed"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"sections": []}


def test_cli_playlists_prints_summaries(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["playlists"])

    assert result.exit_code == 0
    assert json.loads(result.output) == [{"id": 11, "name": "Demo"}]


def test_cli_playlist_prints_songs(runner: CliRunner, cli_client: TestClient) -> None:
    """The playlist command should pretty-print a matching playlist."""

    result = runner.invoke(cli_app, ["playlist", "11"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["id"] == 11
    assert payload["songs"][0]["name"] == "Intro"


def test_cli_playlist_reports_missing_id(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["playlist", "99"])

    assert result.exit_code == 1
    assert "No playlist found." in result.output


def test_create_client_sends_user_agent_and_joins_paths() -> None:
    """Requests carry the CLI user agent and tolerate a trailing slash on the base."""

    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="Hello World!")

    with client_module.create_client(
        "http://playlists.test/", transport=httpx.MockTransport(handler)
    ) as client:
        client.get("/playlist/2")

    assert str(seen[0].url) == "http://playlists.test/playlist/2"
    assert seen[0].headers["User-Agent"] == client_module.USER_AGENT
