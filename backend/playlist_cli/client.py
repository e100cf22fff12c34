"""HTTP client helpers for the playlist CLI."""
from __future__ import annotations

import httpx

USER_AGENT = "playlist-cli/0.1.0"


def create_client(base_url: str, *, timeout: float = 10.0, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Return an HTTPX client for the playlist API rooted at ``base_url``.

    Trailing slashes on the base are dropped so ``/playlist/{id}`` paths join
    cleanly, and every request identifies itself with ``USER_AGENT``.
    """

    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        transport=transport,
        headers={"User-Agent": USER_AGENT},
    )
