"""
Helpers for loading the catalog JSON documents served by the playlist API.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from .errors import MalformedCatalog
from .models import CATALOG_ADAPTER, Catalog
from .resources import ResourceProvider

logger = logging.getLogger(__name__)


def load_document(provider: ResourceProvider, name: str) -> Any:
    """Parse a resource as JSON without checking its shape."""

    text = provider.read_text(name)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Resource %s is not valid JSON: %s", name, exc)
        raise MalformedCatalog(name, str(exc)) from exc


def load_catalog(provider: ResourceProvider, name: str) -> Catalog:
    """Decode a resource into playlists, preserving document order.

    Raises ``ResourceNotFound`` when the resource is absent and
    ``MalformedCatalog`` when it is not a JSON array of playlists. A catalog
    is returned whole or not at all.
    """

    text = provider.read_text(name)
    try:
        catalog = CATALOG_ADAPTER.validate_json(text)
    except ValidationError as exc:
        logger.warning("Resource %s failed catalog validation: %s", name, exc)
        raise MalformedCatalog(name, _summarize(exc)) from exc
    logger.debug("Loaded %d playlists from %s", len(catalog), name)
    return catalog


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']} ({exc.error_count()} error(s))"
