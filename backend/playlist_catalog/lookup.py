"""Id lookup over a decoded catalog."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Union

from .models import Playlist

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Found:
    playlist: Playlist


@dataclass(frozen=True, slots=True)
class NotFound:
    """No playlist carries the requested id."""


NOT_FOUND = NotFound()

LookupResult = Union[Found, NotFound]


def find_by_id(catalog: Iterable[Playlist], requested_id: str) -> LookupResult:
    """Return the first playlist whose id renders as ``requested_id``.

    Ids are compared as text, so ``"007"``, ``"+7"`` or ``" 7"`` never match
    playlist 7.
    """

    for playlist in catalog:
        if str(playlist.id) == requested_id:
            return Found(playlist)
    logger.debug("No playlist matches id %r", requested_id)
    return NOT_FOUND
