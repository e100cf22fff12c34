"""Pydantic models describing the playlist catalog document."""
from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_DECIMAL_ID = re.compile(r"-?(0|[1-9][0-9]*)")


def _unquote_id(value: Any) -> Any:
    """Accept ids written as quoted decimal literals, e.g. ``"7"``."""

    if isinstance(value, str) and _DECIMAL_ID.fullmatch(value):
        return int(value)
    return value


PlaylistId = Annotated[StrictInt, BeforeValidator(_unquote_id), Field(ge=LONG_MIN, le=LONG_MAX)]


class Song(BaseModel):
    """Display and playback metadata for a single track."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr = Field(..., description="Track title.")
    lyric: StrictStr = Field(..., description="Lyric text, possibly empty.")
    src: StrictStr = Field(..., description="URI or path of the audio resource.")
    length: StrictStr = Field(..., description="Formatted duration, e.g. 3:00.")


class Playlist(BaseModel):
    """An ordered group of songs identified by a 64-bit integer id."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: PlaylistId
    songs: tuple[Song, ...] = Field(..., description="Songs in display order.")


Catalog = tuple[Playlist, ...]

CATALOG_ADAPTER: TypeAdapter[Catalog] = TypeAdapter(Catalog)
