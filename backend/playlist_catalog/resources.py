"""Read-only providers for bundled JSON resources."""
from __future__ import annotations

from importlib.resources import files
from pathlib import Path, PurePosixPath
from typing import Protocol

from .errors import MalformedCatalog, ResourceNotFound

DEFAULT_PACKAGE = "backend.playlist_catalog"
DEFAULT_DIRECTORY = "data"


class ResourceProvider(Protocol):
    """Supplies the text of a named resource."""

    def read_text(self, name: str) -> str:
        """Return the resource contents.

        Raises ``ResourceNotFound`` when absent and ``MalformedCatalog`` when
        the bytes are not UTF-8.
        """


def _checked_name(name: str) -> PurePosixPath:
    candidate = PurePosixPath(name)
    if not name or candidate.is_absolute() or ".." in candidate.parts:
        raise ResourceNotFound(name)
    return candidate


def _decode(name: str, raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedCatalog(name, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


class PackageResourceProvider:
    """Reads resources shipped inside a Python package."""

    def __init__(self, package: str = DEFAULT_PACKAGE, directory: str = DEFAULT_DIRECTORY) -> None:
        self._package = package
        self._directory = directory

    def read_text(self, name: str) -> str:
        resource = files(self._package).joinpath(self._directory)
        for part in _checked_name(name).parts:
            resource = resource.joinpath(part)
        if not resource.is_file():
            raise ResourceNotFound(name)
        return _decode(name, resource.read_bytes())


class DirectoryResourceProvider:
    """Reads resources from a directory on disk."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def read_text(self, name: str) -> str:
        path = (self._root / _checked_name(name)).resolve()
        if not path.is_relative_to(self._root) or not path.is_file():
            raise ResourceNotFound(name)
        return _decode(name, path.read_bytes())
