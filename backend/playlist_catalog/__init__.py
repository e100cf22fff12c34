"""Typed playlist catalog loading and id lookup."""

from .errors import CatalogError, MalformedCatalog, ResourceNotFound
from .loader import load_catalog, load_document
from .lookup import NOT_FOUND, Found, LookupResult, NotFound, find_by_id
from .models import Catalog, Playlist, Song
from .resources import DirectoryResourceProvider, PackageResourceProvider, ResourceProvider

__all__ = [
    "Catalog",
    "CatalogError",
    "DirectoryResourceProvider",
    "Found",
    "LookupResult",
    "MalformedCatalog",
    "NOT_FOUND",
    "NotFound",
    "PackageResourceProvider",
    "Playlist",
    "ResourceNotFound",
    "ResourceProvider",
    "Song",
    "find_by_id",
    "load_catalog",
    "load_document",
]
