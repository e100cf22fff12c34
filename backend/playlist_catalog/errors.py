"""Failures raised while reading bundled catalog documents."""
from __future__ import annotations


class CatalogError(RuntimeError):
    """Base error for a bundled JSON resource that cannot be served."""

    def __init__(self, resource: str, message: str) -> None:
        super().__init__(message)
        self.resource = resource


class ResourceNotFound(CatalogError):
    """Raised when a named resource does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(resource, f"Resource '{resource}' not found")


class MalformedCatalog(CatalogError):
    """Raised when a resource is not valid JSON or has the wrong shape."""

    def __init__(self, resource: str, reason: str) -> None:
        super().__init__(resource, f"Resource '{resource}' is malformed: {reason}")
        self.reason = reason
