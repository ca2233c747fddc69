"""Catalog-level exceptions.

Lookup misses are expressed as NotFoundError so the HTTP layer can map them
uniformly. Storage failures are not wrapped; they propagate unchanged.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class NotFoundError(CatalogError):
    """A requested resource does not exist."""

    def __init__(self, resource: str, identifier: object) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found with id: {identifier}")
