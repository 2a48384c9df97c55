"""Catalog error hierarchy."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class NotFoundError(CatalogError):
    """Raised when a node, category or product does not resolve."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} '{key}' not found")


class InvalidArgumentError(CatalogError, ValueError):
    """Raised when a caller passes malformed arguments (e.g. page < 1)."""


class StorageError(CatalogError):
    """Raised when the underlying store fails (timeouts, connectivity)."""


class ConflictError(CatalogError):
    """Raised when a write collides with existing data (e.g. a taken URL segment)."""
