"""Catalog exceptions.

All catalog exceptions inherit from CatalogError for easy catching.
"""


class CatalogError(Exception):
    """Base exception for catalog (JSON file store) errors."""

    pass


class RecordNotFoundError(CatalogError):
    """Raised when a job description or resume file does not exist."""

    pass


class MalformedRecordError(CatalogError):
    """Raised when a catalog file is not valid JSON or not a JSON object."""

    pass
