"""JSON catalog of job descriptions and user resumes."""

from .exceptions import CatalogError, MalformedRecordError, RecordNotFoundError
from .store import CatalogStore
from .validators import validate_job_description

__all__ = [
    "CatalogStore",
    "validate_job_description",
    "CatalogError",
    "RecordNotFoundError",
    "MalformedRecordError",
]
