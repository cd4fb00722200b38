from .base import RepositoryError, NotFoundError, DuplicateError
from .taxonomy import ErrorCategory

__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
    "ErrorCategory",
]
