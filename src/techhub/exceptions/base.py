"""
Errors raised by the store.

Each error carries a short `error_code`; the HTTP layer turns it into an
ErrorCategory (and therefore a status) without knowing about concrete classes.
"""

from typing import Iterable

from .taxonomy import ErrorCategory


class RepositoryError(Exception):
    """
    Base class for store failures.

    - message: client-safe text, returned as-is in the error payload
    - fields: names of the input fields involved (e.g. ['name'])
    - error_code: 'duplicate' | 'not_found'
    """

    ERROR_CODE_TO_CATEGORY = {
        "duplicate": ErrorCategory.CONFLICT,
        "not_found": ErrorCategory.NOT_FOUND,
    }

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.error_code = error_code

    def __str__(self) -> str:
        details = []
        if self.fields:
            details.append(f"fields: {', '.join(self.fields)}")
        if self.error_code:
            details.append(f"code: {self.error_code}")
        return f"{self.message} ({'; '.join(details)})" if details else self.message

    @property
    def category(self) -> ErrorCategory:
        # unknown codes are bad input, never a server fault
        return self.ERROR_CODE_TO_CATEGORY.get(self.error_code or "", ErrorCategory.VALIDATION)

    def http_status(self) -> int:
        return self.category.status_code


class NotFoundError(RepositoryError):
    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields, error_code="not_found")

    @classmethod
    def for_id(cls, model_name: str, entity_id: int) -> "NotFoundError":
        return cls(f"{model_name} with ID {entity_id} not found.", fields=["id"])


class DuplicateError(RepositoryError):
    """
    A live record already holds the uniqueness key. `conflict_id` is the id of
    that record; it is logged but never sent to clients.
    """

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 conflict_id: int | None = None):
        super().__init__(message, fields=fields, error_code="duplicate")
        self.conflict_id = conflict_id


__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DuplicateError",
]
