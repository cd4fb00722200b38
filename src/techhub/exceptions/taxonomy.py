"""
Error categories exposed to API clients.

Every failure that reaches a client is classified into exactly one category.
The category decides the HTTP status and the machine-readable `code` label
carried in the error payload; these labels are part of the public contract
and must stay stable.
"""

from enum import Enum
from http import HTTPStatus


class ErrorCategory(str, Enum):
    VALIDATION = "VALIDATION"
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CONFLICT = "CONFLICT"
    INTERNAL = "INTERNAL"

    @property
    def status(self) -> HTTPStatus:
        return _CATEGORY_STATUS[self]

    @property
    def status_code(self) -> int:
        return self.status.value

    @property
    def reason(self) -> str:
        """HTTP reason phrase, e.g. 'Conflict'."""
        return self.status.phrase

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorCategory":
        """
        Pick a category for a bare HTTP status (used for framework-level HTTP errors
        such as unknown routes). Unknown 4xx statuses fall back to VALIDATION,
        anything else to INTERNAL.
        """
        for category, status in _CATEGORY_STATUS.items():
            if status.value == status_code and category is not cls.MALFORMED_REQUEST:
                return category
        if 400 <= status_code < 500:
            return cls.VALIDATION
        return cls.INTERNAL


_CATEGORY_STATUS: dict[ErrorCategory, HTTPStatus] = {
    ErrorCategory.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorCategory.MALFORMED_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorCategory.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCategory.METHOD_NOT_ALLOWED: HTTPStatus.METHOD_NOT_ALLOWED,
    ErrorCategory.CONFLICT: HTTPStatus.CONFLICT,
    ErrorCategory.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}

__all__ = ["ErrorCategory"]
