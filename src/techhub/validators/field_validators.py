"""
Field-level checks shared by the request schemas and the query/path parameters.

Each check receives an already-trimmed value and either returns it or raises
ValueError with the client-facing message. Pydantic wraps the ValueError into a
`value_error` entry, and the error mapper reports the message per field.
"""

import re

# At least one character that is not a decimal digit ("123" is rejected, "web2" is fine).
_NON_DIGIT = re.compile(r"\D")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
VERSION_MIN_LENGTH = 1
VERSION_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 1000


def has_non_digit(value: str) -> bool:
    return _NON_DIGIT.search(value) is not None


def check_framework_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("The name cannot be blank.")
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise ValueError(
            f"The name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters."
        )
    if not has_non_digit(value):
        raise ValueError("The name cannot consist only of numbers.")
    return value


def check_current_version(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("The current version cannot be blank.")
    if not VERSION_MIN_LENGTH <= len(value) <= VERSION_MAX_LENGTH:
        raise ValueError(
            f"The current version must be between {VERSION_MIN_LENGTH} and {VERSION_MAX_LENGTH} characters."
        )
    return value


def check_description(value: str | None) -> str | None:
    """Blank descriptions are stored as absent."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"The description must be at most {DESCRIPTION_MAX_LENGTH} characters.")
    return value


def check_name_query(value: str | None) -> str | None:
    """
    Validate the optional `?name=` search parameter.

    None means "parameter not sent" and is passed through (plain listing).
    A sent-but-blank or all-digit value is rejected.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("The 'name' parameter cannot be blank.")
    if not has_non_digit(value):
        raise ValueError("The 'name' parameter cannot consist only of numbers.")
    return value


def check_positive_id(value: int) -> int:
    if value <= 0:
        raise ValueError("The 'id' must be a positive number.")
    return value


__all__ = [
    "has_non_digit",
    "check_framework_name",
    "check_current_version",
    "check_description",
    "check_name_query",
    "check_positive_id",
]
