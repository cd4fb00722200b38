"""
Translate failures into the uniform error payload returned by the API.

All exception handlers go through `build_error_response`, so every error body
has the same shape regardless of where the failure came from:

    {
        "status": 400,
        "error": "Bad Request",
        "code": "VALIDATION",
        "message": "The name cannot be blank.",
        "path": "/frameworks",
        "timestamp": "2025-10-19T12:00:00.000000+00:00",
        "request_id": "5b0c...",
        "errors": [{"field": "name", "message": "The name cannot be blank."}]
    }
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

from ..core.logging.filters import get_request_id
from .taxonomy import ErrorCategory

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."
MALFORMED_REQUEST_MESSAGE = "Malformed request body."
VALIDATION_FALLBACK_MESSAGE = "Validation error."

# Pydantic error types meaning "the body does not have the expected shape at all".
# Only applied to errors located in the request body; the same types on query or
# path parameters are ordinary validation failures.
MALFORMED_ERROR_TYPES = frozenset({
    "json_invalid",
    "json_type",
    "missing",
    "model_type",
    "model_attributes_type",
    "dict_type",
    "string_type",
    "int_type",
    "float_type",
    "bool_type",
    "list_type",
})


# -----------------------
# Validation error helpers
# -----------------------

def _field_name(loc: Sequence[Any]) -> str:
    """
    ("body", "name") -> "name", ("query", "name") -> "name", ("body",) -> "body".
    """
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts) or "request"


def _field_message(error: dict) -> str:
    """
    Prefer the message of a ValueError raised by our own validators; pydantic
    otherwise prefixes it with 'Value error, '.
    """
    ctx = error.get("ctx") or {}
    original = ctx.get("error")
    if isinstance(original, Exception):
        return str(original)
    if error.get("type") == "json_invalid":
        return "Invalid JSON."
    return str(error.get("msg") or VALIDATION_FALLBACK_MESSAGE)


def field_errors(errors: Iterable[dict]) -> list[dict[str, str]]:
    """Flatten pydantic/FastAPI error dicts into [{field, message}, ...]."""
    return [{"field": _field_name(e.get("loc", ())), "message": _field_message(e)} for e in errors]


def classify_validation_errors(errors: Sequence[dict]) -> ErrorCategory:
    """
    MALFORMED_REQUEST when any body error means the payload could not be parsed
    into the expected shape, VALIDATION otherwise.
    """
    for error in errors:
        loc = error.get("loc", ())
        located_in_body = bool(loc) and loc[0] == "body"
        if located_in_body and error.get("type") in MALFORMED_ERROR_TYPES:
            return ErrorCategory.MALFORMED_REQUEST
    return ErrorCategory.VALIDATION


# -----------------------
# Payload builder
# -----------------------

def build_error_response(
    category: ErrorCategory,
    message: str,
    *,
    path: str,
    errors: list[dict[str, str]] | None = None,
) -> dict:
    return {
        "status": category.status_code,
        "error": category.reason,
        "code": category.value,
        "message": message,
        "path": path,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": get_request_id(),
        "errors": errors,
    }


def validation_error_response(raw_errors: Sequence[dict], *, path: str) -> tuple[ErrorCategory, dict]:
    """
    Build the payload for a request that failed schema/parameter validation.
    The top-level message is the first field message; `errors` lists them all.
    """
    category = classify_validation_errors(raw_errors)
    items = field_errors(raw_errors)
    if category is ErrorCategory.MALFORMED_REQUEST:
        message = MALFORMED_REQUEST_MESSAGE
    else:
        message = items[0]["message"] if items else VALIDATION_FALLBACK_MESSAGE
    logger.info(
        "mapper.request_rejected",
        extra={"category": category.value, "path": path, "fields": [i["field"] for i in items]},
    )
    return category, build_error_response(category, message, path=path, errors=items)


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "MALFORMED_REQUEST_MESSAGE",
    "field_errors",
    "classify_validation_errors",
    "build_error_response",
    "validation_error_response",
]
