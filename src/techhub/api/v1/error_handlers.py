# src/techhub/api/v1/error_handlers.py
"""
FastAPI exception handlers: the only place where failures become HTTP responses.

| Exception                          | Category                                  |
| ---------------------------------- | ----------------------------------------- |
| RequestValidationError             | VALIDATION or MALFORMED_REQUEST (400)     |
| DuplicateError                     | CONFLICT (409)                            |
| NotFoundError                      | NOT_FOUND (404)                           |
| other RepositoryError              | from its error_code (400 by default)      |
| starlette HTTPException            | from its status (unknown route 404, 405)  |
| anything else                      | INTERNAL (500), details only in the logs  |

Every body is built by exceptions.mapper.build_error_response, so the shape is
identical for all of them.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from techhub.exceptions.base import RepositoryError, DuplicateError, NotFoundError
from techhub.exceptions.mapper import (
    INTERNAL_ERROR_MESSAGE,
    build_error_response,
    validation_error_response,
)
from techhub.exceptions.taxonomy import ErrorCategory

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    category, payload = validation_error_response(exc.errors(), path=request.url.path)
    return JSONResponse(status_code=category.status_code, content=payload)


async def duplicate_error_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    logger.info(
        "DuplicateError for %s %s: fields=%s conflict_id=%s",
        request.method, request.url.path, exc.fields, exc.conflict_id,
    )
    return _repository_response(request, exc)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("NotFoundError for %s %s", request.method, request.url.path)
    return _repository_response(request, exc)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.warning("RepositoryError for %s %s: %s", request.method, request.url.path, str(exc))
    return _repository_response(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    category = ErrorCategory.from_status(exc.status_code)
    if category is ErrorCategory.METHOD_NOT_ALLOWED:
        message = f"Method {request.method} is not allowed for {request.url.path}."
    elif category is ErrorCategory.NOT_FOUND:
        message = f"No resource found at {request.url.path}."
    elif category is ErrorCategory.INTERNAL:
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = str(exc.detail)
    payload = build_error_response(category, message, path=request.url.path)
    headers = dict(exc.headers or {})
    if category is ErrorCategory.METHOD_NOT_ALLOWED:
        headers["Allow"] = ", ".join(_allowed_methods(request))
    return JSONResponse(status_code=category.status_code, content=payload, headers=headers or None)


def _allowed_methods(request: Request) -> list[str]:
    """
    Methods of every route matching the path. Starlette only reports the first
    matching route, and each HTTP method is a route of its own.
    """
    methods: set[str] = set()
    for route in request.app.router.routes:
        route_methods = getattr(route, "methods", None)
        if not route_methods:
            continue
        match, _ = route.matches(request.scope)
        if match in (Match.PARTIAL, Match.FULL):
            methods.update(route_methods)
    return sorted(methods)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last resort (500). The traceback goes to the logs; the client only gets the
    generic category and message.
    """
    logger.exception("Unhandled exception for %s %s", request.method, request.url.path)
    payload = build_error_response(ErrorCategory.INTERNAL, INTERNAL_ERROR_MESSAGE, path=request.url.path)
    return JSONResponse(status_code=ErrorCategory.INTERNAL.status_code, content=payload)


def _repository_response(request: Request, exc: RepositoryError) -> JSONResponse:
    category = exc.category
    payload = build_error_response(category, exc.message, path=request.url.path)
    return JSONResponse(status_code=category.status_code, content=payload)


def register_exception_handlers(app: FastAPI) -> None:
    # Most specific first
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DuplicateError, duplicate_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
