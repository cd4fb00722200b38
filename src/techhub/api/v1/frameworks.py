# src/techhub/api/v1/frameworks.py
"""
/frameworks routes.

The handlers only translate between schemas and the store: validation is done
by the request schemas / parameter validators, failures are raised by the store
and turned into responses by error_handlers.py.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status
from pydantic import AfterValidator

from techhub.core.dependencies import get_framework_repository
from techhub.repositories.framework_repository import FrameworkRepository
from techhub.schemas.errors import ErrorResponse
from techhub.schemas.framework import FrameworkRequest, FrameworkResponse
from techhub.validators.field_validators import check_name_query, check_positive_id

router = APIRouter(prefix="/frameworks", tags=["Frameworks"])

Repository = Annotated[FrameworkRepository, Depends(get_framework_repository)]
FrameworkId = Annotated[
    int,
    Path(description="Framework id (positive integer)"),
    AfterValidator(check_positive_id),
]
NameQuery = Annotated[
    str | None,
    Query(description="Case-insensitive, partial match. Must not be blank or only digits.", examples=["spring"]),
    AfterValidator(check_name_query),
]

_VALIDATION = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Validation error"}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Framework not found"}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Framework already exists"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=FrameworkResponse,
    summary="Create framework",
    responses={**_VALIDATION, **_CONFLICT},
)
async def create_framework(payload: FrameworkRequest, response: Response, repo: Repository):
    created = repo.create(payload.to_input())
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return FrameworkResponse.from_model(created)


@router.get(
    "",
    response_model=list[FrameworkResponse],
    summary="List frameworks, or search them by name",
    responses=_VALIDATION,
)
async def list_frameworks(repo: Repository, name: NameQuery = None):
    items = repo.list() if name is None else repo.find_by_name(name)
    return [FrameworkResponse.from_model(f) for f in items]


@router.get(
    "/{framework_id}",
    response_model=FrameworkResponse,
    summary="Get framework",
    responses={**_VALIDATION, **_NOT_FOUND},
)
async def get_framework(framework_id: FrameworkId, repo: Repository):
    return FrameworkResponse.from_model(repo.find_by_id(framework_id))


@router.put(
    "/{framework_id}",
    response_model=FrameworkResponse,
    summary="Update framework (full replacement)",
    responses={**_VALIDATION, **_NOT_FOUND, **_CONFLICT},
)
async def update_framework(framework_id: FrameworkId, payload: FrameworkRequest, repo: Repository):
    return FrameworkResponse.from_model(repo.update(framework_id, payload.to_input()))


@router.delete(
    "/{framework_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete framework",
    responses={**_VALIDATION, **_NOT_FOUND},
)
async def delete_framework(framework_id: FrameworkId, repo: Repository) -> Response:
    repo.delete(framework_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
