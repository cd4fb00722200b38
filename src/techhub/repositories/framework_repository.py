"""
Framework repository: the uniqueness-checked store for Framework records.

Adds to BaseRepository the create/update rules for frameworks:
    - the uniqueness key (name, or name + version) is checked against every
      *other* live record inside the same critical section as the write, so two
      concurrent creates can never both pass the check;
    - text fields are trimmed before they are stored;
    - update is a full replacement that keeps the id and insertion position.
"""

import logging
import time
from enum import Enum

from ..exceptions.base import DuplicateError
from ..models.framework import Framework, FrameworkInput
from .base_repository import BaseRepository, IdSequence

logger = logging.getLogger(__name__)


class UniquenessPolicy(str, Enum):
    """Which fields must be unique among live frameworks."""

    NAME = "name"                   # name alone, case-insensitive
    NAME_VERSION = "name_version"   # (name case-insensitive, version exact)

    def key(self, name: str, version: str) -> tuple[str, ...]:
        folded = name.strip().casefold()
        if self is UniquenessPolicy.NAME:
            return (folded,)
        return (folded, version.strip())

    @property
    def fields(self) -> list[str]:
        if self is UniquenessPolicy.NAME:
            return ["name"]
        return ["name", "currentVersion"]


class FrameworkRepository(BaseRepository[Framework]):
    """
    In-memory store of Framework records.

    One instance lives for the whole process (created by the app factory) and is
    shared by all request handlers.
    """

    def __init__(
        self,
        policy: UniquenessPolicy | str = UniquenessPolicy.NAME,
        sequence: IdSequence | None = None,
    ):
        super().__init__("Framework", sequence)
        self.policy = UniquenessPolicy(policy)

    # =================================================================================================================
    # Create Operations
    # =================================================================================================================

    def create(self, data: FrameworkInput) -> Framework:
        """
        Store a new framework and return it with its assigned id.

        Raises:
            DuplicateError: a live record already has the same uniqueness key
        """
        data = data.trimmed()
        logger.debug(
            "repo.create.start",
            extra={"model": self.model_name, "operation": "create", "policy": self.policy.value},
        )
        start = time.perf_counter()

        with self._lock:
            self._check_unique(data, exclude_id=None, operation="create")
            framework = self._insert(lambda new_id: _build(new_id, data))

        logger.info(
            "repo.create.success",
            extra={
                "model": self.model_name,
                "operation": "create",
                "id": framework.id,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return framework

    # =================================================================================================================
    # Read Operations
    # =================================================================================================================

    def find_by_id(self, framework_id: int) -> Framework:
        """
        Raises:
            NotFoundError: no live framework has this id
        """
        return self.get_by_id(framework_id)

    def find_by_name(self, query: str) -> tuple[Framework, ...]:
        """
        Case-insensitive substring search on the name.

        The query is expected to be validated by the caller (non-blank, not all
        digits); an empty result is not an error.
        """
        needle = query.strip().casefold()
        results = self.find(lambda f: needle in f.name.casefold())
        logger.debug(
            "repo.find_by_name",
            extra={"model": self.model_name, "query": needle, "matches": len(results)},
        )
        return results

    # =================================================================================================================
    # Update Operations
    # =================================================================================================================

    def update(self, framework_id: int, data: FrameworkInput) -> Framework:
        """
        Replace every mutable field of an existing framework.

        Updating a record to its own current key is allowed; colliding with a
        different live record is not.

        Raises:
            NotFoundError: no live framework has this id
            DuplicateError: another live record already has the new key
        """
        data = data.trimmed()
        with self._lock:
            self._require(framework_id)
            self._check_unique(data, exclude_id=framework_id, operation="update")
            updated = self._replace(_build(framework_id, data))

        logger.info(
            "repo.update.success",
            extra={"model": self.model_name, "operation": "update", "id": framework_id},
        )
        return updated

    # =================================================================================================================
    # Helpers
    # =================================================================================================================

    def _check_unique(self, data: FrameworkInput, *, exclude_id: int | None, operation: str) -> None:
        """Linear scan of the live set. Caller must hold self._lock."""
        key = self.policy.key(data.name, data.current_version)
        for existing in self._records.values():
            if existing.id == exclude_id:
                continue
            if self.policy.key(existing.name, existing.current_version) == key:
                logger.info(
                    f"repo.{operation}.duplicate",
                    extra={
                        "model": self.model_name,
                        "operation": operation,
                        "conflict_id": existing.id,
                        "conflict_fields": self.policy.fields,
                    },
                )
                raise DuplicateError(
                    _duplicate_message(self.policy, data),
                    fields=self.policy.fields,
                    conflict_id=existing.id,
                )


def _build(framework_id: int, data: FrameworkInput) -> Framework:
    return Framework(
        id=framework_id,
        name=data.name,
        current_version=data.current_version,
        category=data.category,
        primary_language=data.primary_language,
        description=data.description,
        official_site=data.official_site,
    )


def _duplicate_message(policy: UniquenessPolicy, data: FrameworkInput) -> str:
    if policy is UniquenessPolicy.NAME:
        return f"Framework with name '{data.name}' already exists."
    return (
        f"Framework with name '{data.name}' and version '{data.current_version}' already exists."
    )
