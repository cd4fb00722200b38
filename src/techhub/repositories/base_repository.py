"""
Base repository providing the shared in-memory storage primitives.

`BaseRepository` owns the live records of one entity kind, the lock that
serializes every mutation, and the id sequence that numbers new records.
Entity-specific repositories inherit from it and add their own rules
(uniqueness checks, searches) on top of the protected helpers, always calling
them while holding `self._lock`.

Records must be immutable objects exposing an integer `id` attribute; the
repository replaces them wholesale and never mutates them in place.
"""

import logging
import threading
from typing import Callable, Generic, Protocol, TypeVar

from ..exceptions.base import NotFoundError

logger = logging.getLogger(__name__)


class HasId(Protocol):
    id: int


ModelType = TypeVar("ModelType", bound=HasId)


class IdSequence:
    """
    Monotonic id generator: 1, 2, 3, ...

    Thread-safe and independent from the collection lock. Once `next_id()` has
    returned a value it is consumed for good, whether or not the caller ends up
    storing a record under it.
    """

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """The id the next call to next_id() will return."""
        with self._lock:
            return self._next


class BaseRepository(Generic[ModelType]):
    """
    Generic in-memory repository.

    Type Parameters:
        ModelType: the (frozen) record type this repository manages.

    Insertion order is kept: records live in a dict keyed by id, and an update
    replaces the value under the existing key so the record keeps its position.
    """

    def __init__(self, model_name: str, sequence: IdSequence | None = None):
        """
        Args:
            model_name: label used in log events and error messages (e.g. "Framework")
            sequence: id generator; each repository gets its own by default
        """
        self.model_name = model_name
        self._sequence = sequence or IdSequence()
        self._records: dict[int, ModelType] = {}
        self._lock = threading.Lock()

    # =================================================================================================================
    # Read Operations
    # =================================================================================================================

    def list(self) -> tuple[ModelType, ...]:
        """All live records in insertion order, as an immutable snapshot."""
        with self._lock:
            return tuple(self._records.values())

    def get_by_id(self, entity_id: int) -> ModelType:
        with self._lock:
            return self._require(entity_id)

    def find(self, predicate: Callable[[ModelType], bool]) -> tuple[ModelType, ...]:
        with self._lock:
            return tuple(r for r in self._records.values() if predicate(r))

    def exists(self, entity_id: int) -> bool:
        with self._lock:
            return entity_id in self._records

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    # =================================================================================================================
    # Delete Operations
    # =================================================================================================================

    def delete(self, entity_id: int) -> None:
        with self._lock:
            self._require(entity_id)
            del self._records[entity_id]
        logger.info(
            "repo.delete.success",
            extra={"model": self.model_name, "operation": "delete", "id": entity_id},
        )

    # =================================================================================================================
    # Protected helpers (caller must hold self._lock)
    # =================================================================================================================

    def _require(self, entity_id: int) -> ModelType:
        record = self._records.get(entity_id)
        if record is None:
            logger.info(
                "repo.not_found",
                extra={"model": self.model_name, "id": entity_id},
            )
            raise NotFoundError.for_id(self.model_name, entity_id)
        return record

    def _insert(self, build: Callable[[int], ModelType]) -> ModelType:
        """
        Reserve the next id and store the record produced by `build(id)`.
        If `build` raises, the reserved id is simply never used.
        """
        entity_id = self._sequence.next_id()
        record = build(entity_id)
        self._records[entity_id] = record
        return record

    def _replace(self, record: ModelType) -> ModelType:
        self._records[record.id] = record
        return record
