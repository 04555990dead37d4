"""Generic repository - in-memory implementation."""

import warnings
from typing import Callable, Dict, List

from repokit.exceptions import EntityNotFoundError
from repokit.filters.specification import Specification
from repokit.repositories.base import ID, Repository, T
from repokit.utils.logger import AppLogger


class InMemoryRepository(Repository[ID, T]):
    """
    Repository backed by a plain dict.

    save overwrites an existing entry (last write wins). There is no
    internal locking: callers must serialize writes themselves.
    """

    def __init__(self, logger: AppLogger):
        if logger is None:
            raise ValueError("Logger cannot be None")
        self.logger = logger
        self._storage: Dict[ID, T] = {}
        self.logger.info("InMemoryRepository created")

    def save(self, id: ID, entity: T) -> None:
        if id is None:
            raise ValueError("ID cannot be None")
        if entity is None:
            raise ValueError("Entity cannot be None")
        self._storage[id] = entity
        self.logger.info(f"Saved entity with ID={id}")

    def find_by_id(self, id: ID) -> T:
        if id is None:
            raise ValueError("ID cannot be None")
        if id not in self._storage:
            self.logger.warn(f"Entity with ID={id} not found")
            raise EntityNotFoundError(f"Entity with ID={id} not found")
        self.logger.info(f"Found entity with ID={id}")
        return self._storage[id]

    def find_all(self) -> List[T]:
        self.logger.info("Fetching all entities")
        return list(self._storage.values())

    def delete_by_id(self, id: ID) -> None:
        if id is None:
            raise ValueError("ID cannot be None")
        if id not in self._storage:
            self.logger.warn(f"Cannot delete - no entity with ID={id}")
            raise EntityNotFoundError(f"Cannot delete: entity with ID={id} not found")
        del self._storage[id]
        self.logger.info(f"Deleted entity with ID={id}")

    def find_by(self, predicate: Callable[[T], bool]) -> List[T]:
        """
        Filter entities with a plain predicate.

        Deprecated in favour of find_by_specification. Unlike that method,
        an empty result raises EntityNotFoundError.
        """
        warnings.warn(
            "find_by is deprecated, use find_by_specification instead",
            DeprecationWarning,
            stacklevel=2,
        )
        if predicate is None:
            raise ValueError("Predicate cannot be None")
        matches = [entity for entity in self._storage.values() if predicate(entity)]
        if not matches:
            self.logger.warn("No entity matches the given predicate")
            raise EntityNotFoundError("No entity matches the given predicate")
        self.logger.info(f"Found {len(matches)} entities matching predicate")
        return matches

    def find_by_specification(self, specification: Specification[T]) -> List[T]:
        if specification is None:
            raise ValueError("Specification cannot be None")
        matches = [
            entity for entity in self._storage.values()
            if specification.is_satisfied_by(entity)
        ]
        self.logger.info(f"Found {len(matches)} entities matching specification")
        return matches

    def count(self) -> int:
        return len(self._storage)

    def exists_by_id(self, id: ID) -> bool:
        if id is None:
            raise ValueError("ID cannot be None")
        return id in self._storage
