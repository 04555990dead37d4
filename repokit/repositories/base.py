"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, List, TypeVar

from repokit.filters.specification import Specification

ID = TypeVar('ID', bound=Hashable)
T = TypeVar('T')


class Repository(ABC, Generic[ID, T]):
    """
    Base repository interface.

    Abstracts data access over entities of type T keyed by ID.
    Storage has no ordering guarantee and no two entries share an ID.

    Error conventions:
    - None arguments raise ValueError
    - Lookups of a missing ID raise EntityNotFoundError
    """

    @abstractmethod
    def save(self, id: ID, entity: T) -> None:
        """Insert or overwrite the entity stored under id."""
        pass

    @abstractmethod
    def find_by_id(self, id: ID) -> T:
        """Get entity by ID. Raises EntityNotFoundError if absent."""
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """Snapshot of all stored entities."""
        pass

    @abstractmethod
    def delete_by_id(self, id: ID) -> None:
        """Delete entity by ID. Raises EntityNotFoundError if absent."""
        pass

    @abstractmethod
    def find_by(self, predicate: Callable[[T], bool]) -> List[T]:
        """Entities matching predicate. Raises EntityNotFoundError if none match."""
        pass

    @abstractmethod
    def find_by_specification(self, specification: Specification[T]) -> List[T]:
        """Entities satisfying specification. May be empty."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored entities."""
        pass

    @abstractmethod
    def exists_by_id(self, id: ID) -> bool:
        """True if an entity is stored under id."""
        pass

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, id: object) -> bool:
        return id is not None and self.exists_by_id(id)
