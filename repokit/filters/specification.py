"""Specification pattern primitives."""

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Matching rule over items of type T.

    is_satisfied_by must be total and free of side effects. Specifications
    compose with and_/or_/not_ or the &, | and ~ operators.
    """

    @abstractmethod
    def is_satisfied_by(self, item: T) -> bool:
        """Check if item matches."""
        pass

    def and_(self, other: 'Specification[T]') -> 'AndSpecification[T]':
        """Combine with another specification using AND."""
        return AndSpecification(self, other)

    def or_(self, other: 'Specification[T]') -> 'OrSpecification[T]':
        """Combine with another specification using OR."""
        return OrSpecification(self, other)

    def not_(self) -> 'NotSpecification[T]':
        """Negate the specification."""
        return NotSpecification(self)

    def __and__(self, other: 'Specification[T]') -> 'AndSpecification[T]':
        return self.and_(other)

    def __or__(self, other: 'Specification[T]') -> 'OrSpecification[T]':
        return self.or_(other)

    def __invert__(self) -> 'NotSpecification[T]':
        return self.not_()


class AndSpecification(Specification[T]):
    """Matches when both sides match."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        if left is None or right is None:
            raise ValueError("Specification cannot be None")
        self.left = left
        self.right = right

    def is_satisfied_by(self, item: T) -> bool:
        return self.left.is_satisfied_by(item) and self.right.is_satisfied_by(item)


class OrSpecification(Specification[T]):
    """Matches when either side matches."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        if left is None or right is None:
            raise ValueError("Specification cannot be None")
        self.left = left
        self.right = right

    def is_satisfied_by(self, item: T) -> bool:
        return self.left.is_satisfied_by(item) or self.right.is_satisfied_by(item)


class NotSpecification(Specification[T]):
    """Matches when the wrapped specification does not."""

    def __init__(self, spec: Specification[T]):
        if spec is None:
            raise ValueError("Specification cannot be None")
        self.spec = spec

    def is_satisfied_by(self, item: T) -> bool:
        return not self.spec.is_satisfied_by(item)


class PredicateSpecification(Specification[T]):
    """Adapts a plain callable to the Specification interface."""

    def __init__(self, predicate: Callable[[T], bool]):
        if predicate is None:
            raise ValueError("Predicate cannot be None")
        self.predicate = predicate

    def is_satisfied_by(self, item: T) -> bool:
        return bool(self.predicate(item))
