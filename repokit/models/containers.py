"""Generic single-value and key/value holders."""

from typing import Generic, TypeVar

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')


class Container(Generic[T]):
    """
    Holds a single non-None item of type T.

    The item is stored by reference; mutating it outside the container
    is visible through the container.
    """

    def __init__(self, item: T):
        if item is None:
            raise ValueError("Item cannot be None")
        self._item = item

    @property
    def item(self) -> T:
        """Current item."""
        return self._item

    @item.setter
    def item(self, item: T) -> None:
        if item is None:
            raise ValueError("Item cannot be None")
        self._item = item

    def __repr__(self) -> str:
        return f"Container[item={self._item!r}]"


class Pair(Generic[K, V]):
    """
    Key/value pair with a mandatory key.

    The value may be None. Two pairs are equal when both key and value
    are equal.
    """

    def __init__(self, key: K, value: V):
        if key is None:
            raise ValueError("Cannot create a Pair with a None key")
        self._key = key
        self._value = value

    @property
    def key(self) -> K:
        return self._key

    @key.setter
    def key(self, key: K) -> None:
        if key is None:
            raise ValueError("Pair key cannot be None")
        self._key = key

    @property
    def value(self) -> V:
        return self._value

    @value.setter
    def value(self, value: V) -> None:
        self._value = value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Pair):
            return NotImplemented
        return self._key == other._key and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._key, self._value))

    def __repr__(self) -> str:
        return f"Pair[key={self._key}, value={self._value}]"
