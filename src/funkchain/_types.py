from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple, Protocol


class Item[K, V](NamedTuple):
    """A `(key, value)` entry of a `Table`, positional or keyed."""

    key: K
    """Position (1-based) or arbitrary key."""
    value: V
    """The value stored under the key."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.value!r})"


class Partitioned[T](NamedTuple):
    """The two sides returned by `partition`.

    Unpacks like a tuple: `evens, odds = fk.partition(...)`.
    """

    matches: T
    """Values satisfying the predicate."""
    rest: T
    """Values failing the predicate."""


class Unzipped[L, R](NamedTuple):
    """The result of `unzip`: first and second halves of each pair."""

    left: tuple[L, ...]
    """The first element of every pair."""
    right: tuple[R, ...]
    """The second element of every pair."""


# typeshed protocols


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


type SupportsRichComparison[T] = SupportsDunderLT[T] | SupportsDunderGT[T]

type Predicate[T] = Callable[[T], bool]
