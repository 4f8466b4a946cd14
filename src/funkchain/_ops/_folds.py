"""Operations collapsing a container into a single value."""

from __future__ import annotations

import builtins
import functools
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .._core import EmptyInputError, ShapeError, renamed
from .._table import IntoTable, Table
from .._types import SupportsRichComparison


@dataclass(slots=True, frozen=True)
class _Fold[V]:
    values: Sequence[V]
    start: Any

    def __call__[A](self, fn: Callable[[A, V], A]) -> A:
        return functools.reduce(fn, self.values, self.start)


def fold_left[V](data: IntoTable[V], start: Any) -> _Fold[V]:  # noqa: ANN401
    """Curried left fold: `fold_left(c, start)(fn)`.

    The array segment is captured by the first call. The second call threads
    `fn(acc, element)` through positions 1..n.

    ```python
    >>> import funkchain as fk
    >>> fk.fold_left([3, 6, 0, -5, 4, 8], 0)(lambda acc, n: acc + n)
    16

    ```
    """
    return _Fold(Table.from_(data).array, start)


def fold_right[V](data: IntoTable[V], start: Any) -> _Fold[V]:  # noqa: ANN401
    """Curried right fold: `fold_right(c, start)(fn)`.

    Same as `fold_left`, walking positions n..1: the last element meets `start` first.

    ```python
    >>> import funkchain as fk
    >>> fk.fold_right([3, 6, 0, -5, 4, 8], 100)(lambda acc, n: n - acc)
    98

    ```
    """
    return _Fold(Table.from_(data).array[::-1], start)


def reduce[V](data: IntoTable[V], fn: Callable[[V, V], V]) -> V:
    """Fold the array segment from its first element, with `fn(acc, element)`.

    Raises:
        EmptyInputError: If the array segment is empty.

    ```python
    >>> import funkchain as fk
    >>> fk.reduce([1, 2, 3, 4, 5], lambda a, b: a + b)
    15
    >>> fk.reduce([], lambda a, b: a + b)
    Traceback (most recent call last):
        ...
    funkchain._core._errors.EmptyInputError: reduce of an empty array segment

    ```
    """
    values = Table.from_(data).array
    if not values:
        msg = "reduce of an empty array segment"
        raise EmptyInputError(msg)
    return functools.reduce(fn, values)


def any[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> bool:
    """Tell whether at least one value, from either segment, satisfies `predicate`.

    ```python
    >>> import funkchain as fk
    >>> fk.any([3, 6, 0], lambda n: n > 5)
    True

    ```
    """
    return builtins.any(predicate(v) for v in Table.from_(data).values())


def all[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> bool:
    """Tell whether every value satisfies `predicate`. True for an empty container.

    ```python
    >>> import funkchain as fk
    >>> fk.all([3, 6, 0], lambda n: n > 5)
    False
    >>> fk.all([], lambda n: n > 5)
    True

    ```
    """
    return builtins.all(predicate(v) for v in Table.from_(data).values())


@renamed("any")
def exists[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> bool:
    return any(data, predicate)


@renamed("all")
def forall[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> bool:
    return all(data, predicate)


@dataclass(slots=True, frozen=True)
class _Corresponds[V, U]:
    left: Sequence[V]
    right: Sequence[U]

    def __call__(self, predicate: Callable[[V, U], bool]) -> bool:
        if len(self.left) != len(self.right):
            return False
        return builtins.all(
            predicate(a, b) for a, b in builtins.zip(self.left, self.right)
        )


def corresponds[V, U](data: IntoTable[V], other: IntoTable[U]) -> _Corresponds[V, U]:
    """Curried pairwise test: `corresponds(c, other)(predicate)`.

    False as soon as the array segments differ in length, else whether
    `predicate(c[i], other[i])` holds for every position.

    ```python
    >>> import funkchain as fk
    >>> fk.corresponds([1, 2, 3], [2, 4, 6])(lambda a, b: b == 2 * a)
    True
    >>> fk.corresponds([1, 2], [1, 2, 3])(lambda a, b: a == b)
    False

    ```
    """
    return _Corresponds(Table.from_(data).array, Table.from_(other).array)


def max[V: SupportsRichComparison[Any]](data: IntoTable[V]) -> Table[V]:
    """The greatest value as a single-element `Table`, empty for an empty input.

    ```python
    >>> import funkchain as fk
    >>> fk.max([3, 2, 4, 1])
    Table([4])
    >>> fk.max([])
    Table([])

    ```
    """
    values = Table.from_(data).values()
    return Table(() if not values else (builtins.max(values),))


def min[V: SupportsRichComparison[Any]](data: IntoTable[V]) -> Table[V]:
    """The least value as a single-element `Table`, empty for an empty input.

    ```python
    >>> import funkchain as fk
    >>> fk.min([3, 2, 4, 1])
    Table([1])

    ```
    """
    values = Table.from_(data).values()
    return Table(() if not values else (builtins.min(values),))


def apply[V, R](data: IntoTable[V], fn: Callable[..., R]) -> R:
    """Call `fn` with the array segment spread as positional arguments.

    Raises:
        ShapeError: If `fn` is not callable.

    ```python
    >>> import funkchain as fk
    >>> fk.apply([1, 2], lambda a, b: a + b)
    3

    ```
    """
    if not callable(fn):
        msg = f"apply expects a callable, got {type(fn).__name__}"
        raise ShapeError(msg)
    return fn(*Table.from_(data).array)


def is_empty(data: IntoTable[Any]) -> bool:
    """Tell whether neither segment holds an entry.

    ```python
    >>> import funkchain as fk
    >>> fk.is_empty([]), fk.is_empty({"a": 1})
    (True, False)

    ```
    """
    return len(Table.from_(data)) == 0


def if_empty[C, D](data: C, default: D | Callable[[], D]) -> C | D:
    """Return `data` untouched unless it is empty.

    For an empty container, `default` is called when callable, else returned as is.

    ```python
    >>> import funkchain as fk
    >>> fk.if_empty([1], 5), fk.if_empty([], 5), fk.if_empty([], lambda: 2 + 2)
    ([1], 5, 4)

    ```
    """
    if not is_empty(data):  # type: ignore[arg-type]
        return data
    return default() if callable(default) else default
