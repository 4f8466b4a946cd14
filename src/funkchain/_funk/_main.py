from __future__ import annotations

from typing import overload

from .._table import IntoTable, Table
from ._aggregations import BaseAgg
from ._filters import BaseFilter
from ._maps import BaseMap


class Funk[V](BaseMap[V], BaseFilter[V], BaseAgg[V]):
    """Fluent wrapper around a `Table`, exposing every operation as a method.

    Methods producing a container return a new `Funk`, so calls chain.
    Methods producing a plain value (`reduce`, `apply`, `any`, `all`, `is_empty`,
    `unzip`, and the curried folds once called) end the chain.

    Anything `Table.from_` accepts can be passed; `wrap` does the same but returns an
    existing `Funk` unchanged.

    Args:
        data (IntoTable[V]): The container to wrap.

    ```python
    >>> import funkchain as fk
    >>> fk.wrap([1, 2, 3, 4, 5]).filter(lambda n: n > 1).map(lambda n: n * 10).reduce(max)
    50

    ```
    """

    __slots__ = ("_inner",)

    def __init__(self, data: IntoTable[V]) -> None:
        self._inner = Table.from_(data)


@overload
def wrap[V](data: Funk[V]) -> Funk[V]: ...
@overload
def wrap[V](data: IntoTable[V]) -> Funk[V]: ...
def wrap[V](data: Funk[V] | IntoTable[V]) -> Funk[V]:
    """Wrap a container so its operations chain as methods.

    Wrapping an existing `Funk` returns it unchanged.

    ```python
    >>> import funkchain as fk
    >>> f = fk.wrap({1: "a", "k": "v"})
    >>> f
    Funk(['a'], {'k': 'v'})
    >>> fk.wrap(f) is f
    True

    ```
    """
    if isinstance(data, Funk):
        return data
    return Funk(data)
