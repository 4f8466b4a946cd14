from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeIs

import cytoolz as cz

from ._core import CommonBase, ShapeError, get_config
from ._types import Item


def is_position(key: object) -> TypeIs[int]:
    """Tell whether `key` may address the array segment (`bool` never does)."""
    return isinstance(key, int) and not isinstance(key, bool)


class Table[V](Mapping[Any, V]):
    """The hybrid container every funkchain operation works on.

    A `Table` holds two segments:

    - `array`: positional values, addressed 1..n, order-significant.
    - `keyed`: arbitrary key -> value entries, order-insignificant.

    Tables are immutable. On construction, keyed integer entries continuing the array
    (n+1, n+2, ...) are moved into it, so a given content has a single representation.
    Keyed integers inside 1..n are rejected.

    Implements the read-only `Mapping` protocol: keys are the positions then the keyed keys.

    Args:
        array (Iterable[V]): Positional values.
        keyed (Mapping[Any, V] | None): Non-positional entries.

    ```python
    >>> import funkchain as fk
    >>> t = fk.Table([10, 20], {"name": "x", 3: 30, 7: 70})
    >>> t
    Table([10, 20, 30], {'name': 'x', 7: 70})
    >>> t[1], t["name"], t.length(), len(t)
    (10, 'x', 3, 5)
    >>> fk.Table(keyed={1: "a"}) == fk.Table(["a"])
    True

    ```
    """

    __slots__ = ("_array", "_keyed")

    _array: tuple[V, ...]
    _keyed: dict[Any, V]

    def __init__(
        self, array: Iterable[V] = (), keyed: Mapping[Any, V] | None = None
    ) -> None:
        values = list(array)
        extra = dict(keyed) if keyed else {}
        clash = [k for k in extra if is_position(k) and 1 <= k <= len(values)]
        if clash:
            msg = f"Keyed entries {clash} collide with array positions 1..{len(values)}"
            raise ShapeError(msg)
        positions = {k for k in extra if is_position(k)}
        while len(values) + 1 in positions:
            values.append(extra.pop(len(values) + 1))
        self._array = tuple(values)
        self._keyed = extra

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().table_repr(self._array, self._keyed)})"

    def __getitem__(self, key: Any) -> V:  # noqa: ANN401
        if is_position(key) and 1 <= key <= len(self._array):
            return self._array[key - 1]
        return self._keyed[key]

    def __iter__(self) -> Iterator[Any]:
        yield from range(1, len(self._array) + 1)
        yield from self._keyed

    def __len__(self) -> int:
        return len(self._array) + len(self._keyed)

    @property
    def array(self) -> tuple[V, ...]:
        """The array-like segment, position 1 first."""
        return self._array

    @property
    def keyed(self) -> Mapping[Any, V]:
        """A read-only view of the keyed segment."""
        return MappingProxyType(self._keyed)

    def length(self) -> int:
        """Count of positional entries, keyed entries excluded.

        ```python
        >>> import funkchain as fk
        >>> fk.Table([1, 2], {"a": 3}).length()
        2

        ```
        """
        return len(self._array)

    def entries(self) -> Iterator[Item[Any, V]]:
        """Yield every entry as an `Item`: positions in order, then keyed entries."""
        for idx, value in enumerate(self._array, start=1):
            yield Item(idx, value)
        for key, value in self._keyed.items():
            yield Item(key, value)

    @staticmethod
    def from_[U](data: IntoTable[U]) -> Table[U]:
        """Coerce `data` into a `Table`.

        - A `Table` is returned as is.
        - A wrapper (`Funk`) gives its inner `Table`.
        - A `Mapping` is split: keys 1..n go to the array segment, the rest stays keyed.
        - Any other iterable fills the array segment.

        Raises:
            ShapeError: If `data` is not iterable.

        ```python
        >>> import funkchain as fk
        >>> fk.Table.from_({1: "a", 2: "b", "k": "v"})
        Table(['a', 'b'], {'k': 'v'})
        >>> fk.Table.from_(range(3))
        Table([0, 1, 2])

        ```
        """
        match data:
            case Table():
                return data
            case CommonBase():
                return Table.from_(data.inner())
            case Mapping():
                return Table(keyed=data)
            case _ if cz.itertoolz.isiterable(data):
                return Table(data)
            case _:
                msg = f"Cannot build a Table from {type(data).__name__}"
                raise ShapeError(msg)


type IntoTable[V] = Table[V] | Mapping[Any, V] | Iterable[V] | CommonBase[Table[V]]
