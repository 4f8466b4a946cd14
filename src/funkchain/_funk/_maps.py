from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .. import _ops
from .._table import IntoTable, Table
from ._base import TableWrapper

if TYPE_CHECKING:
    from .._types import Unzipped
    from ._main import Funk


class BaseMap[V](TableWrapper[V]):
    __slots__ = ()

    def map[R](self, fn: Callable[[V], R]) -> Funk[R]:
        """Apply `fn` to every value, keeping each entry under its key.

        Args:
            fn (Callable[[V], R]): Function to apply to each value.

        Returns:
            Funk[R]: The mapped entries.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([1, 2]).map(lambda x: x + 1)
        Funk([2, 3])

        ```
        """
        return self._new(_ops.map, fn)

    def flat_map(self, fn: Callable[[V], Any]) -> Funk[Any]:
        """Map `fn`, then flatten nested results at any depth into a fresh array.

        Args:
            fn (Callable[[V], Any]): Function returning a value or a nested container.

        Returns:
            Funk[Any]: The flattened values, positions reassigned.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([1, 2]).flat_map(lambda x: (x, -x))
        Funk([1, -1, 2, -2])

        ```
        """
        return self._new(_ops.flat_map, fn)

    def group_by[G](self, fn: Callable[[Any, V], G]) -> Funk[Table[tuple[Any, V]]]:
        """Group entries by `fn(key, value)`.

        Each group holds an array `Table` of `(key, value)` tuples, in input order.

        ```python
        >>> import funkchain as fk
        >>> groups = fk.wrap(["x", "y", "z"]).group_by(lambda k, v: "odd" if k % 2 else "even")
        >>> groups["odd"]
        Table([(1, 'x'), (3, 'z')])

        ```
        """
        return self._new(_ops.group_by, fn)

    def zip[U](self, other: IntoTable[U]) -> Funk[tuple[V, U]]:
        """Pair up with `other`'s array segment, stopping at the shorter one.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([1, 2, 3]).zip(["a", "b"])
        Funk([(1, 'a'), (2, 'b')])

        ```
        """
        return self._new(_ops.zip, other)

    def unzip[L, R](self: BaseMap[tuple[L, R]]) -> Unzipped[L, R]:
        """Split pairs into the tuple of firsts and the tuple of seconds.

        This is a terminal operation: the halves are plain tuples.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([(1, "a"), (2, "b")]).unzip()
        Unzipped(left=(1, 2), right=('a', 'b'))

        ```
        """
        return _ops.unzip(self._inner)

    def listify(self) -> Funk[Any]:
        """Flatten both segments into one array, keyed entries as `(key, value)` tuples."""
        return self._new(_ops.listify)

    def reverse(self) -> Funk[V]:
        """The array segment in reverse order."""
        return self._new(_ops.reverse)
