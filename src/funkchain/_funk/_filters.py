from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .. import _ops
from .._types import Partitioned
from ._base import TableWrapper

if TYPE_CHECKING:
    from ._main import Funk


class BaseFilter[V](TableWrapper[V]):
    __slots__ = ()

    def filter(self, predicate: Callable[[V], bool]) -> Funk[V]:
        """Keep the entries whose value satisfies `predicate`.

        Array matches are compacted in order, keyed matches keep their key.

        Args:
            predicate (Callable[[V], bool]): Function to evaluate each value.

        Returns:
            Funk[V]: The selected entries.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([1, 2, 3, 4]).filter(lambda n: n % 2 == 0)
        Funk([2, 4])

        ```
        """
        return self._new(_ops.filter, predicate)

    def filter_not(self, predicate: Callable[[V], bool]) -> Funk[V]:
        """Keep the entries whose value does not satisfy `predicate`.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([1, 2, 3, 4]).filter_not(lambda n: n % 2 == 0)
        Funk([1, 3])

        ```
        """
        return self._new(_ops.filter_not, predicate)

    def find(self, predicate: Callable[[V], bool]) -> Funk[V]:
        """First entry satisfying `predicate`, under its original key, or an empty wrapper.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([5, 8, 9]).find(lambda n: n > 6)
        Funk([], {2: 8})

        ```
        """
        return self._new(_ops.find, predicate)

    def array_part(self) -> Funk[V]:
        """Drop the keyed entries."""
        return self._new(_ops.array_part)

    def partition(self, predicate: Callable[[V], bool]) -> Partitioned[Funk[V]]:
        """Split the values in two wrappers: matches and the rest.

        ```python
        >>> import funkchain as fk
        >>> big, small = fk.wrap([1, 2, 4, -2, 9]).partition(lambda n: n > 2)
        >>> big.reduce(lambda a, b: a + b), small.reduce(lambda a, b: a + b)
        (13, 1)

        ```
        """
        matches, rest = _ops.partition(self._inner, predicate)
        return Partitioned(self.__class__(matches), self.__class__(rest))  # type: ignore[arg-type]

    def take_while(self, predicate: Callable[[V], bool]) -> Funk[V]:
        """Longest prefix of the array segment satisfying `predicate`."""
        return self._new(_ops.take_while, predicate)

    def drop_while(self, predicate: Callable[[V], bool]) -> Funk[V]:
        """The array segment after its longest prefix satisfying `predicate`."""
        return self._new(_ops.drop_while, predicate)

    def distinct(self) -> Funk[V]:
        """One occurrence per distinct value, first-seen order.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([1, 1, 2, 1]).distinct()
        Funk([1, 2])

        ```
        """
        return self._new(_ops.distinct)

    def slice(self, start: int, stop: int) -> Funk[V]:
        """Positions `start` to `stop` inclusive, missing positions skipped.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap("abcde").slice(2, 4)
        Funk(['b', 'c', 'd'])

        ```
        """
        return self._new(_ops.slice, start, stop)
