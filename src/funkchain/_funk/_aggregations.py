from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from .. import _ops
from .._table import IntoTable
from ._base import TableWrapper

if TYPE_CHECKING:
    from .._ops._folds import _Corresponds, _Fold
    from ._main import Funk


class BaseAgg[V](TableWrapper[V]):
    __slots__ = ()

    def fold_left(self, start: Any) -> _Fold[V]:  # noqa: ANN401
        """Curried left fold over the array segment: `.fold_left(start)(fn)`.

        ```python
        >>> import funkchain as fk
        >>> (
        ...     fk.wrap(range(1, 12))
        ...     .filter(lambda n: n % 2 == 0)
        ...     .map(lambda n: n // 2)
        ...     .fold_left(0)(lambda acc, n: acc + n)
        ... )
        15

        ```
        """
        return _ops.fold_left(self._inner, start)

    def fold_right(self, start: Any) -> _Fold[V]:  # noqa: ANN401
        """Curried right fold over the array segment: `.fold_right(start)(fn)`."""
        return _ops.fold_right(self._inner, start)

    def reduce(self, fn: Callable[[V, V], V]) -> V:
        """Fold the array segment from its first element.

        Raises:
            EmptyInputError: If the array segment is empty.
        """
        return _ops.reduce(self._inner, fn)

    def corresponds[U](self, other: IntoTable[U]) -> _Corresponds[V, U]:
        """Curried pairwise test against `other`: `.corresponds(other)(predicate)`."""
        return _ops.corresponds(self._inner, other)

    def any(self, predicate: Callable[[V], bool]) -> bool:
        """Whether some value satisfies `predicate`."""
        return _ops.any(self._inner, predicate)

    def all(self, predicate: Callable[[V], bool]) -> bool:
        """Whether every value satisfies `predicate`.

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([2, 4]).all(lambda n: n % 2 == 0)
        True

        ```
        """
        return _ops.all(self._inner, predicate)

    def max(self) -> Funk[V]:
        """The greatest value as a one-element wrapper, empty when there is none."""
        return self._new(_ops.max)

    def min(self) -> Funk[V]:
        """The least value as a one-element wrapper, empty when there is none."""
        return self._new(_ops.min)

    def apply[R](self, fn: Callable[..., R]) -> R:
        """Call `fn` with the array segment spread as positional arguments.

        ```python
        >>> import funkchain as fk
        >>> (
        ...     fk.wrap([1, 2, 3, 4])
        ...     .filter(lambda n: n % 2 == 0)
        ...     .map(lambda n: n * n)
        ...     .apply(lambda a, b: a + b)
        ... )
        20

        ```
        """
        return _ops.apply(self._inner, fn)

    def is_empty(self) -> bool:
        """Whether neither segment holds an entry."""
        return _ops.is_empty(self._inner)

    def if_empty[D](self, default: D | Callable[[], D]) -> Self | D:
        """Return `self` unless empty, else `default` (called when callable).

        ```python
        >>> import funkchain as fk
        >>> fk.wrap([1, 2, 3, 4]).filter(lambda n: n > 4).if_empty(lambda: 2 + 2)
        4

        ```
        """
        return _ops.if_empty(self, default)
