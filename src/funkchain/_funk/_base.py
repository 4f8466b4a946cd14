from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Concatenate

from .._core import CommonBase, get_config
from .._table import Table

if TYPE_CHECKING:
    from ._main import Funk


class TableWrapper[V](CommonBase[Table[V]], Mapping[Any, V]):
    """Shared plumbing of the fluent wrapper: read-only mapping access and re-wrapping."""

    _inner: Table[V]

    __slots__ = ("_inner",)

    def __repr__(self) -> str:
        table = self._inner
        return f"{self.__class__.__name__}({get_config().table_repr(table.array, table.keyed)})"

    def __iter__(self) -> Iterator[Any]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __getitem__(self, key: Any) -> V:  # noqa: ANN401
        return self._inner[key]

    def _new[**P, U](
        self,
        func: Callable[Concatenate[Table[V], P], Table[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Funk[U]:
        return self.__class__(func(self._inner, *args, **kwargs))  # type: ignore[return-value]
