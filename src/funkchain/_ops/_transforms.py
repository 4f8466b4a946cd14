"""Operations building a new `Table` out of an existing one.

Every function takes the container first. Anything `Table.from_` accepts can be passed:
a `Table`, a `Funk`, a list, a tuple, a dict...

Some names (`map`, `filter`, `zip`, `slice`) shadow builtins on purpose, the way
`cytoolz.curried` does. The builtins are reached through the `builtins` module here.
"""

from __future__ import annotations

import builtins
import itertools
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import cytoolz as cz
import more_itertools as mit

from .._core import CommonBase, PreconditionError, ShapeError
from .._table import IntoTable, Table, is_position
from .._types import Partitioned, Unzipped


def map[V, R](data: IntoTable[V], fn: Callable[[V], R]) -> Table[R]:
    """Apply `fn` to every value, keeping each entry under its key.

    ```python
    >>> import funkchain as fk
    >>> fk.map([3, 6, 0], lambda n: n * n)
    Table([9, 36, 0])
    >>> fk.map({1: 1, "b": 2}, str)
    Table(['1'], {'b': '2'})

    ```
    """
    table = Table.from_(data)
    return Table(
        builtins.map(fn, table.array),
        cz.dicttoolz.valmap(fn, dict(table.keyed)),
    )


def _is_nested(value: object) -> bool:
    match value:
        case str() | bytes() | bytearray():
            return False
        case Table() | CommonBase() | Mapping():
            return True
        case _:
            return cz.itertoolz.isiterable(value)


def _children(value: Any) -> Iterator[Any]:  # noqa: ANN401
    match value:
        case Table() | CommonBase() | Mapping():
            return iter(Table.from_(value).values())
        case _:
            return iter(value)


def flatten(values: Iterable[Any]) -> Iterator[Any]:
    """Yield the leaves of arbitrarily nested containers, depth first.

    Strings and bytes are leaves. Uses an explicit stack, so depth is not bounded by
    the interpreter recursion limit.
    """
    stack: list[Iterator[Any]] = [iter(values)]
    while stack:
        for value in stack[-1]:
            if _is_nested(value):
                stack.append(_children(value))
                break
            yield value
        else:
            stack.pop()


def flat_map[V](data: IntoTable[V], fn: Callable[[V], Any]) -> Table[Any]:
    """Map `fn` over the values, then flatten every nested result into one array.

    Original keys are dropped, positions are reassigned 1..n in flattening order.

    ```python
    >>> import funkchain as fk
    >>> fk.flat_map([1, 2, 3], lambda x: [x - 1, x, x + 1])
    Table([0, 1, 2, 1, 2, 3, 2, 3, 4])
    >>> fk.flat_map([1, 2], lambda x: [x, [x * 10, [x * 100]]])
    Table([1, 10, 100, 2, 20, 200])

    ```
    """
    return Table(flatten(map(data, fn).values()))


def filter[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> Table[V]:
    """Keep the entries whose value satisfies `predicate`.

    Array matches are compacted in their original order, keyed matches keep their key.

    ```python
    >>> import funkchain as fk
    >>> fk.filter([3, 6, 0, -5, 4, 8], lambda n: n % 2 == 0)
    Table([6, 0, 4, 8])
    >>> fk.filter({1: 1, 2: 2, "x": 4}, lambda n: n % 2 == 0)
    Table([2], {'x': 4})

    ```
    """
    table = Table.from_(data)
    return Table(
        builtins.filter(predicate, table.array),
        cz.dicttoolz.valfilter(predicate, dict(table.keyed)),
    )


def filter_not[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> Table[V]:
    """Keep the entries whose value does not satisfy `predicate`.

    ```python
    >>> import funkchain as fk
    >>> fk.filter_not([3, 6, 0, -5, 4, 8], lambda n: n % 2 == 0)
    Table([3, -5])

    ```
    """
    return filter(data, cz.functoolz.complement(predicate))


def find[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> Table[V]:
    """Return the first entry satisfying `predicate`, under its original key.

    The array segment is searched first, in order. The order keyed entries are tried in
    is not part of the contract. An empty `Table` means no match.

    ```python
    >>> import funkchain as fk
    >>> fk.find([3, 6, 0], lambda n: n % 2 == 0)
    Table([], {2: 6})
    >>> fk.find([3, 6, 0], lambda n: n > 100)
    Table([])

    ```
    """
    for key, value in Table.from_(data).entries():
        if predicate(value):
            return Table(keyed={key: value})
    return Table()


def array_part[V](data: IntoTable[V]) -> Table[V]:
    """Return the array segment alone, keyed entries dropped.

    ```python
    >>> import funkchain as fk
    >>> fk.array_part({1: "a", 2: "b", "k": "v"})
    Table(['a', 'b'])

    ```
    """
    return Table(Table.from_(data).array)


def partition[V](
    data: IntoTable[V], predicate: Callable[[V], bool]
) -> Partitioned[Table[V]]:
    """Split the values in two array `Table`s: matches and the rest.

    Relative order is kept. Keyed values follow the array values and lose their key.

    ```python
    >>> import funkchain as fk
    >>> evens, odds = fk.partition([1, 3, 2, 7, 4, 9], lambda n: n % 2 == 0)
    >>> evens, odds
    (Table([2, 4]), Table([1, 3, 7, 9]))

    ```
    """
    rest, matches = mit.partition(predicate, Table.from_(data).values())
    return Partitioned(Table(matches), Table(rest))


def take_while[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> Table[V]:
    """Longest prefix of the array segment whose values satisfy `predicate`.

    ```python
    >>> import funkchain as fk
    >>> fk.take_while([1, 2, 3, 4, 0, 2, 5], lambda n: n < 4)
    Table([1, 2, 3])

    ```
    """
    return Table(itertools.takewhile(predicate, Table.from_(data).array))


def drop_while[V](data: IntoTable[V], predicate: Callable[[V], bool]) -> Table[V]:
    """The array segment once its longest prefix satisfying `predicate` is dropped.

    ```python
    >>> import funkchain as fk
    >>> fk.drop_while([1, 2, 2, 4, 6, 2, 1], lambda n: n < 5)
    Table([6, 2, 1])

    ```
    """
    return Table(itertools.dropwhile(predicate, Table.from_(data).array))


def distinct[V](data: IntoTable[V]) -> Table[V]:
    """One occurrence of every distinct value, in first-seen order.

    Values must be hashable.

    ```python
    >>> import funkchain as fk
    >>> fk.distinct([1, 2, 2, 3, 1, 2, 5])
    Table([1, 2, 3, 5])

    ```
    """
    return Table(cz.itertoolz.unique(Table.from_(data).values()))


def group_by[V, G](
    data: IntoTable[V], fn: Callable[[Any, V], G]
) -> Table[Table[tuple[Any, V]]]:
    """Group the entries by `fn(key, value)`.

    Each group maps to an array `Table` of `(key, value)` tuples, in input order.
    Integer groups follow the usual canonical form: a group equal to the next free
    position joins the array segment.

    ```python
    >>> import funkchain as fk
    >>> grouped = fk.group_by(["a", "bb", "cc"], lambda k, v: f"len{len(v)}")
    >>> grouped["len2"]
    Table([(2, 'bb'), (3, 'cc')])

    ```
    """
    groups: dict[G, list[tuple[Any, V]]] = {}
    for key, value in Table.from_(data).entries():
        groups.setdefault(fn(key, value), []).append((key, value))
    return Table(keyed=cz.dicttoolz.valmap(Table, groups))


def slice[V](data: IntoTable[V], start: int, stop: int) -> Table[V]:
    """Positions `start` to `stop` of the array segment, both inclusive.

    Positions outside 1..n are skipped, so out of range bounds never fail.

    Raises:
        ShapeError: If a bound is not an integer.

    ```python
    >>> import funkchain as fk
    >>> fk.slice([10, 20, 30, 40], 2, 3)
    Table([20, 30])
    >>> fk.slice([10, 20, 30, 40], 3, 9)
    Table([30, 40])

    ```
    """
    if not (is_position(start) and is_position(stop)):
        msg = f"slice bounds must be integers, got {start!r} and {stop!r}"
        raise ShapeError(msg)
    return Table(Table.from_(data).array[builtins.max(start, 1) - 1 : builtins.max(stop, 0)])


def reverse[V](data: IntoTable[V]) -> Table[V]:
    """The array segment in reverse order.

    ```python
    >>> import funkchain as fk
    >>> fk.reverse([1, 2, 3])
    Table([3, 2, 1])

    ```
    """
    return Table(reversed(Table.from_(data).array))


def zip[V, U](data: IntoTable[V], other: IntoTable[U]) -> Table[tuple[V, U]]:
    """Pair up the array segments, stopping at the shorter one.

    ```python
    >>> import funkchain as fk
    >>> fk.zip([1, 2], ["a", "b", "c"])
    Table([(1, 'a'), (2, 'b')])

    ```
    """
    return Table(builtins.zip(Table.from_(data).array, Table.from_(other).array))


def _as_pair(value: object) -> tuple[Any, Any]:
    match value:
        case Table() | CommonBase():
            pair = Table.from_(value)
            if pair.length() == 2 and not pair.keyed:  # noqa: PLR2004
                return pair.array[0], pair.array[1]
        case tuple() | list() if len(value) == 2:  # noqa: PLR2004
            return (value[0], value[1])
        case _:
            pass
    msg = f"unzip expects 2-element pairs, got {value!r}"
    raise ShapeError(msg)


def unzip[L, R](data: IntoTable[Sequence[L | R]]) -> Unzipped[L, R]:
    """Split a container of pairs into the tuple of firsts and the tuple of seconds.

    Raises:
        ShapeError: If a value is not a 2-element tuple, list, `Table` or `Funk`.

    ```python
    >>> import funkchain as fk
    >>> numbers, letters = fk.unzip([(5, "a"), (8, "b")])
    >>> numbers, letters
    ((5, 8), ('a', 'b'))

    ```
    """
    pairs = [_as_pair(value) for value in Table.from_(data).values()]
    if not pairs:
        return Unzipped((), ())
    left, right = builtins.zip(*pairs)
    return Unzipped(left, right)


@dataclass(slots=True, frozen=True)
class _Fill:
    times: int

    def __call__[V](self, value: V) -> Table[V]:
        return Table(itertools.repeat(value, self.times))


def fill(times: int) -> _Fill:
    """Curried constructor: `fill(n)(value)` is an array of `value` repeated `n` times.

    Raises:
        PreconditionError: If `times` is not a non-negative integer.

    ```python
    >>> import funkchain as fk
    >>> fk.fill(3)("hello!")
    Table(['hello!', 'hello!', 'hello!'])

    ```
    """
    if not is_position(times) or times < 0:
        msg = f"fill expects a non-negative integer count, got {times!r}"
        raise PreconditionError(msg)
    return _Fill(times)


def listify[V](data: IntoTable[V]) -> Table[Any]:
    """Flatten both segments into one array.

    Array values come first. Keyed entries follow: integer keys give their bare value,
    other keys give a `(key, value)` tuple.

    ```python
    >>> import funkchain as fk
    >>> fk.listify(fk.Table([1, 2], {"hello": "world", 9: 3}))
    Table([1, 2, ('hello', 'world'), 3])

    ```
    """
    table = Table.from_(data)
    keyed = (
        value if is_position(key) else (key, value)
        for key, value in table.keyed.items()
    )
    return Table(itertools.chain(table.array, keyed))
