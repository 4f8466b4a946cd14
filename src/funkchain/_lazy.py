"""Pull-based producers: one-shot, single-consumer sequences.

A `Producer` hands out one value per pull, wrapped in `Some`, then `NONE` forever once
exhausted. Producers cannot be restarted: call the constructor again for a fresh one.
"""

from __future__ import annotations

import builtins
import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from ._core import CommonBase, PreconditionError, ShapeError, logger
from ._results import NONE, Option, Some
from ._table import Table, is_position

_EXHAUSTED = object()


class Producer[T](CommonBase[Iterator[T]]):
    """A stateful, one-shot sequence pulled one value at a time.

    Pull with `next()` or by calling the producer; both return `Some(value)` or `NONE`.
    Producers are also iterators, so `for value in producer:` works.

    Args:
        data (Iterator[T]): The iterator holding the producer state.

    ```python
    >>> import funkchain as fk
    >>> p = fk.irange(1, 4, 2)
    >>> p.next(), p(), p.next()
    (Some(value=1), Some(value=3), NONE)

    ```
    """

    __slots__ = ("_inner",)

    def __init__(self, data: Iterator[T]) -> None:
        self._inner = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._inner)

    def __call__(self) -> Option[T]:
        return self.next()

    def next(self) -> Option[T]:
        """Pull the next value.

        Returns:
            Option[T]: `Some(value)`, or `NONE` once the producer is exhausted.
        """
        value = next(self._inner, _EXHAUSTED)
        if value is _EXHAUSTED:
            logger.debug("%r exhausted", self)
            return NONE
        return Some(value)

    def take(self, n: int) -> Producer[T]:
        """Limit the producer to its next `n` values.

        The new producer shares this one's state: pulling from either advances both.

        ```python
        >>> import funkchain as fk
        >>> fk.stream(lambda a, b: (b, a + b), 0, 1).take(4).collect()
        Table([(1, 1), (1, 2), (2, 3), (3, 5)])

        ```
        """
        if not is_position(n) or n < 0:
            msg = f"take expects a non-negative integer count, got {n!r}"
            raise PreconditionError(msg)
        return Producer(itertools.islice(self._inner, n))

    def collect(self) -> Table[T]:
        """Drain the remaining values into an array `Table`.

        Never call this on an infinite producer without `take` first.
        """
        return Table(self._inner)


def _check_bounds(start: float, stop: float, step: float) -> None:
    if start > stop:
        msg = f"range start {start!r} is greater than stop {stop!r}"
        raise PreconditionError(msg)
    if step <= 0:
        msg = f"range step must be positive, got {step!r}"
        raise PreconditionError(msg)


def _count_up[N: (int, float)](start: N, stop: N, step: N) -> Iterator[N]:
    return itertools.takewhile(lambda v: v <= stop, itertools.count(start, step))


def range[N: (int, float)](start: N, stop: N, step: N = 1) -> Table[N]:
    """Array of `start, start + step, ...` up to and including `stop`.

    Raises:
        PreconditionError: If `start > stop` or `step <= 0`.

    ```python
    >>> import funkchain as fk
    >>> fk.range(1, 5, 2)
    Table([1, 3, 5])
    >>> fk.range(1, 4, 2)
    Table([1, 3])

    ```
    """
    _check_bounds(start, stop, step)
    return Table(_count_up(start, stop, step))


def irange[N: (int, float)](start: N, stop: N, step: N = 1) -> Producer[N]:
    """Lazy counterpart of `range`, validated the same way, at construction."""
    _check_bounds(start, stop, step)
    return Producer(_count_up(start, stop, step))


def _as_state(result: object) -> tuple[Any, ...]:
    match result:
        case tuple() | list():
            return tuple(result)
        case Table():
            return result.array
        case _:
            return (result,)


def _unfold_states(fn: Callable[..., Any], state: tuple[Any, ...]) -> Iterator[Any]:
    while True:
        state = _as_state(fn(*state))
        yield state if len(state) != 1 else state[0]


def stream(fn: Callable[..., Any], *initial: Any) -> Producer[Any]:  # noqa: ANN401
    """Infinite producer whose state is replaced by its own output on every pull.

    Each pull calls `fn(*state)`. A tuple or list result becomes the new state, a `Table`
    result gives its array segment (keyed entries are dropped), and any other result
    becomes a one-element state. The pull yields the new state: the tuple itself, or its
    sole element.

    ```python
    >>> import funkchain as fk
    >>> fib = fk.stream(lambda a, b: (b, a + b), 1, 1)
    >>> [pair[0] for pair in fib.take(5)]
    [1, 2, 3, 5, 8]
    >>> fk.stream(lambda n: n * 2, 1).take(3).collect()
    Table([2, 4, 8])

    ```
    """
    return Producer(_unfold_states(fn, initial))


def itimes[T](times: int, source: Producer[T] | Callable[[], T]) -> Producer[T]:
    """Producer of at most `times` pulls.

    `source` is either a `Producer`, limited to its next `times` values, or a
    zero-argument callable invoked `times` times.

    Raises:
        PreconditionError: If `times` is not a non-negative integer.
        ShapeError: If `source` is neither a producer nor callable.

    ```python
    >>> import funkchain as fk
    >>> fk.itimes(3, lambda: "x").collect()
    Table(['x', 'x', 'x'])

    ```
    """
    if not is_position(times) or times < 0:
        msg = f"itimes expects a non-negative integer count, got {times!r}"
        raise PreconditionError(msg)
    match source:
        case Producer():
            return source.take(times)
        case _ if callable(source):
            return Producer(source() for _ in builtins.range(times))
        case _:
            msg = f"itimes expects a Producer or a callable, got {type(source).__name__}"
            raise ShapeError(msg)


@dataclass(slots=True, frozen=True)
class _IFill:
    times: int

    def __call__[V](self, value: V) -> Producer[V]:
        return Producer(itertools.repeat(value, self.times))


def ifill(times: int) -> _IFill:
    """Curried lazy fill: `ifill(n)(value)` yields `value` exactly `n` times.

    ```python
    >>> import funkchain as fk
    >>> list(fk.ifill(3)("hello"))
    ['hello', 'hello', 'hello']

    ```
    """
    if not is_position(times) or times < 0:
        msg = f"ifill expects a non-negative integer count, got {times!r}"
        raise PreconditionError(msg)
    return _IFill(times)
