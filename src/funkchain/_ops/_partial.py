from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from .._core import ShapeError


def _check_callable(fn: object, name: str) -> None:
    if not callable(fn):
        msg = f"{name} expects a callable, got {type(fn).__name__}"
        raise ShapeError(msg)


def partial[R](fn: Callable[..., R], *args: Any, **kwargs: Any) -> Callable[..., R]:  # noqa: ANN401
    """Fix the leading arguments of `fn`.

    ```python
    >>> import funkchain as fk
    >>> fraction = fk.partial(lambda a, b: a / b, 1)
    >>> fraction(4)
    0.25

    ```
    """
    _check_callable(fn, "partial")
    return functools.partial(fn, *args, **kwargs)


def partial_last[R](fn: Callable[..., R], *args: Any) -> Callable[..., R]:  # noqa: ANN401
    """Fix the trailing arguments of `fn`: the new function's arguments come first.

    ```python
    >>> import funkchain as fk
    >>> halve = fk.partial_last(lambda a, b: a / b, 2)
    >>> halve(4)
    2.0

    ```
    """
    _check_callable(fn, "partial_last")

    @functools.wraps(fn)
    def _partial_last(*leading: Any, **kwargs: Any) -> R:  # noqa: ANN401
        return fn(*leading, *args, **kwargs)

    return _partial_last
