import warnings
from collections.abc import Callable
from functools import wraps


def renamed[**P, R](new_name: str):
    """Mark a function as the legacy name of `new_name`.

    Calls still go through, after a `DeprecationWarning` pointing at the caller.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        msg = f"`{func.__name__}` is deprecated, use `{new_name}` instead."

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(msg, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        return wrapper

    return decorator
