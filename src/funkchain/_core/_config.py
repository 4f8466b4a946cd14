from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from pprint import pformat
from typing import Any


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by `Table` and `Funk` reprs.

    Args:
        max_items (int): Entries shown per segment before truncating with `...`.
        depth (int): Nesting depth passed to `pprint.pformat`.
        width (int): Line width passed to `pprint.pformat`.
        compact (bool): Whether `pprint.pformat` packs short items on one line.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80
    compact: bool = True

    def _format(self, value: object) -> str:
        return pformat(
            value,
            depth=self.depth,
            width=self.width,
            compact=self.compact,
            sort_dicts=False,
        )

    def table_repr(self, array: Sequence[Any], keyed: Mapping[Any, Any]) -> str:
        shown = self._format(list(array[: self.max_items]))
        if len(array) > self.max_items:
            shown += "..."
        if not keyed:
            return shown
        truncated = dict(list(keyed.items())[: self.max_items])
        suffix = "..." if len(keyed) > self.max_items else ""
        return f"{shown}, {self._format(truncated)}{suffix}"


_CONFIG = Config()


def get_config() -> Config:
    """Return the active display configuration."""
    return _CONFIG


def configure(**changes: Any) -> Config:  # noqa: ANN401
    """Replace fields of the active configuration and return the new one.

    Unknown field names raise `TypeError`.

    ```python
    >>> import funkchain as fk
    >>> fk.configure(max_items=2)
    Config(max_items=2, depth=3, width=80, compact=True)
    >>> fk.Table([1, 2, 3])
    Table([1, 2]...)
    >>> fk.configure(max_items=20).max_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    known = {f.name for f in fields(Config)}
    unknown = set(changes) - known
    if unknown:
        msg = f"Unknown config fields: {sorted(unknown)}"
        raise TypeError(msg)
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
