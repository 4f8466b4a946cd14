import logging

from ._core import (
    Config,
    EmptyInputError,
    FunkError,
    PreconditionError,
    ShapeError,
    configure,
    get_config,
)
from ._funk import Funk, wrap
from ._lazy import Producer, ifill, irange, itimes, range, stream
from ._ops import (
    all,
    any,
    apply,
    array_part,
    corresponds,
    distinct,
    drop_while,
    exists,
    fill,
    filter,
    filter_not,
    find,
    flat_map,
    flatten,
    fold_left,
    fold_right,
    forall,
    group_by,
    if_empty,
    is_empty,
    listify,
    map,
    max,
    min,
    partial,
    partial_last,
    partition,
    reduce,
    reverse,
    slice,
    take_while,
    unzip,
    zip,
)
from ._results import NONE, Option, OptionUnwrapError, Some
from ._table import Table
from ._types import Item, Partitioned, Unzipped

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "EmptyInputError",
    "Funk",
    "FunkError",
    "Item",
    "Option",
    "OptionUnwrapError",
    "Partitioned",
    "PreconditionError",
    "Producer",
    "ShapeError",
    "Some",
    "Table",
    "Unzipped",
    "all",
    "any",
    "apply",
    "array_part",
    "configure",
    "corresponds",
    "distinct",
    "drop_while",
    "exists",
    "fill",
    "filter",
    "filter_not",
    "find",
    "flat_map",
    "flatten",
    "fold_left",
    "fold_right",
    "forall",
    "get_config",
    "group_by",
    "if_empty",
    "ifill",
    "irange",
    "is_empty",
    "itimes",
    "listify",
    "map",
    "max",
    "min",
    "partial",
    "partial_last",
    "partition",
    "range",
    "reduce",
    "reverse",
    "slice",
    "stream",
    "take_while",
    "unzip",
    "wrap",
    "zip",
]
