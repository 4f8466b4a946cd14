from ._folds import (
    all,
    any,
    apply,
    corresponds,
    exists,
    fold_left,
    fold_right,
    forall,
    if_empty,
    is_empty,
    max,
    min,
    reduce,
)
from ._partial import partial, partial_last
from ._transforms import (
    array_part,
    distinct,
    drop_while,
    fill,
    filter,
    filter_not,
    find,
    flat_map,
    flatten,
    group_by,
    listify,
    map,
    partition,
    reverse,
    slice,
    take_while,
    unzip,
    zip,
)

__all__ = [
    "all",
    "any",
    "apply",
    "array_part",
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
    "group_by",
    "if_empty",
    "is_empty",
    "listify",
    "map",
    "max",
    "min",
    "partial",
    "partial_last",
    "partition",
    "reduce",
    "reverse",
    "slice",
    "take_while",
    "unzip",
    "zip",
]
