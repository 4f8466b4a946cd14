"""Benchmarks for funkchain operations - benchs.py."""

import funkchain as fk

from ._registery import bench


def _is_even(n: int) -> bool:
    return n % 2 == 0


def _square(n: int) -> int:
    return n * n


# Benchmark classes
# ------------------------------------------------------------


class Transforms:
    """Container-building operations against their builtin counterpart."""

    @bench()
    @staticmethod
    def funk_map(data: fk.Table[int]) -> object:
        """Map every value of an array table."""
        return fk.map(data, _square)

    @bench()
    @staticmethod
    def builtin_map(data: fk.Table[int]) -> object:
        """Same work with a list comprehension."""
        return [_square(x) for x in data.array]

    @bench()
    @staticmethod
    def funk_filter(data: fk.Table[int]) -> object:
        """Filter an array table."""
        return fk.filter(data, _is_even)

    @bench(gen=lambda table: fk.map(table, lambda n: [n, [n, n]]))
    @staticmethod
    def funk_flat_map(data: fk.Table[list[object]]) -> object:
        """Flatten two levels of nesting."""
        return fk.flat_map(data, lambda x: x)

    @bench(gen=lambda table: fk.map(table, lambda n: n % 17))
    @staticmethod
    def funk_distinct(data: fk.Table[int]) -> object:
        """Deduplicate a table with many repeats."""
        return fk.distinct(data)


class Chains:
    """Fluent pipelines."""

    @bench()
    @staticmethod
    def filter_map_fold(data: fk.Table[int]) -> object:
        """The classic three-step chain."""
        return (
            fk.wrap(data)
            .filter(_is_even)
            .map(_square)
            .fold_left(0)(lambda acc, n: acc + n)
        )

    @bench()
    @staticmethod
    def group_by_parity(data: fk.Table[int]) -> object:
        """Grouping entries on a computed key."""
        return fk.wrap(data).group_by(lambda _, v: v % 2)


class Producers:
    """Pull-based producers."""

    @bench()
    @staticmethod
    def irange_drain(data: fk.Table[int]) -> object:
        """Drain a lazy range as long as the data."""
        return fk.irange(1, data.length()).collect()

    @bench()
    @staticmethod
    def stream_take(data: fk.Table[int]) -> object:
        """Pull a Fibonacci stream."""
        return fk.stream(lambda a, b: (b, a + b), 0, 1).take(data.length()).collect()
