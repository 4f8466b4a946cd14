"""Tests for the container-building operations."""

import pytest

import funkchain as fk

VALUES = (3, 6, 0, -5, 4, 8)


def _is_even(n: int) -> bool:
    return n % 2 == 0


class TestMap:
    """map keeps every entry under its key."""

    def test_map_array(self) -> None:
        """Each position holds fn of the original value."""
        result = fk.map(VALUES, lambda n: n * n)
        assert result.array == (9, 36, 0, 25, 16, 64)
        assert result.length() == len(VALUES)

    def test_map_keeps_keyed_entries(self) -> None:
        """Keyed entries stay keyed, under the same key."""
        result = fk.map(fk.Table([1], {"a": 2}), lambda n: n + 1)
        assert result.array == (2,)
        assert dict(result.keyed) == {"a": 3}

    def test_map_does_not_mutate_input(self) -> None:
        """Inputs are left untouched."""
        data = [1, 2]
        fk.map(data, lambda n: n * 2)
        assert data == [1, 2]


class TestFlatMap:
    """flat_map flattens nested results at any depth."""

    def test_flat_map_lists(self) -> None:
        """One level of nesting."""
        result = fk.flat_map([1, 2, 3], lambda x: [x - 1, x, x + 1])
        assert result.array == (0, 1, 2, 1, 2, 3, 2, 3, 4)

    def test_flat_map_nested_tables(self) -> None:
        """Tables and dict values are flattened too."""
        result = fk.flat_map([1], lambda x: fk.Table([x, {"k": x + 1}]))
        assert result.array == (1, 2)

    def test_flat_map_strings_are_leaves(self) -> None:
        """Strings are not split into characters."""
        assert fk.flat_map(["ab"], lambda s: [s, [s]]).array == ("ab", "ab")

    def test_flatten_deep_nesting(self) -> None:
        """Depth is not limited by the recursion limit."""
        nested: list[object] = [0]
        for i in range(1, 5000):
            nested = [nested, i]
        assert list(fk.flatten([nested])) == list(range(5000))


class TestFilter:
    """filter and filter_not select values by predicate."""

    def test_filter_compacts_array(self) -> None:
        """Array matches are renumbered 1..k."""
        assert fk.filter(VALUES, _is_even).array == (6, 0, 4, 8)

    def test_filter_not(self) -> None:
        """filter_not keeps the complement."""
        assert fk.filter_not(VALUES, _is_even).array == (3, -5)

    def test_filter_keeps_keyed_keys(self) -> None:
        """Keyed matches keep their key."""
        result = fk.filter(fk.Table([1, 2], {"a": 4, "b": 5}), _is_even)
        assert result.array == (2,)
        assert dict(result.keyed) == {"a": 4}

    def test_filter_and_filter_not_rebuild_input(self) -> None:
        """Both sides together hold every value once."""
        kept = fk.filter(VALUES, _is_even).array
        dropped = fk.filter_not(VALUES, _is_even).array
        assert sorted(kept + dropped) == sorted(VALUES)
        assert fk.all(kept, _is_even)


class TestFind:
    """find returns the first match under its key."""

    def test_find_keeps_position(self) -> None:
        """The match stays at its original position."""
        result = fk.find(VALUES, _is_even)
        assert dict(result) == {2: 6}

    def test_find_first_position_is_array_like(self) -> None:
        """A match at position 1 is an array of one."""
        assert fk.find(VALUES, lambda n: n == 3).array == (3,)

    def test_find_keyed(self) -> None:
        """Keyed matches keep their key."""
        assert dict(fk.find({"a": 1}, lambda n: n == 1)) == {"a": 1}

    def test_find_nothing(self) -> None:
        """No match gives an empty table."""
        assert fk.is_empty(fk.find(VALUES, lambda n: n > 100))


def test_array_part_is_idempotent() -> None:
    """array_part drops keyed entries, and applying it twice changes nothing."""
    t = fk.Table([1, 2], {"k": "v"})
    once = fk.array_part(t)
    assert once == fk.Table([1, 2])
    assert fk.array_part(once) == once


def test_partition() -> None:
    """partition splits matches from the rest, order kept."""
    evens, odds = fk.partition([1, 3, 2, 7, 4, 9], _is_even)
    assert evens.array == (2, 4)
    assert odds.array == (1, 3, 7, 9)


def test_partition_includes_keyed_values() -> None:
    """Keyed values land on one side, without their key."""
    result = fk.partition(fk.Table([1], {"a": 2}), _is_even)
    assert result.matches.array == (2,)
    assert result.rest.array == (1,)


def test_take_while_and_drop_while() -> None:
    """The prefix and the remainder of the array segment."""
    assert fk.take_while([1, 2, 3, 4, 0, 2, 5], lambda n: n < 4).array == (1, 2, 3)
    assert fk.drop_while([1, 2, 2, 4, 6, 2, 1], lambda n: n < 5).array == (6, 2, 1)


def test_distinct() -> None:
    """Each distinct value appears once."""
    result = fk.distinct([1, 2, 2, 3, 1, 2, 5])
    assert sorted(result.array) == [1, 2, 3, 5]
    assert result.length() == 4


def test_distinct_unhashable_values_fail() -> None:
    """Distinct relies on hashing."""
    with pytest.raises(TypeError):
        fk.distinct([[1], [1]])


class TestGroupBy:
    """group_by builds keyed groups of (key, value) pairs."""

    def test_group_by_parity_of_key(self) -> None:
        """Integer groups are addressable whichever segment they land in."""
        grouped = fk.group_by([1, 5, 3, 9, 2, 5], lambda k, _: k % 2)
        assert dict(grouped) == {
            1: fk.Table([(1, 1), (3, 3), (5, 2)]),
            0: fk.Table([(2, 5), (4, 9), (6, 5)]),
        }

    def test_group_by_string_groups(self) -> None:
        """Non-integer groups stay keyed."""
        grouped = fk.group_by({"a": 1, "b": 2, "c": 3}, lambda _, v: v > 1)
        assert grouped[False].array == (("a", 1),)
        assert grouped[True].array == (("b", 2), ("c", 3))


class TestSlice:
    """slice reads inclusive positions of the array segment."""

    def test_slice_inside_bounds(self) -> None:
        """Positions from..to are kept and renumbered."""
        assert fk.slice([10, 20, 30, 40], 2, 3).array == (20, 30)

    def test_slice_skips_missing_positions(self) -> None:
        """Out of range positions are skipped."""
        assert fk.slice([10, 20], 0, 5).array == (10, 20)
        assert fk.slice([10, 20], 3, 1).array == ()

    def test_slice_rejects_non_integer_bounds(self) -> None:
        """Bounds must be integers."""
        with pytest.raises(fk.ShapeError):
            fk.slice([1], 1.5, 2)  # type: ignore[arg-type]


def test_reverse() -> None:
    """reverse returns the array segment backwards."""
    assert fk.reverse(fk.Table([1, 2, 3], {"k": 0})).array == (3, 2, 1)


class TestZip:
    """zip and unzip."""

    def test_zip_stops_at_shorter(self) -> None:
        """Pairs up to the shorter array segment."""
        assert fk.zip([1, 2], ["a", "b", "c"]).array == ((1, "a"), (2, "b"))

    def test_unzip_reverses_zip(self) -> None:
        """unzip rebuilds both inputs, truncated to the shorter one."""
        left, right = fk.unzip(fk.zip([1, 2], ["a", "b", "c"]))
        assert left == (1, 2)
        assert right == ("a", "b")

    def test_unzip_empty(self) -> None:
        """No pairs gives two empty tuples."""
        assert fk.unzip([]) == fk.Unzipped((), ())

    def test_unzip_table_and_wrapper_pairs(self) -> None:
        """Pairs may be Tables or wrappers, like any other container."""
        pairs = [fk.Table([1, "a"]), fk.wrap([2, "b"])]
        assert fk.unzip(pairs) == fk.Unzipped((1, 2), ("a", "b"))

    def test_unzip_rejects_keyed_or_long_tables(self) -> None:
        """A table pair holds exactly two positions and nothing keyed."""
        with pytest.raises(fk.ShapeError):
            fk.unzip([fk.Table([1, 2], {"k": 3})])
        with pytest.raises(fk.ShapeError):
            fk.unzip([fk.wrap([1, 2, 3])])

    def test_unzip_rejects_bad_shapes(self) -> None:
        """Every value must be a pair."""
        with pytest.raises(fk.ShapeError):
            fk.unzip([(1, 2), (3,)])
        with pytest.raises(fk.ShapeError):
            fk.unzip([1, 2])


class TestFill:
    """fill is curried."""

    def test_fill(self) -> None:
        """Value repeated n times."""
        assert fk.fill(5)("hello!").array == ("hello!",) * 5

    def test_fill_zero(self) -> None:
        """Zero times gives an empty table."""
        assert fk.is_empty(fk.fill(0)("x"))

    def test_fill_negative_fails(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(fk.PreconditionError):
            fk.fill(-1)


def test_listify() -> None:
    """Array values first, then keyed entries."""
    result = fk.listify(fk.Table([1, 2, 3], {"hello": "world"}))
    assert result.array == (1, 2, 3, ("hello", "world"))
