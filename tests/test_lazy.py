"""Tests for ranges and pull-based producers."""

import logging

import pytest

import funkchain as fk


def _fib(a: int, b: int) -> tuple[int, int]:
    return (b, a + b)


class TestRange:
    """Eager and lazy ranges."""

    def test_range_inclusive(self) -> None:
        """The stop value is included when reached."""
        assert fk.range(1, 5, 2).array == (1, 3, 5)
        assert fk.range(1, 4, 2).array == (1, 3)

    def test_range_default_step(self) -> None:
        """Step defaults to 1, a single value when start equals stop."""
        assert fk.range(1, 3).array == (1, 2, 3)
        assert fk.range(2, 2).array == (2,)

    def test_range_floats(self) -> None:
        """Float steps are supported."""
        assert fk.range(0, 1, 0.5).array == (0, 0.5, 1.0)

    @pytest.mark.parametrize(("start", "stop", "step"), [(5, 1, 1), (1, 5, 0), (1, 5, -1)])
    def test_range_preconditions(self, start: int, stop: int, step: int) -> None:
        """Descending bounds and non positive steps fail fast."""
        with pytest.raises(fk.PreconditionError):
            fk.range(start, stop, step)
        with pytest.raises(fk.PreconditionError):
            fk.irange(start, stop, step)

    def test_irange_pulls(self) -> None:
        """Each pull gives the next value, then the end marker."""
        producer = fk.irange(1, 4, 2)
        assert producer.next() == fk.Some(1)
        assert producer() == fk.Some(3)
        assert producer.next().is_none()
        assert producer.next().is_none()

    def test_irange_is_not_restartable(self) -> None:
        """Once drained, a producer stays drained; a new call starts over."""
        producer = fk.irange(1, 3)
        assert list(producer) == [1, 2, 3]
        assert list(producer) == []
        assert list(fk.irange(1, 3)) == [1, 2, 3]


class TestStream:
    """stream feeds its output back as its state."""

    def test_fibonacci_pairs(self) -> None:
        """The first element of each produced pair walks the sequence."""
        firsts = [x for x, _ in fk.stream(_fib, 1, 1).take(5)]
        assert firsts == [1, 2, 3, 5, 8]

    def test_state_is_the_last_output(self) -> None:
        """The next pull starts from what was just produced."""
        producer = fk.stream(_fib, 0, 1)
        assert producer.next().unwrap() == (1, 1)
        assert producer.next().unwrap() == (1, 2)

    def test_single_value_state(self) -> None:
        """A scalar result is yielded bare."""
        assert fk.stream(lambda n: n + 1, 0).take(3).collect().array == (1, 2, 3)

    def test_list_result_becomes_state(self) -> None:
        """A list result is a state like a tuple."""
        producer = fk.stream(lambda a, b: [b, a], 1, 2)
        assert producer.next().unwrap() == (2, 1)
        assert producer.next().unwrap() == (1, 2)

    def test_table_result_becomes_state(self) -> None:
        """A Table result gives its array segment as the next state."""
        producer = fk.stream(lambda a, b: fk.Table([b, a + b], {"k": 0}), 1, 1)
        assert producer.next().unwrap() == (1, 2)
        assert producer.next().unwrap() == (2, 3)


class TestITimes:
    """itimes limits a producer or repeats a callable."""

    def test_itimes_limits_a_stream(self) -> None:
        """Only the first n pulls of the stream come through."""
        firsts = [x for x, _ in fk.itimes(5, fk.stream(_fib, 1, 1))]
        assert firsts == [1, 2, 3, 5, 8]

    def test_itimes_calls_a_function(self) -> None:
        """The callable runs exactly n times."""
        calls: list[int] = []

        def _tick() -> int:
            calls.append(1)
            return len(calls)

        producer = fk.itimes(3, _tick)
        assert calls == []
        assert list(producer) == [1, 2, 3]
        assert producer.next().is_none()
        assert len(calls) == 3

    def test_itimes_zero(self) -> None:
        """Zero pulls ends immediately."""
        assert fk.itimes(0, lambda: 1).next().is_none()

    def test_itimes_invalid(self) -> None:
        """Negative counts and non callables are rejected."""
        with pytest.raises(fk.PreconditionError):
            fk.itimes(-1, lambda: 1)
        with pytest.raises(fk.ShapeError):
            fk.itimes(2, 42)  # type: ignore[arg-type]


class TestIFill:
    """ifill is a curried lazy repeat."""

    def test_ifill(self) -> None:
        """The value comes back exactly n times."""
        assert list(fk.ifill(3)("hello")) == ["hello"] * 3

    def test_ifill_negative(self) -> None:
        """Negative counts are rejected."""
        with pytest.raises(fk.PreconditionError):
            fk.ifill(-2)


def test_option_unwrap_on_end_marker() -> None:
    """Unwrapping the end marker raises."""
    producer = fk.ifill(0)("x")
    with pytest.raises(fk.OptionUnwrapError):
        producer.next().unwrap()
    assert producer.next().unwrap_or("done") == "done"
    assert fk.irange(1, 1).next().map(str) == fk.Some("1")
    assert producer.next().map(str).is_none()


class TestProducerHelpers:
    """take and collect on producers."""

    @pytest.mark.parametrize("count", [-1, 1.5, "2"])
    def test_take_rejects_bad_counts(self, count: object) -> None:
        """Only non negative integers are valid counts."""
        with pytest.raises(fk.PreconditionError):
            fk.irange(1, 5).take(count)  # type: ignore[arg-type]

    def test_take_shares_state(self) -> None:
        """Pulling from the limited producer advances the source."""
        producer = fk.irange(1, 5)
        assert list(producer.take(2)) == [1, 2]
        assert producer.next() == fk.Some(3)

    def test_collect_after_partial_drain(self) -> None:
        """collect only gathers what is left."""
        producer = fk.irange(1, 5)
        producer.next()
        producer()
        assert producer.collect() == fk.Table([3, 4, 5])
        assert fk.is_empty(producer.collect())


class TestLogging:
    """The package logger."""

    def test_package_logger_has_null_handler(self) -> None:
        """Importing funkchain never prints unconfigured log records."""
        handlers = logging.getLogger("funkchain").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_exhaustion_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Pulling past the end emits a debug record."""
        caplog.set_level(logging.DEBUG, logger="funkchain")
        assert fk.ifill(0)("x").next().is_none()
        assert any(
            record.name == "funkchain" and "exhausted" in record.getMessage()
            for record in caplog.records
        )

    def test_values_are_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Only exhaustion is recorded, not regular pulls."""
        caplog.set_level(logging.DEBUG, logger="funkchain")
        fk.ifill(2)("x").next()
        assert caplog.records == []
