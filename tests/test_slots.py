"""Tests for slot usage in funkchain classes."""

import funkchain as fk


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(fk.Table([1, 2]))
    assert _check_slots(fk.wrap([1, 2]))
    assert _check_slots(fk.irange(1, 3))
    assert _check_slots(fk.Some(42))
    assert _check_slots(fk.NONE)
    assert _check_slots(fk.fill(2))
    assert _check_slots(fk.fold_left([1], 0))
    assert _check_slots(fk.corresponds([1], [1]))
