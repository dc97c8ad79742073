import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from tenpin.exceptions import (
    FrameAlreadyComplete,
    InvalidPinCount,
    InvalidSpareState,
    InvalidStrikeState,
    PinCountExceeded,
)
from tenpin.scoring.frame import FinalFrame, FinalFrameKind, Frame, FrameStatus


def test_open_final_frame_ends_after_two_rolls():
    frame = FinalFrame()
    frame.record_miss()
    assert not frame.is_complete()
    frame.record_roll(2)
    assert frame.is_complete()
    assert frame.status is FrameStatus.OPEN
    assert frame.kind is FinalFrameKind.REGULAR
    with pytest.raises(FrameAlreadyComplete):
        frame.record_roll(1)
    assert frame.points() == [0, 2]


def test_spare_grants_one_bonus_roll():
    frame = FinalFrame()
    frame.record_roll(5)
    frame.record_spare()
    assert not frame.is_complete()
    assert frame.status is FrameStatus.INCOMPLETE
    assert frame.kind is FinalFrameKind.SPARE
    frame.record_roll(7)
    assert frame.is_complete()
    assert frame.is_spare()
    assert frame.points() == [5, 5, 7]
    with pytest.raises(FrameAlreadyComplete):
        frame.record_miss()


def test_spare_bonus_roll_may_be_a_strike():
    frame = FinalFrame()
    frame.record_roll(3)
    frame.record_spare()
    frame.record_strike()
    assert frame.points() == [3, 7, 10]
    assert frame.is_complete()


def test_three_strikes():
    frame = FinalFrame()
    for _ in range(3):
        assert not frame.is_complete()
        frame.record_strike()
    assert frame.is_complete()
    assert frame.is_strike()
    assert frame.points() == [10, 10, 10]
    with pytest.raises(FrameAlreadyComplete):
        frame.record_strike()


def test_two_strikes_then_count():
    frame = FinalFrame()
    frame.record_strike()
    frame.record_strike()
    frame.record_roll(9)
    assert frame.is_complete()
    assert frame.points() == [10, 10, 9]


def test_strike_then_non_strike_ends_frame():
    frame = FinalFrame()
    frame.record_strike()
    frame.record_roll(5)
    assert frame.is_complete()
    assert frame.status is FrameStatus.STRIKE
    with pytest.raises(FrameAlreadyComplete):
        frame.record_roll(3)
    assert frame.points() == [10, 5]


def test_roll_after_strike_is_on_fresh_rack():
    frame = FinalFrame()
    frame.record_strike()
    frame.record_roll(10)
    assert frame.points() == [10, 10]
    assert not frame.is_complete()


def test_first_pair_bounded_by_ten_pins():
    frame = FinalFrame()
    frame.record_roll(6)
    with pytest.raises(PinCountExceeded):
        frame.record_roll(6)
    assert frame.points() == [6]


def test_spare_needs_single_roll_in_rack():
    frame = FinalFrame()
    with pytest.raises(InvalidSpareState):
        frame.record_spare()
    frame.record_strike()
    with pytest.raises(InvalidSpareState):
        frame.record_spare()
    assert frame.points() == [10]


def test_spare_after_spare_is_rejected():
    frame = FinalFrame()
    frame.record_roll(4)
    frame.record_spare()
    with pytest.raises(InvalidSpareState):
        frame.record_spare()
    assert frame.points() == [4, 6]


def test_strike_needs_fresh_rack():
    frame = FinalFrame()
    frame.record_roll(4)
    with pytest.raises(InvalidStrikeState):
        frame.record_strike()
    assert frame.points() == [4]


def test_invalid_pin_count():
    frame = FinalFrame()
    with pytest.raises(InvalidPinCount):
        frame.record_roll(12)


def test_final_frame_never_grants_bonus():
    frame = FinalFrame()
    frame.record_strike()
    frame.record_strike()
    frame.record_strike()
    following = Frame()
    following.record_roll(9)
    assert frame.is_final_frame()
    assert frame.strike_bonus([following]) == 0
    assert frame.spare_bonus(following) == 0
