import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from tenpin.exceptions import FrameAlreadyComplete, PinCountExceeded
from tenpin.scoring import bowling


def test_bowling_simple_score():
    state = bowling.init_state({})
    for _ in range(20):
        state = bowling.apply({"type": "ROLL", "pins": 1}, state)
    summary = bowling.summary(state)
    assert summary["total"] == 20
    assert summary["frameCount"] == 10
    assert summary["complete"] is True
    assert summary["scores"] == [2] * 10
    assert summary["running"] == list(range(2, 21, 2))


def test_bowling_event_types():
    state = bowling.init_state({})
    for event in (
        {"type": "STRIKE"},
        {"type": "ROLL", "pins": 4},
        {"type": "SPARE"},
        {"type": "MISS"},
    ):
        state = bowling.apply(event, state)
    summary = bowling.summary(state)
    assert summary["frames"] == [[10], [4, 6], [0]]
    assert summary["status"] == ["strike", "spare", "incomplete"]
    assert summary["scores"] == [20, 10, 0]
    assert summary["total"] == 30
    assert summary["complete"] is False


@pytest.mark.parametrize(
    "event",
    [
        {"type": "POINT", "by": "A"},
        {},
        {"type": "ROLL"},
        {"type": "ROLL", "pins": "4"},
        {"type": "ROLL", "pins": True},
    ],
)
def test_bowling_rejects_malformed_events(event):
    state = bowling.init_state({})
    with pytest.raises(ValueError, match="invalid bowling event"):
        bowling.apply(event, state)


def test_bowling_rule_errors_propagate():
    state = bowling.init_state({})
    state = bowling.apply({"type": "ROLL", "pins": 6}, state)
    with pytest.raises(PinCountExceeded):
        bowling.apply({"type": "ROLL", "pins": 6}, state)
    assert bowling.summary(state)["frames"] == [[6]]


def test_bowling_stops_after_final_frame():
    state = bowling.init_state({})
    for _ in range(12):
        state = bowling.apply({"type": "STRIKE"}, state)
    assert bowling.summary(state)["total"] == 300
    with pytest.raises(FrameAlreadyComplete):
        bowling.apply({"type": "STRIKE"}, state)
