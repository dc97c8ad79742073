"""Frame state for ten-pin bowling.

A regular frame (1-9) holds up to two rolls and may lend a spare or strike
bonus to the frames before it. The final frame (10) holds up to three rolls,
scores its own bonus rolls internally and never takes part in cross-frame
bonuses. Every status is derived from the recorded rolls; nothing is stored
beside them.
"""
from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..exceptions import (
    FrameAlreadyComplete,
    InvalidPinCount,
    InvalidSpareState,
    InvalidStrikeState,
    PinCountExceeded,
)

NUM_OF_PINS = 10


class FrameStatus(str, enum.Enum):
    INCOMPLETE = "incomplete"
    OPEN = "open"
    SPARE = "spare"
    STRIKE = "strike"


class FinalFrameKind(str, enum.Enum):
    REGULAR = "regular"
    SPARE = "spare"
    STRIKE = "strike"


def _check_pins(pins: object) -> int:
    # bool is a subclass of int; True must not count as one pin
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidPinCount(pins)
    if not 0 <= pins <= NUM_OF_PINS:
        raise InvalidPinCount(pins)
    return pins


class BaseFrame(ABC):
    """Call surface shared by regular and final frames."""

    def __init__(self) -> None:
        self._rolls: List[int] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rolls={self._rolls!r}, status={self.status.value})"

    @property
    def status(self) -> FrameStatus:
        return self._status()

    @abstractmethod
    def _status(self) -> FrameStatus:
        ...

    @abstractmethod
    def record_roll(self, pins: int) -> None:
        ...

    @abstractmethod
    def record_spare(self) -> None:
        ...

    @abstractmethod
    def record_strike(self) -> None:
        ...

    @abstractmethod
    def is_complete(self) -> bool:
        ...

    @abstractmethod
    def is_final_frame(self) -> bool:
        ...

    def record_miss(self) -> None:
        self.record_roll(0)

    def is_spare(self) -> bool:
        return self.status is FrameStatus.SPARE

    def is_strike(self) -> bool:
        return self.status is FrameStatus.STRIKE

    def is_open(self) -> bool:
        return self.status is FrameStatus.OPEN

    def roll_count(self) -> int:
        return len(self._rolls)

    def points(self) -> List[int]:
        """Pins knocked down by each roll recorded so far."""
        return list(self._rolls)

    def spare_bonus(self, next_frame: Optional["BaseFrame"]) -> int:
        return 0

    def strike_bonus(self, next_frames: Sequence["BaseFrame"]) -> int:
        return 0


class Frame(BaseFrame):
    """One of frames 1-9: a strike, or up to two rolls totalling at most 10."""

    def _status(self) -> FrameStatus:
        rolls = self._rolls
        if len(rolls) == 1 and rolls[0] == NUM_OF_PINS:
            return FrameStatus.STRIKE
        if len(rolls) == 2:
            if rolls[0] + rolls[1] == NUM_OF_PINS:
                return FrameStatus.SPARE
            return FrameStatus.OPEN
        return FrameStatus.INCOMPLETE

    def is_complete(self) -> bool:
        return self.status is not FrameStatus.INCOMPLETE

    def is_final_frame(self) -> bool:
        return False

    def record_roll(self, pins: int) -> None:
        pins = _check_pins(pins)
        if self.is_complete():
            raise FrameAlreadyComplete()
        if self._rolls and self._rolls[0] + pins > NUM_OF_PINS:
            raise PinCountExceeded(self._rolls[0], pins)
        self._rolls.append(pins)

    def record_spare(self) -> None:
        if self.is_complete():
            raise FrameAlreadyComplete()
        if len(self._rolls) != 1:
            raise InvalidSpareState(len(self._rolls))
        self._rolls.append(NUM_OF_PINS - self._rolls[0])

    def record_strike(self) -> None:
        if self.is_complete():
            raise FrameAlreadyComplete()
        if self._rolls:
            raise InvalidStrikeState(len(self._rolls))
        self._rolls.append(NUM_OF_PINS)

    def spare_bonus(self, next_frame: Optional[BaseFrame]) -> int:
        if not self.is_spare() or next_frame is None:
            return 0
        following = next_frame.points()
        return following[0] if following else 0

    def strike_bonus(self, next_frames: Sequence[BaseFrame]) -> int:
        if not self.is_strike():
            return 0
        bonus_rolls: List[int] = []
        for frame in next_frames:
            bonus_rolls.extend(frame.points())
            if len(bonus_rolls) >= 2:
                break
        return sum(bonus_rolls[:2])


class FinalFrame(BaseFrame):
    """The tenth frame.

    Rolls 2 and 3 are granted only as bonus rolls:

    - open first pair: done after two rolls
    - spare: one bonus roll, three rolls in total
    - strike then strike: one more roll, three rolls in total
    - strike then anything else: done after two rolls

    A roll that follows a strike or a spare is thrown at a fresh rack, so only
    the first two rolls of a non-strike rack are bounded by ten pins together.
    """

    MAX_ROLLS = 3

    @property
    def kind(self) -> FinalFrameKind:
        rolls = self._rolls
        if rolls and rolls[0] == NUM_OF_PINS:
            return FinalFrameKind.STRIKE
        if len(rolls) >= 2 and rolls[0] + rolls[1] == NUM_OF_PINS:
            return FinalFrameKind.SPARE
        return FinalFrameKind.REGULAR

    def _status(self) -> FrameStatus:
        if not self.is_complete():
            return FrameStatus.INCOMPLETE
        kind = self.kind
        if kind is FinalFrameKind.STRIKE:
            return FrameStatus.STRIKE
        if kind is FinalFrameKind.SPARE:
            return FrameStatus.SPARE
        return FrameStatus.OPEN

    def is_complete(self) -> bool:
        rolls = self._rolls
        if len(rolls) >= self.MAX_ROLLS:
            return True
        if len(rolls) < 2:
            return False
        kind = self.kind
        if kind is FinalFrameKind.STRIKE:
            return rolls[1] != NUM_OF_PINS
        if kind is FinalFrameKind.SPARE:
            return False
        return True

    def is_final_frame(self) -> bool:
        return True

    def _rack_rolls(self) -> List[int]:
        """Rolls already thrown at the rack of pins currently standing."""
        rack: List[int] = []
        for pins in self._rolls:
            rack.append(pins)
            if sum(rack) == NUM_OF_PINS:
                rack = []
        return rack

    def record_roll(self, pins: int) -> None:
        pins = _check_pins(pins)
        if self.is_complete():
            raise FrameAlreadyComplete(final=True)
        rack = self._rack_rolls()
        if rack and rack[0] + pins > NUM_OF_PINS:
            raise PinCountExceeded(rack[0], pins)
        self._rolls.append(pins)

    def record_spare(self) -> None:
        if self.is_complete():
            raise FrameAlreadyComplete(final=True)
        rack = self._rack_rolls()
        if len(rack) != 1:
            raise InvalidSpareState(len(rack))
        self._rolls.append(NUM_OF_PINS - rack[0])

    def record_strike(self) -> None:
        if self.is_complete():
            raise FrameAlreadyComplete(final=True)
        rack = self._rack_rolls()
        if rack:
            raise InvalidStrikeState(len(rack))
        self._rolls.append(NUM_OF_PINS)
