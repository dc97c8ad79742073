"""A single game of ten-pin bowling."""
from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from ..exceptions import BowlingError
from .frame import BaseFrame, FinalFrame, Frame

logger = logging.getLogger(__name__)

MAX_FRAMES = 10


class Game:
    """Routes roll events to the frame accepting rolls and totals the score.

    Frames are appended lazily, one as each prior frame completes, and kept for
    the whole game; strike and spare bonuses are read back from the frames
    that follow. Scores are recomputed from that history on every call.
    """

    def __init__(self) -> None:
        self._frames: List[BaseFrame] = [Frame()]
        self._current_index = 0

    def __repr__(self) -> str:
        return f"Game(frames={self.frame_count()}, total={self.total_score()})"

    @property
    def frames(self) -> Tuple[BaseFrame, ...]:
        return tuple(self._frames)

    @property
    def current_frame(self) -> BaseFrame:
        return self._frames[self._current_index]

    def frame_count(self) -> int:
        return len(self._frames)

    def is_at_final_frame(self) -> bool:
        return self.current_frame.is_final_frame()

    def is_complete(self) -> bool:
        current = self.current_frame
        return current.is_final_frame() and current.is_complete()

    def _prepare_frame(self) -> bool:
        """Open the next frame if the current one is done; report whether one was added."""
        current = self.current_frame
        if not current.is_complete() or current.is_final_frame():
            return False
        if len(self._frames) < MAX_FRAMES - 1:
            self._frames.append(Frame())
        else:
            self._frames.append(FinalFrame())
        self._current_index += 1
        logger.debug("Advanced to frame %d", self._current_index + 1)
        return True

    def _apply(self, record: Callable[[BaseFrame], None]) -> None:
        added = self._prepare_frame()
        try:
            record(self.current_frame)
        except BowlingError:
            if added:
                self._frames.pop()
                self._current_index -= 1
            raise
        if self.is_complete():
            logger.debug("Game complete with total score %d", self.total_score())

    def apply_roll(self, pins: int) -> None:
        self._apply(lambda frame: frame.record_roll(pins))

    def apply_miss(self) -> None:
        self._apply(lambda frame: frame.record_miss())

    def apply_spare(self) -> None:
        self._apply(lambda frame: frame.record_spare())

    def apply_strike(self) -> None:
        self._apply(lambda frame: frame.record_strike())

    def rolls(self) -> List[int]:
        return [pins for frame in self._frames for pins in frame.points()]

    def _frame_score(self, index: int) -> int:
        frame = self._frames[index]
        score = sum(frame.points())
        if frame.is_spare():
            following = self._frames[index + 1] if index + 1 < len(self._frames) else None
            score += frame.spare_bonus(following)
        elif frame.is_strike():
            score += frame.strike_bonus(self._frames[index + 1 : index + 3])
        return score

    def frame_scores(self) -> List[int]:
        """Each frame's pins plus whatever bonus is available so far."""
        return [self._frame_score(i) for i in range(len(self._frames))]

    def running_totals(self) -> List[int]:
        totals: List[int] = []
        total = 0
        for score in self.frame_scores():
            total += score
            totals.append(total)
        return totals

    def total_score(self) -> int:
        return sum(self.frame_scores())
