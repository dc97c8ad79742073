"""Scoring engine for ten-pin bowling."""

from . import bowling
from .frame import FinalFrame, FinalFrameKind, Frame, FrameStatus
from .game import MAX_FRAMES, Game

__all__ = [
    "bowling",
    "FinalFrame",
    "FinalFrameKind",
    "Frame",
    "FrameStatus",
    "Game",
    "MAX_FRAMES",
]
