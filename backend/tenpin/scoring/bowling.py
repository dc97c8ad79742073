"""Ten-pin bowling scoring engine."""
from typing import Dict

from .game import Game

EVENT_TYPES = ("ROLL", "MISS", "SPARE", "STRIKE")


def init_state(config: Dict) -> Dict:
    return {"config": config, "game": Game()}


def apply(event: Dict, state: Dict) -> Dict:
    kind = event.get("type")
    if kind not in EVENT_TYPES:
        raise ValueError("invalid bowling event")
    game: Game = state["game"]
    if kind == "ROLL":
        pins = event.get("pins")
        if isinstance(pins, bool) or not isinstance(pins, int):
            raise ValueError("invalid bowling event")
        game.apply_roll(pins)
    elif kind == "MISS":
        game.apply_miss()
    elif kind == "SPARE":
        game.apply_spare()
    else:
        game.apply_strike()
    return state


def summary(state: Dict) -> Dict:
    game: Game = state["game"]
    return {
        "frames": [frame.points() for frame in game.frames],
        "status": [frame.status.value for frame in game.frames],
        "scores": game.frame_scores(),
        "running": game.running_totals(),
        "total": game.total_score(),
        "frameCount": game.frame_count(),
        "complete": game.is_complete(),
    }
