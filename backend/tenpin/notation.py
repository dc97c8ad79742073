"""Roll notation: one character per roll.

``X`` is a strike, ``/`` a spare, ``-`` a miss and ``1``-``9`` the number of
pins knocked down. ``XXXXXXXXXXXX`` is a perfect game.
"""
from typing import Dict, List, Optional

from .exceptions import InvalidNotation
from .scoring import bowling
from .scoring.game import Game

STRIKE = "X"
SPARE = "/"
MISS = "-"
DIGITS = "123456789"
SYMBOLS = frozenset(STRIKE + SPARE + MISS + DIGITS)


def is_valid(line: str) -> bool:
    return all(ch in SYMBOLS for ch in line.strip())


def to_event(symbol: str) -> Dict:
    if symbol == STRIKE:
        return {"type": "STRIKE"}
    if symbol == SPARE:
        return {"type": "SPARE"}
    if symbol == MISS:
        return {"type": "MISS"}
    return {"type": "ROLL", "pins": int(symbol)}


def parse(line: str) -> List[Dict]:
    events = []
    for position, symbol in enumerate(line.strip(), start=1):
        if symbol not in SYMBOLS:
            raise InvalidNotation(symbol, position)
        events.append(to_event(symbol))
    return events


def play(line: str, game: Optional[Game] = None) -> Game:
    """Apply every roll in ``line`` to ``game`` (a new one by default).

    Rule violations surface as :class:`~tenpin.exceptions.BowlingError` from
    the roll that broke them.
    """

    state = {"config": {}, "game": game if game is not None else Game()}
    for event in parse(line):
        state = bowling.apply(event, state)
    return state["game"]
