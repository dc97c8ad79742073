import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# The API refuses to start without an explicit origin list.
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
os.environ.setdefault("ALLOW_CREDENTIALS", "false")


def roll_many(game, pins, times):
    for _ in range(times):
        if pins == 10:
            game.apply_strike()
        else:
            game.apply_roll(pins)


@pytest.fixture
def roll():
    """Apply the same roll to a game several times."""
    return roll_many
