from __future__ import annotations

import logging

from fastapi import APIRouter

from ..exceptions import http_problem
from ..notation import parse
from ..schemas import FrameOut, ScoreOut, ScoreRequest
from ..scoring import bowling

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])


def _scorecard(state: dict) -> ScoreOut:
    summary = bowling.summary(state)
    frames = [
        FrameOut(
            number=i,
            rolls=rolls,
            status=status,
            score=score,
            runningTotal=running,
        )
        for i, (rolls, status, score, running) in enumerate(
            zip(
                summary["frames"],
                summary["status"],
                summary["scores"],
                summary["running"],
            ),
            start=1,
        )
    ]
    return ScoreOut(
        frames=frames,
        total=summary["total"],
        frameCount=summary["frameCount"],
        complete=summary["complete"],
    )


# POST /api/v0/games/score
@router.post("/score", response_model=ScoreOut)
def score_game(body: ScoreRequest) -> ScoreOut:
    if (body.rolls is None) == (body.events is None):
        raise http_problem(
            status_code=400,
            detail="provide exactly one of rolls or events",
            code="score_request_ambiguous",
        )

    if body.rolls is not None:
        events = parse(body.rolls)
    else:
        events = [ev.model_dump(exclude_none=True) for ev in body.events]

    # Rule violations propagate as BowlingError and render as problem documents.
    state = bowling.init_state({})
    for event in events:
        state = bowling.apply(event, state)

    card = _scorecard(state)
    logger.debug("Scored %d roll(s): total=%d", len(events), card.total)
    return card
