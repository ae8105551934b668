from dataclasses import replace
from typing import List, Sequence

from .physics import Ball, is_potted
from .table import MAX_BALLS, Table

MAX_BREAK = 147
OPENING_BONUS = 12
STREAK_POINTS = 9


def score_progression(table: Table, shot: Sequence[Ball]) -> List[int]:
    """Return the running score after each of the ``MAX_BALLS`` trials.

    Trial ``i`` strikes ``table.balls[i]`` with ``shot[i]`` toward
    ``table.pockets[i]``; trials are independent. Each pot extends the
    streak and adds ``streak * 9``; a miss resets the streak. The first pot
    made while the score is still zero earns a one-off bonus of 12, so five
    straight pots give 147 (not real snooker scoring).

    Callers validate lengths beforehand. Balls are copied so the table and
    shot passed in are left untouched.
    """
    score = 0
    streak = 0
    progression = []
    for i in range(MAX_BALLS):
        cue_ball = replace(shot[i])
        color_ball = replace(table.balls[i])
        if is_potted(cue_ball, color_ball, table.pockets[i]):
            streak += 1
            if score == 0:
                score += OPENING_BONUS
        else:
            streak = 0
        score += streak * STREAK_POINTS
        progression.append(score)
    return progression


def compute_score(table: Table, shot: Sequence[Ball]) -> int:
    return score_progression(table, shot)[-1]
