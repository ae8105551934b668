from snooker.services.pool.physics import Ball, Pocket
from snooker.services.pool.scoring import MAX_BREAK, compute_score, score_progression
from snooker.services.pool.table import Table, create_table, table_seed

from helpers import aim_table


POT = Ball(5000, 6200, 0, -200)
MISS = Ball(0, 0, 0, 0)


def straight_table():
    return Table(
        balls=[Ball(5000, 6000, 0, 0) for _ in range(5)],
        pockets=[Pocket(5000, 2000) for _ in range(5)],
    )


def test_full_break_trace():
    assert score_progression(straight_table(), [POT] * 5) == [21, 39, 66, 102, 147]
    assert compute_score(straight_table(), [POT] * 5) == MAX_BREAK


def test_all_misses_score_zero():
    assert score_progression(straight_table(), [MISS] * 5) == [0, 0, 0, 0, 0]


def test_miss_resets_streak_but_keeps_score():
    shot = [POT, MISS, POT, POT, POT]
    assert score_progression(straight_table(), shot) == [21, 21, 30, 48, 75]


def test_score_never_decreases():
    shots = [
        [POT, POT, MISS, POT, MISS],
        [MISS, POT, POT, MISS, POT],
        [POT, MISS, MISS, MISS, POT],
    ]
    for shot in shots:
        progression = score_progression(straight_table(), shot)
        assert progression == sorted(progression)


def test_opening_bonus_applies_once_at_first_pot():
    assert score_progression(straight_table(), [MISS, MISS, POT, MISS, POT]) == [0, 0, 21, 21, 30]
    assert compute_score(straight_table(), [MISS, MISS, MISS, MISS, POT]) == 21


def test_points_table_for_leading_streaks():
    expected = [0, 21, 39, 66, 102, 147]
    for pots in range(6):
        shot = [POT] * pots + [MISS] * (5 - pots)
        assert compute_score(straight_table(), shot) == expected[pots]


def test_scoring_does_not_mutate_inputs():
    table = straight_table()
    shot = [Ball(5000, 6200, 0, -200) for _ in range(5)]
    compute_score(table, shot)
    assert table == straight_table()
    assert shot == [POT] * 5


def test_extra_cue_balls_are_ignored():
    assert compute_score(straight_table(), [POT] * 5 + [MISS, MISS]) == MAX_BREAK


def test_aimed_shots_clear_generated_tables():
    for sequence in range(50):
        table = create_table(table_seed(1_700_000_000, sequence))
        assert compute_score(table, aim_table(table)) == MAX_BREAK, sequence
