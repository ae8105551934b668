"""Pseudo-random table layouts.

An xorshift64 generator is plenty here: it only has to make successive
tables differ, not resist prediction.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .physics import Ball, Pocket

MAX_BALLS = 5
BALL_ROW_Y = 6000
POCKET_ROW_Y = 2000
POSITION_MIN = 2500
POSITION_SPAN = 5001  # positions land in [2500, 7500]

_U64_MASK = (1 << 64) - 1
_LOW_14_BITS = (1 << 14) - 1


@dataclass
class Table:
    balls: List[Ball] = field(default_factory=list)
    pockets: List[Pocket] = field(default_factory=list)

    def to_dict(self):
        return {
            'balls': [b.to_list() for b in self.balls],
            'pockets': [p.to_list() for p in self.pockets],
        }

    @classmethod
    def from_dict(cls, data) -> "Table":
        return cls(
            balls=[Ball.from_list(b) for b in data.get('balls', [])],
            pockets=[Pocket.from_list(p) for p in data.get('pockets', [])],
        )


def next_position(state: int) -> Tuple[int, int]:
    """Advance the generator once and map the new state to an x position."""
    state ^= (state << 21) & _U64_MASK
    state ^= state >> 35
    state ^= (state << 4) & _U64_MASK
    return state, (state & _LOW_14_BITS) % POSITION_SPAN + POSITION_MIN


def table_seed(timestamp: int, sequence: int) -> int:
    return (timestamp + sequence + 1) & _U64_MASK


def create_table(seed: int) -> Table:
    """Build ``MAX_BALLS`` resting balls and ``MAX_BALLS`` pockets from ``seed``."""
    state = seed & _U64_MASK
    table = Table()
    for _ in range(MAX_BALLS):
        state, ball_x = next_position(state)
        table.balls.append(Ball(ball_x, BALL_ROW_Y, 0, 0))
        state, pocket_x = next_position(state)
        table.pockets.append(Pocket(pocket_x, POCKET_ROW_Y))
    return table
