"""Fixed-point collision and potting checks.

Positions and velocities are integers on one shared scale. The engine
never uses floating point, and every intermediate value is kept inside the
signed 128-bit range so results match a 128-bit integer implementation
bit for bit.
"""

from dataclasses import dataclass
from typing import List, Sequence

# Squared distance between centres at which two balls touch.
DIAMETER_SQUARED = 1_000_000
# (1.5 x ball radius) squared: capture radius around a pocket.
RADIUS_SQUARED = 562_500
FIXED_POINT_SHIFT = 36
POTTING_PROJECTION = 5

I128_MIN = -(1 << 127)
I128_MAX = (1 << 127) - 1


class ShotOverflowError(ArithmeticError):
    """An intermediate value left the signed 128-bit range."""


def _i128(value: int) -> int:
    if value < I128_MIN or value > I128_MAX:
        raise ShotOverflowError(f"{value} is outside the signed 128-bit range")
    return value


def _mul(a: int, b: int) -> int:
    return _i128(a * b)


@dataclass
class Ball:
    """Ball on the table, serialised as ``[x, y, vx, vy]``."""
    x: int
    y: int
    vx: int = 0
    vy: int = 0

    @classmethod
    def from_list(cls, values: Sequence[int]) -> "Ball":
        x, y, vx, vy = values
        return cls(x, y, vx, vy)

    def to_list(self) -> List[int]:
        return [self.x, self.y, self.vx, self.vy]


@dataclass(frozen=True)
class Pocket:
    """Pocket position, serialised as ``[x, y]``."""
    x: int
    y: int

    @classmethod
    def from_list(cls, values: Sequence[int]) -> "Pocket":
        x, y = values
        return cls(x, y)

    def to_list(self) -> List[int]:
        return [self.x, self.y]


def is_potted(cue_ball: Ball, color_ball: Ball, pocket: Pocket) -> bool:
    """Return whether ``color_ball`` ends up in ``pocket`` after the cue hits it.

    No friction, no cushions. When the balls touch, momentum is exchanged
    along the line of centres and both balls' velocities are updated in
    place. The color ball is potted if the line projected from its new
    velocity passes within the pocket's capture radius.

    Raises:
        ShotOverflowError: an intermediate value does not fit in 128 bits.
    """
    xd = _i128(color_ball.x - cue_ball.x)
    yd = _i128(color_ball.y - cue_ball.y)
    distance_squared = _i128(_mul(xd, xd) + _mul(yd, yd))
    if distance_squared >= DIAMETER_SQUARED:
        return False

    # Exact overlap has no collision normal; keep the velocities as they are.
    if distance_squared != 0:
        mag_inv = (1 << FIXED_POINT_SHIFT) // distance_squared
        nx = _mul(xd, mag_inv)
        ny = _mul(yd, mag_inv)
        rel = _i128(_mul(-cue_ball.vx, nx) - _mul(cue_ball.vy, ny))
        impulse_x = _mul(rel, nx) >> FIXED_POINT_SHIFT
        impulse_y = _mul(rel, ny) >> FIXED_POINT_SHIFT
        cue_ball.vx = _i128(cue_ball.vx + impulse_x)
        cue_ball.vy = _i128(cue_ball.vy + impulse_y)
        color_ball.vx = _i128(color_ball.vx - impulse_x)
        color_ball.vy = _i128(color_ball.vy - impulse_y)

    dx = _i128(_mul(_mul(color_ball.x, color_ball.vx), POTTING_PROJECTION) - color_ball.x)
    dy = _i128(_mul(_mul(color_ball.y, color_ball.vy), POTTING_PROJECTION) - color_ball.y)
    d = _i128(
        _mul(dx, color_ball.y - pocket.y) - _mul(dy, color_ball.x - pocket.x)
    )
    discriminant = _i128(
        _mul(RADIUS_SQUARED, _i128(_mul(dx, dx) + _mul(dy, dy))) - _mul(d, d)
    )
    return discriminant >= 0
