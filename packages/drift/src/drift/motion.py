"""
Deterministic ambient motion for dashboard balls.

seed            = seed_from_id(id)
movement_range  = 8 + rnd(1) * 4      px
duration        = 6 + rnd(2) * 4      s per loop
delay           = rnd(3) * 3          s before the first loop
path_x          = [x, x + (rnd(4) - .5) * 2R, ... rnd(5), rnd(6), x]
path_y          = [y, y + (rnd(7) - .5) * 2R, ... rnd(8), rnd(9), y]

The loop is closed (first == last == rest point) so the caller can
repeat it forever. Nothing here touches global random state.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from seeded import SeededRandom

RANGE_BASE = 8.0
RANGE_SPREAD = 4.0
DURATION_BASE = 6.0
DURATION_SPREAD = 4.0
DELAY_SPREAD = 3.0

X_OFFSETS = (4, 5, 6)
Y_OFFSETS = (7, 8, 9)


@dataclass
class MovementPattern:
    path_x: List[float]
    path_y: List[float]
    duration: float
    delay: float
    movement_range: float

    @property
    def waypoints(self) -> List[Tuple[float, float]]:
        return list(zip(self.path_x, self.path_y))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path_x': list(self.path_x),
            'path_y': list(self.path_y),
            'duration': self.duration,
            'delay': self.delay,
            'movement_range': self.movement_range,
        }


def motion_for(entity_id: Any, x: float, y: float) -> MovementPattern:
    """Closed five-point drift loop around (x, y), stable per id."""
    rnd = SeededRandom.from_id(entity_id)

    movement_range = RANGE_BASE + rnd(1) * RANGE_SPREAD
    duration = DURATION_BASE + rnd(2) * DURATION_SPREAD
    delay = rnd(3) * DELAY_SPREAD

    def loop(rest: float, offsets: Tuple[int, ...]) -> List[float]:
        inner = [rest + (rnd(k) - 0.5) * movement_range * 2 for k in offsets]
        return [rest] + inner + [rest]

    return MovementPattern(
        path_x=loop(x, X_OFFSETS),
        path_y=loop(y, Y_OFFSETS),
        duration=duration,
        delay=delay,
        movement_range=movement_range,
    )


def position_at(pattern: MovementPattern, t: float, rest: Optional[Tuple[float, float]] = None) -> Tuple[float, float]:
    """
    Where the ball is `t` seconds after mount.

    Before `delay` it sits at the rest point. After that the loop repeats
    every `duration` seconds, with an ease-in-out (cosine) blend between
    consecutive waypoints, each segment taking an equal share of time.
    """
    if rest is None:
        rest = (pattern.path_x[0], pattern.path_y[0])
    if t < pattern.delay:
        return rest

    segments = len(pattern.path_x) - 1
    phase = ((t - pattern.delay) % pattern.duration) / pattern.duration * segments
    i = min(int(phase), segments - 1)
    frac = phase - i
    eased = (1 - math.cos(math.pi * frac)) / 2

    x = pattern.path_x[i] + (pattern.path_x[i + 1] - pattern.path_x[i]) * eased
    y = pattern.path_y[i] + (pattern.path_y[i + 1] - pattern.path_y[i]) * eased
    return (x, y)
