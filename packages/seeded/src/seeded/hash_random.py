"""
Sine-hash pseudo-random values.

seed   = leading integer of the id (1 if none, 0, or too large)
rnd(k) = frac(sin(seed * 9.973 + k) * 10000)

Scalar math on purpose: the values must match other renderers
bit-for-bit, so no vectorized approximation.
"""

import math
import re
from typing import Union

SEED_MULTIPLIER = 9.973
SEED_SCALE = 10000.0
DEFAULT_SEED = 1

_LEADING_INT = re.compile(r'^\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))')


def seed_from_id(value: Union[str, int, None]) -> int:
    """
    Derive an integer seed from an entity id.

    Integers pass through. Strings parse their leading integer
    ('42', ' 7', '12abc' -> 12, '0x10' -> 16). Anything unparseable, a
    parsed value of 0, and a value too large for the sine hash all fall
    back to DEFAULT_SEED.
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return _usable(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return DEFAULT_SEED
        return _usable(int(value))
    if value is None:
        return DEFAULT_SEED

    match = _LEADING_INT.match(str(value))
    if match is None:
        return DEFAULT_SEED
    sign, hex_digits, digits = match.groups()
    seed = int(hex_digits, 16) if hex_digits else int(digits)
    return _usable(-seed if sign == '-' else seed)


def _usable(seed: int) -> int:
    """0 and seeds whose product with SEED_MULTIPLIER overflows map to DEFAULT_SEED."""
    if seed == 0:
        return DEFAULT_SEED
    try:
        scaled = float(seed) * SEED_MULTIPLIER
    except OverflowError:
        return DEFAULT_SEED
    return seed if math.isfinite(scaled) else DEFAULT_SEED


def seeded_random(seed: int, offset: float) -> float:
    """Deterministic value in [0, 1) for (seed, offset)."""
    x = math.sin(seed * SEED_MULTIPLIER + offset) * SEED_SCALE
    return x - math.floor(x)


class SeededRandom:
    """
    Callable bound to one seed.

        rnd = SeededRandom.from_id('42')
        rnd(1), rnd(2)  # stable across calls and processes
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = int(seed)

    @classmethod
    def from_id(cls, value) -> 'SeededRandom':
        return cls(seed_from_id(value))

    def __call__(self, offset: float) -> float:
        return seeded_random(self.seed, offset)

    def centered(self, offset: float) -> float:
        """Value in [-0.5, 0.5)."""
        return self(offset) - 0.5

    def __repr__(self):
        return f'SeededRandom(seed={self.seed})'
