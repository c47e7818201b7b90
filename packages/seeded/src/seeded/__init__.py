"""
Seeded package for the kinship layout engine.

Hash-based deterministic randomness keyed on an entity id.

    rnd(offset) = frac(sin(seed * 9.973 + offset) * 10000)

Same (seed, offset) always yields the same value, independent of call
order or any global generator state. Used by drift for ambient motion.
"""

from seeded.hash_random import (
    seed_from_id,
    seeded_random,
    SeededRandom,
)

__all__ = [
    'seed_from_id',
    'seeded_random',
    'SeededRandom',
]
