"""
Forces package for the kinship layout engine.

Positions contact chips inside their region (or region intersection)
with a damped force simulation:

    forces.simulate(entities, layout, max_iterations=100)
        → the entities with a membership, positions settled in place.

Membership changes come from the drop handler (assign_regions), which
resets the entity's motion so the next simulate() re-seeds it.
"""

from forces.entity import Entity, assign_regions
from forces.simulation import simulate, compute_forces, render_offset

__all__ = [
    'Entity',
    'assign_regions',
    'simulate',
    'compute_forces',
    'render_offset',
]
