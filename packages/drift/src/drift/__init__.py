"""
Drift package for the kinship layout engine.

Ambient "floating" motion: each ball gets a small closed loop of
waypoints, a cycle duration and a start delay, all derived from its id
so re-renders never reshuffle the animation.
"""

from drift.motion import MovementPattern, motion_for, position_at

__all__ = ['MovementPattern', 'motion_for', 'position_at']
