"""
Radial package for the kinship layout engine.

Floating-ball dashboard placement: balls sized by urgency are swept
outward around a reserved central rectangle until each finds a spot
clear of the viewport edge, the rectangle and every earlier ball.

    radial.place_radially(width, height, entities, obstacle=None)
        → List[BallNode], input order, fallback placements flagged.
"""

from radial.placement import (
    BallNode,
    Obstacle,
    ball_radius,
    default_obstacle,
    distance_to_rectangle,
    place_radially,
)

__all__ = [
    'BallNode',
    'Obstacle',
    'ball_radius',
    'default_obstacle',
    'distance_to_rectangle',
    'place_radially',
]
