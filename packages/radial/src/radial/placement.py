"""
Obstacle-avoiding radial placement.

Each ball (radius = 25 + weight * 10) is placed greedily at the first
free spot of an outward sweep around the viewport center:

    for distance in 100, 100 + r_min/2, ... < min(w, h) * 0.4:
        for angle in 0°, 5°, ..., 355°:
            accept the first candidate that
              - keeps the whole ball 50px inside the viewport,
              - clears the central rectangle by radius + 20,
              - clears every placed ball by r_i + r_j + 10.

A whole ring is evaluated at once; the first valid angle in scan order
wins, so the result matches a point-by-point scan. When the sweep is
exhausted the ball goes to a formulaic fallback spot and is flagged.

Stateless: every resize or entity-list change reruns from scratch.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from radial.config import get_config

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    """Axis-aligned rectangle; x/y default to the viewport center."""
    width: float
    height: float
    x: Optional[float] = None
    y: Optional[float] = None

    def center(self, viewport_width: float, viewport_height: float) -> Tuple[float, float]:
        cx = self.x if self.x is not None else viewport_width / 2
        cy = self.y if self.y is not None else viewport_height / 2
        return (cx, cy)


@dataclass
class BallNode:
    id: Any
    label: str
    weight: float
    radius: float
    x: float
    y: float
    fallback: bool = False
    entity: Any = field(default=None, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'label': self.label,
            'weight': self.weight,
            'radius': self.radius,
            'x': self.x,
            'y': self.y,
            'fallback': self.fallback,
        }


def ball_radius(weight: float, config: Optional[Dict[str, Any]] = None) -> float:
    ball = get_config(config)['ball']
    return ball['base_radius'] + weight * ball['weight_scale']


def default_obstacle(
    width: float,
    height: float,
    config: Optional[Dict[str, Any]] = None,
) -> Obstacle:
    """min(400, 60% of width) x 80, centered."""
    obs = get_config(config)['obstacle']
    return Obstacle(
        width=min(obs['max_width'], width * obs['width_ratio']),
        height=obs['height'],
    )


def distance_to_rectangle(
    x: float,
    y: float,
    obstacle: Obstacle,
    cx: float,
    cy: float,
) -> float:
    """Shortest distance from (x, y) to the obstacle centered at (cx, cy); 0 inside."""
    d = _rect_distance(np.array([[x, y]], dtype=np.float64), obstacle, cx, cy)
    return float(d[0])


def place_radially(
    width: float,
    height: float,
    entities: Sequence[Any],
    obstacle: Optional[Obstacle] = None,
    config: Optional[Dict[str, Any]] = None,
) -> List[BallNode]:
    """
    Place every entity as a ball around the central obstacle.

    Parameters
    ----------
    width, height : float
        Viewport size in px.
    entities : sequence
        Objects with `id`, `label` and `weight` attributes
        (forces.Entity works).
    obstacle : Obstacle, optional
        Reserved central rectangle. Default default_obstacle(width, height).
    config : dict, optional
        Overrides deep-merged over radial.config.CONFIG.

    Returns
    -------
    list of BallNode: one per entity, in input order. Nodes placed by
    the fallback formula have fallback=True.
    """
    if not entities:
        return []

    cfg = get_config(config)
    if obstacle is None:
        obstacle = default_obstacle(width, height, cfg)
    cx, cy = obstacle.center(width, height)

    weights = [float(getattr(e, 'weight', 1.0)) for e in entities]
    radii = [ball_radius(w, cfg) for w in weights]
    distance_step = min(radii) / 2
    if distance_step <= 0:
        raise ValueError(f"Ball radii must be positive, got min radius {min(radii)}")

    sweep = cfg['sweep']
    start = sweep['start_distance']
    max_distance = min(width, height) * sweep['max_distance_ratio']
    angles = np.deg2rad(np.arange(0.0, 360.0, sweep['angle_step']))
    ring = np.column_stack([np.cos(angles), np.sin(angles)])

    placed: List[BallNode] = []
    for entity, weight, radius in zip(entities, weights, radii):
        spot = None
        distance = start
        while distance < max_distance:
            candidates = np.array([cx, cy]) + distance * ring
            valid = _valid_mask(candidates, radius, placed, width, height, obstacle, cx, cy, cfg)
            if valid.any():
                spot = candidates[int(np.argmax(valid))]
                break
            distance += distance_step

        fallback = spot is None
        if fallback:
            spot = _fallback_spot(len(placed), cx, cy, start, cfg['fallback'])
            logger.warning(
                f"No free spot for {getattr(entity, 'id', None)!r} "
                f"(radius {radius:.0f}); using fallback at ({spot[0]:.0f}, {spot[1]:.0f})"
            )

        placed.append(BallNode(
            id=getattr(entity, 'id', None),
            label=getattr(entity, 'label', ''),
            weight=weight,
            radius=radius,
            x=float(spot[0]),
            y=float(spot[1]),
            fallback=fallback,
            entity=entity,
        ))

    return placed


def _valid_mask(
    candidates: np.ndarray,
    radius: float,
    placed: List[BallNode],
    width: float,
    height: float,
    obstacle: Obstacle,
    cx: float,
    cy: float,
    cfg: Dict[str, Any],
) -> np.ndarray:
    clear = cfg['clearance']
    margin = clear['viewport_margin']
    x, y = candidates[:, 0], candidates[:, 1]

    valid = ((x - radius >= margin) & (x + radius <= width - margin) &
             (y - radius >= margin) & (y + radius <= height - margin))

    valid &= _rect_distance(candidates, obstacle, cx, cy) >= radius + clear['obstacle_padding']

    if placed:
        others = np.array([[b.x, b.y] for b in placed])
        min_gap = radius + np.array([b.radius for b in placed]) + clear['ball_spacing']
        valid &= (cdist(candidates, others) >= min_gap[None, :]).all(axis=1)

    return valid


def _rect_distance(points: np.ndarray, obstacle: Obstacle, cx: float, cy: float) -> np.ndarray:
    left, right = cx - obstacle.width / 2, cx + obstacle.width / 2
    top, bottom = cy - obstacle.height / 2, cy + obstacle.height / 2
    dx = np.maximum(0.0, np.maximum(left - points[:, 0], points[:, 0] - right))
    dy = np.maximum(0.0, np.maximum(top - points[:, 1], points[:, 1] - bottom))
    return np.hypot(dx, dy)


def _fallback_spot(
    n_placed: int,
    cx: float,
    cy: float,
    start: float,
    fb: Dict[str, Any],
) -> Tuple[float, float]:
    distance = start + n_placed * fb['distance_step']
    angle = math.radians((n_placed * fb['angle_step']) % 360)
    return (cx + distance * math.cos(angle), cy + distance * math.sin(angle))
