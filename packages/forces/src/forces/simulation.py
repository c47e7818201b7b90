"""
Region-constrained force simulation.

Per iteration, every placed entity feels

    F = k_c (c - p)                                   centering spring
      + Σ_peers 800 / d² · (p - q) / d,  0 < d < 120   peer repulsion
      + edge repulsion toward the inside of its circle(s)
      + k_p (c - p)   if p is outside its boundary      safety pushback

where c is the boundary center and peers share the exact membership
key. Forces are computed from one snapshot, then integrated with
damped semi-implicit Euler:

    v ← (v + F) · damping
    p ← p + v

The run stops early once Σ(|vx| + |vy|) falls below the convergence
threshold. Entities with no membership are left alone.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from regions import AreaBoundary, RegionLayout, area_boundary, contains
from regions.boundary import CIRCLE
from forces.config import get_config
from forces.entity import Entity

logger = logging.getLogger(__name__)


def simulate(
    entities: Sequence[Entity],
    layout: RegionLayout,
    max_iterations: Optional[int] = None,
    seed: Optional[int] = None,
    config: Optional[Dict[str, Any]] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Entity]:
    """
    Settle every entity with a membership inside its area boundary.

    Parameters
    ----------
    entities : sequence of Entity
        Mutated in place (position, velocity).
    layout : RegionLayout
        Current region circles.
    max_iterations : int, optional
        Iteration cap. Default CONFIG['max_iterations'] (100).
    seed : int, optional
        Seed for the initial jitter of entities without a position.
    config : dict, optional
        Overrides deep-merged over forces.config.CONFIG.
    rng : np.random.Generator, optional
        Explicit generator; takes precedence over `seed`.

    Returns
    -------
    list of Entity: the simulated (non-empty membership) entities.
    """
    cfg = get_config(config)
    if max_iterations is None:
        max_iterations = cfg['max_iterations']

    active = [e for e in entities if e.regions]
    if not active:
        return []

    boundaries = [area_boundary(e.regions, layout) for e in active]
    if rng is None:
        rng = np.random.default_rng(seed)

    jitter = cfg['init']['jitter']
    for entity, boundary in zip(active, boundaries):
        if entity.position is None:
            dx, dy = (rng.random(2) - 0.5) * jitter
            entity.position = (boundary.center[0] + dx, boundary.center[1] + dy)

    pos = np.array([e.position for e in active], dtype=np.float64)
    vel = np.array([e.velocity for e in active], dtype=np.float64)
    peers = _peer_mask([e.key for e in active])

    damping = cfg['integration']['damping']
    threshold = cfg['integration']['convergence']

    iterations = 0
    for iteration in range(max_iterations):
        forces = _net_forces(pos, boundaries, peers, layout, cfg)
        vel = (vel + forces) * damping
        pos = pos + vel
        iterations = iteration + 1

        total_movement = float(np.abs(vel).sum())
        if total_movement < threshold:
            logger.debug(f"Simulation converged after {iteration} iterations")
            break
    else:
        logger.debug(f"Simulation stopped at max_iterations={max_iterations}")

    for i, entity in enumerate(active):
        entity.position = (float(pos[i, 0]), float(pos[i, 1]))
        entity.velocity = (float(vel[i, 0]), float(vel[i, 1]))

    logger.debug(f"Simulated {len(active)} entities in {iterations} iterations")
    return active


def compute_forces(
    entity: Entity,
    others: Sequence[Entity],
    layout: RegionLayout,
    config: Optional[Dict[str, Any]] = None,
) -> Tuple[float, float]:
    """
    Net force on one entity given the others, without integrating.

    An entity without a position is evaluated at its boundary center.
    Others without a position or membership exert no force.
    """
    boundary = area_boundary(entity.regions, layout)
    if boundary is None:
        return (0.0, 0.0)
    cfg = get_config(config)

    here = entity.position if entity.position is not None else boundary.center
    rest = [o for o in others if o is not entity and o.id != entity.id
            and o.regions and o.position is not None]

    pos = np.array([here] + [o.position for o in rest], dtype=np.float64)
    boundaries = [boundary] + [area_boundary(o.regions, layout) for o in rest]
    peers = _peer_mask([entity.key] + [o.key for o in rest])

    forces = _net_forces(pos, boundaries, peers, layout, cfg)
    return (float(forces[0, 0]), float(forces[0, 1]))


def render_offset(
    entity: Entity,
    layout: RegionLayout,
    half_width: Optional[float] = None,
    half_height: Optional[float] = None,
) -> Optional[Tuple[float, float]]:
    """
    Top-left corner for drawing the entity's chip.

    Uses the simulated position, else the boundary center. Returns None
    for an entity with no membership (the caller keeps it in its tray).
    """
    boundary = area_boundary(entity.regions, layout)
    if boundary is None:
        return None
    render = get_config()['render']
    if half_width is None:
        half_width = render['half_width']
    if half_height is None:
        half_height = render['half_height']

    x, y = entity.position if entity.position is not None else boundary.center
    return (x - half_width, y - half_height)


def _peer_mask(keys: List[str]) -> np.ndarray:
    """(n, n) bool: same membership key, excluding self."""
    k = np.array(keys, dtype=str)
    mask = (k[:, None] == k[None, :]).astype(bool)
    np.fill_diagonal(mask, False)
    return mask


def _net_forces(
    pos: np.ndarray,
    boundaries: List[AreaBoundary],
    peers: np.ndarray,
    layout: RegionLayout,
    cfg: Dict[str, Any],
) -> np.ndarray:
    centers = np.array([b.center for b in boundaries], dtype=np.float64)

    # 1. Centering spring
    forces = cfg['centering']['strength'] * (centers - pos)

    # 2. Peer repulsion (self - peer direction)
    diff = pos[:, None, :] - pos[None, :, :]
    dist = np.linalg.norm(diff, axis=2)
    near = peers & (dist > 0) & (dist < cfg['repulsion']['range'])
    safe = np.where(near, dist, 1.0)
    magnitude = np.where(near, cfg['repulsion']['strength'] / safe ** 2, 0.0)
    forces += (diff / safe[:, :, None] * magnitude[:, :, None]).sum(axis=1)

    # 3. Edge repulsion, 4. safety pushback
    pushback = cfg['pushback']['strength']
    for i, boundary in enumerate(boundaries):
        forces[i] += _edge_force(pos[i], boundary, layout, cfg['edge'])
        if not contains(boundary, pos[i, 0], pos[i, 1], layout):
            forces[i] += pushback * (centers[i] - pos[i])

    return forces


def _edge_force(
    p: np.ndarray,
    boundary: AreaBoundary,
    layout: RegionLayout,
    edge_cfg: Dict[str, Any],
) -> np.ndarray:
    """Inward push when close to a rim; one rim per member circle."""
    if boundary.kind == CIRCLE:
        rims = [(boundary.center, boundary.radius)]
        params = edge_cfg['circle']
    else:
        rims = [(layout[name].center, layout[name].radius) for name in boundary.regions]
        params = edge_cfg['intersection']

    force = np.zeros(2)
    for center, radius in rims:
        inward = np.asarray(center, dtype=np.float64) - p
        d = float(np.hypot(inward[0], inward[1]))
        from_edge = radius - d
        if from_edge < params['threshold'] and d > 0:
            # Clamp: outside the rim the push stays at its maximum
            strength = params['strength'] / (max(from_edge, 0.0) + params['softening'])
            force += inward / d * strength
    return force
