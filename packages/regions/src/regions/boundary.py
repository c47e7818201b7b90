"""
Area boundaries: where an entity with a given membership may live.

Single membership  -> circle at the region center, radius shrunk to
                      circle_radius * 0.8 so chips stay inside the ring.
Multiple           -> intersection area at the centroid of the member
                      centers, radius circle_radius * 0.4.

Containment for an intersection ignores the shrunk radius: the point
must sit inside the FULL circle of every member region.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from regions.config import MAX_MEMBERSHIPS
from regions.layout import RegionLayout

CIRCLE = 'circle'
INTERSECTION = 'intersection'


@dataclass(frozen=True)
class AreaBoundary:
    kind: str
    center: Tuple[float, float]
    radius: float
    regions: Tuple[str, ...] = ()

    @property
    def is_intersection(self) -> bool:
        return self.kind == INTERSECTION


def membership_key(regions: Iterable[str]) -> str:
    """Canonical key for a membership set: sorted names joined by '+'."""
    return '+'.join(sorted(regions))


def area_boundary(
    regions: Iterable[str],
    layout: RegionLayout,
) -> Optional[AreaBoundary]:
    """
    Boundary for a membership set, or None when the set is empty.

    Raises KeyError when a name is not in the layout, ValueError when
    the set is larger than MAX_MEMBERSHIPS.
    """
    names = tuple(sorted(set(regions)))
    if not names:
        return None
    if len(names) > MAX_MEMBERSHIPS:
        raise ValueError(f"Membership {names} exceeds {MAX_MEMBERSHIPS} regions")

    circles = [layout[name] for name in names]

    if len(circles) == 1:
        return AreaBoundary(
            kind=CIRCLE,
            center=circles[0].center,
            radius=layout.circle_radius * layout.circle_ratio,
            regions=names,
        )

    cx = sum(c.center[0] for c in circles) / len(circles)
    cy = sum(c.center[1] for c in circles) / len(circles)
    return AreaBoundary(
        kind=INTERSECTION,
        center=(cx, cy),
        radius=layout.circle_radius * layout.intersection_ratio,
        regions=names,
    )


def contains(
    boundary: Optional[AreaBoundary],
    x: float,
    y: float,
    layout: RegionLayout,
) -> bool:
    """Containment test. Points on the rim count as inside."""
    if boundary is None:
        return False

    if boundary.kind == CIRCLE:
        d = math.hypot(x - boundary.center[0], y - boundary.center[1])
        return d <= boundary.radius

    return all(layout[name].contains(x, y) for name in boundary.regions)


def regions_containing(x: float, y: float, layout: RegionLayout) -> List[str]:
    """
    Names of every region whose full circle contains (x, y), in layout
    order. This is the drop-target resolution for the sorting board:
    an empty list means the drop landed outside every circle.
    """
    return [name for name, region in layout.items() if region.contains(x, y)]
