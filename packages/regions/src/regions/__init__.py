"""
Regions package for the kinship layout engine.

Two responsibilities:

1. Layout: three overlapping circles (family / friends / work) at the
   vertices of an implicit triangle sized from the container.
   - compute_regions(width, height, radius_multiplier)
   - fallback layout for unmeasured containers

2. Boundaries: the area an entity may occupy given its memberships.
   - single region -> shrunk circle
   - several       -> intersection area around the centroid
   - drop-target resolution for a point
"""

from regions.layout import (
    Region,
    RegionLayout,
    compute_regions,
    fallback_layout,
)
from regions.boundary import (
    AreaBoundary,
    area_boundary,
    contains,
    membership_key,
    regions_containing,
)

__all__ = [
    'Region',
    'RegionLayout',
    'compute_regions',
    'fallback_layout',
    'AreaBoundary',
    'area_boundary',
    'contains',
    'membership_key',
    'regions_containing',
]
