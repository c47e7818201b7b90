"""
Three-circle region layout.

usable_height    = height - title_band
max_size         = min(width, usable_height)
triangle_height  = max_size * 0.36
center_to_vertex = triangle_height * 2/3
circle_radius    = triangle_height * radius_multiplier

Region centers sit at the vertices of the implicit triangle, at fixed
angles (-90°, 30°, 150°) around the triangle center
(width/2, (usable_height + title_band)/2).

An unmeasured container (zero width or height) gets a fixed fallback
layout so nothing downstream ever runs on degenerate geometry.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

from regions.config import get_config


@dataclass
class Region:
    """A named circular area."""
    name: str
    color: str
    angle: float
    center: Tuple[float, float]
    radius: float

    @property
    def left(self) -> float:
        return self.center[0] - self.radius

    @property
    def top(self) -> float:
        return self.center[1] - self.radius

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(x - self.center[0], y - self.center[1])

    def contains(self, x: float, y: float) -> bool:
        return self.distance_to(x, y) <= self.radius


@dataclass
class RegionLayout(Mapping):
    """
    Read-only mapping of region name -> Region, plus the sizes
    the renderer needs.
    """
    circle_size: float
    circle_radius: float
    triangle_height: float
    regions: Dict[str, Region] = field(default_factory=dict)
    is_fallback: bool = False
    circle_ratio: float = 0.8
    intersection_ratio: float = 0.4

    def __getitem__(self, name: str) -> Region:
        if name not in self.regions:
            raise KeyError(f"Unknown region: {name}. Available: {list(self.regions)}")
        return self.regions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.regions)

    def __len__(self) -> int:
        return len(self.regions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'circle_size': self.circle_size,
            'circle_radius': self.circle_radius,
            'triangle_height': self.triangle_height,
            'is_fallback': self.is_fallback,
            'regions': {
                name: {
                    'color': r.color,
                    'center': [r.center[0], r.center[1]],
                    'radius': r.radius,
                    'left': r.left,
                    'top': r.top,
                }
                for name, r in self.regions.items()
            },
        }


def compute_regions(
    width: Optional[float],
    height: Optional[float],
    radius_multiplier: Optional[float] = None,
    config: Optional[Dict[str, Any]] = None,
) -> RegionLayout:
    """
    Compute the three region circles for a container.

    Parameters
    ----------
    width, height : float
        Container size in px. Zero or None means "not measured yet".
    radius_multiplier : float, optional
        Circle radius as a fraction of the triangle height.
        Defaults to CONFIG['layout']['radius_multiplier'] (0.8).
    config : dict, optional
        Overrides deep-merged over regions.config.CONFIG.

    Returns
    -------
    RegionLayout: mapping name -> Region.
    """
    cfg = get_config(config)
    if not width or not height:
        return fallback_layout(cfg)

    lay = cfg['layout']
    band = lay['title_band']
    if radius_multiplier is None:
        radius_multiplier = lay['radius_multiplier']

    usable_width = float(width)
    usable_height = float(height) - band
    max_size = min(usable_width, usable_height)
    if max_size <= 0:
        return fallback_layout(cfg)

    triangle_height = max_size * lay['triangle_ratio']
    center_to_vertex = triangle_height * lay['vertex_ratio']
    circle_radius = triangle_height * radius_multiplier

    cx = usable_width / 2
    cy = (usable_height + band) / 2

    regions = {}
    for entry in cfg['regions']:
        angle = entry['angle']
        regions[entry['name']] = Region(
            name=entry['name'],
            color=entry['color'],
            angle=angle,
            center=(cx + center_to_vertex * math.cos(angle),
                    cy + center_to_vertex * math.sin(angle)),
            radius=circle_radius,
        )

    return RegionLayout(
        circle_size=circle_radius * 2,
        circle_radius=circle_radius,
        triangle_height=triangle_height,
        regions=regions,
        circle_ratio=cfg['boundary']['circle_ratio'],
        intersection_ratio=cfg['boundary']['intersection_ratio'],
    )


def fallback_layout(cfg: Optional[Dict[str, Any]] = None) -> RegionLayout:
    """Fixed layout used before the container has real dimensions."""
    if cfg is None:
        cfg = get_config()
    fb = cfg['fallback']
    radius = fb['circle_radius']

    regions = {}
    for entry in cfg['regions']:
        x, y = fb['centers'][entry['name']]
        regions[entry['name']] = Region(
            name=entry['name'],
            color=entry['color'],
            angle=entry['angle'],
            center=(float(x), float(y)),
            radius=radius,
        )

    return RegionLayout(
        circle_size=fb['circle_size'],
        circle_radius=radius,
        triangle_height=fb['triangle_height'],
        regions=regions,
        is_fallback=True,
        circle_ratio=cfg['boundary']['circle_ratio'],
        intersection_ratio=cfg['boundary']['intersection_ratio'],
    )
