"""
Regions Configuration
=====================
Geometry constants for the three-circle region layout and the
area boundaries derived from it.

Usage:
    from regions.config import CONFIG
    band = CONFIG['layout']['title_band']
"""

import copy
import math
from typing import Any, Dict, Optional

CONFIG = {

    # =================================================================
    # Triangle layout
    # =================================================================
    'layout': {
        'title_band': 100.0,           # px reserved at the top for the heading
        'triangle_ratio': 0.36,        # triangle height / max usable size
        'vertex_ratio': 2.0 / 3.0,     # center-to-vertex / triangle height
        'radius_multiplier': 0.8,      # circle radius / triangle height
    },

    # =================================================================
    # Regions (name, color token, angle in radians)
    # =================================================================
    'regions': [
        {'name': 'family', 'color': 'rose', 'angle': -math.pi / 2},     # top
        {'name': 'friends', 'color': 'emerald', 'angle': math.pi / 6},  # bottom-right
        {'name': 'work', 'color': 'sky', 'angle': 5 * math.pi / 6},     # bottom-left
    ],

    # =================================================================
    # Fallback when the container has not been measured yet
    # =================================================================
    'fallback': {
        'circle_size': 160.0,
        'circle_radius': 80.0,
        'triangle_height': 300.0,
        'centers': {
            'family': (250.0, 130.0),
            'friends': (390.0, 260.0),
            'work': (110.0, 260.0),
        },
    },

    # =================================================================
    # Area boundaries
    # =================================================================
    'boundary': {
        'circle_ratio': 0.8,           # single-region boundary / circle radius
        'intersection_ratio': 0.4,     # multi-region boundary / circle radius
    },
}

# An entity spans at most this many regions at once
MAX_MEMBERSHIPS = 3


def deep_merge(defaults: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Copy of `defaults` with `overrides` merged in, nested dicts key by key."""
    merged = copy.deepcopy(defaults)
    if overrides:
        _merge(merged, overrides)
    return merged


def get_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Defaults with `overrides` deep-merged on top."""
    return deep_merge(CONFIG, overrides)


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
