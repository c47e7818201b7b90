"""
Radial Configuration
====================
Sweep parameters for the floating-ball dashboard.

Usage:
    from radial.config import CONFIG
    step = CONFIG['sweep']['angle_step']
"""

from typing import Any, Dict, Optional

from regions.config import deep_merge

CONFIG = {

    # Ball radius = base + weight * scale (weight = urgency 1..5)
    'ball': {
        'base_radius': 25.0,
        'weight_scale': 10.0,
    },

    # Central obstacle (heading / logo), centered in the viewport
    'obstacle': {
        'max_width': 400.0,
        'width_ratio': 0.6,            # of viewport width
        'height': 80.0,
    },

    'sweep': {
        'start_distance': 100.0,
        'angle_step': 5.0,             # degrees
        'max_distance_ratio': 0.4,     # of min(width, height)
    },

    'clearance': {
        'viewport_margin': 50.0,
        'obstacle_padding': 20.0,
        'ball_spacing': 10.0,
    },

    # Used when the sweep finds nothing
    'fallback': {
        'distance_step': 30.0,
        'angle_step': 45.0,
    },
}


def get_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Defaults with `overrides` deep-merged on top."""
    return deep_merge(CONFIG, overrides)
