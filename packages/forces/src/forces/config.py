"""
Forces Configuration
====================
Force constants for the region-constrained chip simulation.

Usage:
    from forces.config import CONFIG
    damping = CONFIG['integration']['damping']
"""

from typing import Any, Dict, Optional

from regions.config import deep_merge

CONFIG = {

    'max_iterations': 100,

    # Seed positions: boundary center + uniform jitter of this total span
    'init': {
        'jitter': 20.0,                # ±10 px per axis
    },

    # =================================================================
    # Forces
    # =================================================================
    'centering': {
        'strength': 0.05,
    },
    'repulsion': {
        'strength': 800.0,             # magnitude = strength / d²
        'range': 120.0,                # only peers closer than this
    },
    'edge': {
        'circle': {
            'threshold': 40.0,         # px from the rim
            'strength': 200.0,
            'softening': 5.0,          # magnitude = strength / (edge + softening)
        },
        'intersection': {
            'threshold': 30.0,
            'strength': 150.0,
            'softening': 3.0,
        },
    },
    'pushback': {
        'strength': 0.5,               # only when outside the boundary
    },

    # =================================================================
    # Integration
    # =================================================================
    'integration': {
        'damping': 0.8,
        'convergence': 0.1,            # stop when Σ(|vx| + |vy|) drops below
    },

    # Chip rendering offset (chip corner = position - half size)
    'render': {
        'half_width': 25.0,
        'half_height': 10.0,
    },
}


def get_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Defaults with `overrides` deep-merged on top."""
    return deep_merge(CONFIG, overrides)
