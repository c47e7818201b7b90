# Kinship Layout Configuration
# ============================
# One dict for every tunable the dashboard and sorting board use.
# Each compute package owns its defaults; this module stitches them
# together and applies a YAML override file on top.
#
# Usage:
#   from kinship.config import KINSHIP_CONFIG, get_setting
#   damping = get_setting('forces.integration.damping')
#
#   cfg = load_config('overrides.yaml')
#   layout = compute_regions(w, h, config=cfg['regions'])

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from regions.config import CONFIG as REGIONS_CONFIG
from forces.config import CONFIG as FORCES_CONFIG
from radial.config import CONFIG as RADIAL_CONFIG

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'KINSHIP_CONFIG'

KINSHIP_CONFIG = {

    # =========================================================
    # Compute packages (defaults owned by each package)
    # =========================================================
    'regions': copy.deepcopy(REGIONS_CONFIG),
    'forces': copy.deepcopy(FORCES_CONFIG),
    'radial': copy.deepcopy(RADIAL_CONFIG),

    # =========================================================
    # Caller-side timing hints (the core never sleeps)
    # =========================================================
    'scheduling': {
        'settle_delay_ms': 100,        # after mount, before first layout
        'resize_debounce_ms': 100,     # between resize events
        'resimulate_delay_ms': 50,     # after a membership change
    },

    # =========================================================
    # Dashboard
    # =========================================================
    'dashboard': {
        'default_width': 1200,
        'default_height': 800,
        'simulation_seed': None,       # None = fresh jitter each run
    },
}


def get_setting(path: str, default=None, config: Optional[Dict[str, Any]] = None):
    """
    Get a setting by dot-notation path.

    Example:
        get_setting('forces.integration.damping')   # Returns 0.8
        get_setting('radial.sweep.angle_step')      # Returns 5.0
    """
    value = KINSHIP_CONFIG if config is None else config
    for key in path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def merge_config(overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge `overrides` over KINSHIP_CONFIG.

    Raises ValueError for keys that do not exist in the defaults, so a
    typo in an override file fails loudly instead of being ignored.
    """
    merged = copy.deepcopy(KINSHIP_CONFIG)
    if overrides:
        _merge_strict(merged, overrides, prefix='')
    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a YAML override file and merge it over the defaults.

    With no path, falls back to the KINSHIP_CONFIG environment variable;
    with neither, returns a copy of the defaults.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return copy.deepcopy(KINSHIP_CONFIG)

    path = Path(path).expanduser()
    with open(path) as f:
        overrides = yaml.safe_load(f) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    merged = merge_config(overrides)
    logger.info(f"Loaded config overrides from {path}")
    return merged


def validate_config(config: Optional[Dict[str, Any]] = None) -> List[str]:
    """Check config for internal consistency."""
    cfg = KINSHIP_CONFIG if config is None else config
    errors = []

    damping = cfg['forces']['integration']['damping']
    if not 0 < damping < 1:
        errors.append("forces.integration.damping must be in (0, 1)")

    boundary = cfg['regions']['boundary']
    if boundary['intersection_ratio'] > boundary['circle_ratio']:
        errors.append("regions.boundary.intersection_ratio should be <= circle_ratio")

    if cfg['radial']['ball']['base_radius'] <= 0:
        errors.append("radial.ball.base_radius must be positive")

    step = cfg['radial']['sweep']['angle_step']
    if not 0 < step <= 360:
        errors.append("radial.sweep.angle_step must be in (0, 360]")

    if len(cfg['regions']['regions']) != 3:
        errors.append("regions.regions must define exactly three regions")

    return errors


def _merge_strict(base: Dict[str, Any], overrides: Dict[str, Any], prefix: str) -> None:
    for key, value in overrides.items():
        dotted = f"{prefix}{key}"
        if key not in base:
            raise ValueError(f"Unknown config key: {dotted}")
        if isinstance(value, dict) and isinstance(base[key], dict):
            # Open-ended mappings (fallback centers) accept new names
            if key == 'centers':
                base[key].update(copy.deepcopy(value))
            else:
                _merge_strict(base[key], value, prefix=f"{dotted}.")
        else:
            base[key] = copy.deepcopy(value)
