"""Kinship configuration module."""

from .layout_config import (
    KINSHIP_CONFIG,
    CONFIG_ENV_VAR,
    get_setting,
    merge_config,
    load_config,
    validate_config,
)

__all__ = [
    "KINSHIP_CONFIG",
    "CONFIG_ENV_VAR",
    "get_setting",
    "merge_config",
    "load_config",
    "validate_config",
]
