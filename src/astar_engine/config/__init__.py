"""Configuration management for the A* engine.

This module provides Hydra-based configuration management with hierarchical
parameter groups and runtime override capabilities.
"""

from .config_manager import ConfigManager, load_config
from .validators import validate_config, check_config_consistency, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'validate_config',
    'check_config_consistency',
    'ConfigValidationError'
]
