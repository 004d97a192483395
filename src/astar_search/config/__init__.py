"""Configuration management for astar-search.

This module provides Hydra-based configuration loading, a global
configuration consulted by searcher factories, and temporary overrides.
"""

from .config_manager import (
    ConfigManager, ConfigContext, load_config, get_config, get_parameter, reset_config
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'ConfigContext',
    'load_config',
    'get_config',
    'get_parameter',
    'reset_config',
    'validate_config',
    'ConfigValidationError'
]
