"""Configuration validation for astar-search."""

import logging
from typing import List
from omegaconf import DictConfig

from astar_search.search.frontier import TIE_BREAK_POLICIES

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_grid_config(config.get('grid', {}))
        validate_logging_config(config.get('logging', {}))
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")

    for issue in check_config_consistency(config):
        logger.warning(issue)

    logger.info("Configuration validation passed")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    astar_config = search_config.get('astar', {})
    if astar_config:
        tie_break = astar_config.get('tie_break', 'lifo')
        if tie_break not in TIE_BREAK_POLICIES:
            raise ConfigValidationError(
                f"astar.tie_break must be one of {TIE_BREAK_POLICIES}, got {tie_break}"
            )

        tracking = astar_config.get('statistics_tracking', True)
        if not isinstance(tracking, bool):
            raise ConfigValidationError(
                f"astar.statistics_tracking must be boolean, got {tracking}"
            )


def validate_grid_config(grid_config: DictConfig) -> None:
    """Validate grid configuration section."""
    if not grid_config:
        return

    for key in ['diagonal', 'tween']:
        value = grid_config.get(key, False)
        if not isinstance(value, bool):
            raise ConfigValidationError(f"grid.{key} must be boolean, got {value}")


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section."""
    if not logging_config:
        return

    level = logging_config.get('level', 'WARNING')
    if str(level).upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {LOG_LEVELS}, got {level}"
        )


def check_config_consistency(config: DictConfig) -> List[str]:
    """Check configuration consistency and return issues.

    Args:
        config: Configuration to check

    Returns:
        List of consistency issues
    """
    issues = []

    grid_config = config.get('grid', {}) or {}
    if grid_config.get('tween', False) and not grid_config.get('diagonal', False):
        issues.append("grid.tween has no effect unless grid.diagonal is enabled")

    return issues
