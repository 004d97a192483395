"""CLI command implementations."""

import json
import sys
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import DictConfig, OmegaConf

from astar_search.config import ConfigContext, load_config, validate_config, ConfigValidationError
from astar_search.grid import GridMap
from astar_search.search.astar import create_astar_searcher
from astar_search.search.two_dim import TwoDimSearchProblemWrapper

from .utils import save_results, format_duration, to_serializable

logger = logging.getLogger(__name__)


def _overrides(args) -> List[str]:
    """Hydra overrides given with ``--config``."""
    return [args.config] if getattr(args, 'config', None) else []


def _load_cli_config(args) -> Optional[DictConfig]:
    """Load configuration for a command.

    Returns None when no configuration directory is available, in which case
    built-in defaults apply.
    """
    try:
        config = load_config(overrides=_overrides(args))
    except FileNotFoundError as e:
        logger.warning(f"{e}; using built-in defaults")
        return None

    # Without -v/-q flags the configured level applies
    if not getattr(args, 'quiet', False) and getattr(args, 'verbose', 0) == 0:
        level = OmegaConf.select(config, 'logging.level', default=None)
        if level:
            logging.getLogger().setLevel(str(level).upper())

    return config


def solve_grid(grid: GridMap, start, goal, tie_break: Optional[str] = None) -> Dict[str, Any]:
    """Search a grid map and return a JSON-friendly result dictionary."""
    searcher = create_astar_searcher(tie_break=tie_break)
    result = searcher.search(TwoDimSearchProblemWrapper(grid, start, goal))
    return to_serializable(result.to_dict())


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 when a path exists)
    """
    try:
        config = _load_cli_config(args)

        diagonal = args.diag
        tween = args.tween
        if config is not None:
            diagonal = diagonal or bool(OmegaConf.select(config, 'grid.diagonal', default=False))
            tween = tween or bool(OmegaConf.select(config, 'grid.tween', default=False))

        logger.info(f"Loading grid from {args.grid_file}")
        grid = GridMap.from_file(args.grid_file, diagonal=diagonal, tween=tween)

        tie_break = getattr(args, 'tie_break', None)
        start_time = time.perf_counter()
        if tie_break and config is not None:
            with ConfigContext({'search.astar.tie_break': tie_break}):
                result = solve_grid(grid, args.start, args.goal)
        else:
            result = solve_grid(grid, args.start, args.goal, tie_break=tie_break)
        total_time = time.perf_counter() - start_time

        result.update({
            'grid_file': str(args.grid_file),
            'start': list(args.start),
            'goal': list(args.goal),
            'total_time': total_time
        })

        # stdout carries only the JSON document unless it goes to a file
        if args.output:
            save_results(result, args.output)
            logger.info(f"Results saved to {args.output}")
            report = sys.stdout
        else:
            print(json.dumps(result, indent=2))
            report = sys.stderr

        if args.render and result['success']:
            print(grid.render(tuple(cell) for cell in result['path']), file=report)

        if not args.quiet:
            print(f"\nGrid: {Path(args.grid_file).name}", file=report)
            print(f"Success: {result['success']}", file=report)
            if result['success']:
                print(f"Path length: {len(result['path'])}", file=report)
                print(f"Cost: {result['cost']}", file=report)
            else:
                print("No path exists", file=report)
            print(f"Computation time: {format_duration(result['computation_time'])}", file=report)

        return 0 if result['success'] else 1

    except Exception as e:
        logger.error(f"Solve command failed: {e}")
        return 1


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        if args.config_action == 'show':
            config = load_config(overrides=_overrides(args), validate=False)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_config(overrides=_overrides(args), validate=False)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
