"""Command-line interface for astar-search.

This module provides CLI commands for solving grid maps and inspecting configuration.
"""

from .main import main_cli
from .commands import solve_command, config_command
from .utils import setup_logging, save_results, parse_cell

__all__ = [
    'main_cli',
    'solve_command',
    'config_command',
    'setup_logging',
    'save_results',
    'parse_cell'
]
