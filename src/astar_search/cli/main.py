"""Main CLI entry point for astar-search."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging, parse_cell


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='astar-search',
        description='A* pathfinding over grid maps and custom search problems',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  astar-search solve maze.txt --start 0,0 --goal 0,4     # Cheapest path through a maze
  astar-search solve map.txt --start 0,0 --goal 9,9 --diag --render
  astar-search config show                                # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration override (e.g., search.astar.tie_break=fifo)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Find a cheapest path on a grid map',
        description="Find a cheapest path on a character grid map ('.' open, "
                    "digits weighted, anything else a wall)"
    )

    solve_parser.add_argument(
        'grid_file',
        type=str,
        help='Path to grid map text file'
    )

    solve_parser.add_argument(
        '--start', '-s',
        type=parse_cell,
        required=True,
        help='Start cell as X,Y'
    )

    solve_parser.add_argument(
        '--goal', '-g',
        type=parse_cell,
        required=True,
        help='Goal cell as X,Y'
    )

    solve_parser.add_argument(
        '--diag',
        action='store_true',
        help='Allow diagonal moves'
    )

    solve_parser.add_argument(
        '--tween',
        action='store_true',
        help='Allow diagonal moves between two walls'
    )

    solve_parser.add_argument(
        '--tie-break',
        choices=['lifo', 'fifo'],
        help='Order among equal-cost frontier entries (overrides search.astar.tie_break)'
    )

    solve_parser.add_argument(
        '--render',
        action='store_true',
        help='Print the map with the path marked'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
