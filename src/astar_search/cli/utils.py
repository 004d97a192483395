"""CLI utility functions."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Hydra is chatty at INFO
    logging.getLogger('hydra').setLevel(logging.WARNING)


def parse_cell(value: str) -> Tuple[int, int]:
    """Parse an ``X,Y`` command line argument into a cell."""
    parts = value.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Cell coordinates must be integers, got {value!r}")


def to_serializable(obj: Any) -> Any:
    """Convert numpy values, tuples and deques into JSON-friendly types."""
    if hasattr(obj, 'tolist'):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {k: to_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)) or hasattr(obj, 'appendleft'):
        return [to_serializable(item) for item in obj]
    else:
        return obj


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(to_serializable(results), f, indent=2, sort_keys=True)
        else:
            json.dump(to_serializable(results), f)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"
