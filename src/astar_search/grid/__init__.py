"""Grid maps searchable with A*."""

from .grid_map import GridMap, GridFormatError

__all__ = [
    'GridMap',
    'GridFormatError'
]
