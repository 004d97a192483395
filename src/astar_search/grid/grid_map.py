"""Numpy-backed grid maps."""

import logging
from pathlib import Path
from typing import Deque, Iterable, Optional, Tuple, Union

import numpy as np

from astar_search.core.problem import TwoDimSearchProblem
from astar_search.search.astar import SearchConfig
from astar_search.search.two_dim import Cell, astar_t

logger = logging.getLogger(__name__)

WALL = -1
OPEN_CHAR = '.'
PATH_CHAR = '*'
WALL_CHAR = '#'
DIGITS = '0123456789'


class GridFormatError(ValueError):
    """Raised when a grid map cannot be parsed."""
    pass


class GridMap(TwoDimSearchProblem):
    """Rectangular grid of cell costs.

    ``cells[y, x]`` holds the extra cost of entering ``(x, y)``; negative
    values are walls. Cells outside the array are impassable.
    """

    def __init__(self, cells: np.ndarray, diagonal: bool = False, tween: bool = False):
        cells = np.asarray(cells)
        if cells.ndim != 2:
            raise GridFormatError(f"Grid must be two-dimensional, got shape {cells.shape}")
        if not np.issubdtype(cells.dtype, np.integer):
            raise GridFormatError(f"Grid cells must be integers, got {cells.dtype}")
        self.cells = cells.astype(np.int32)
        self.diagonal = diagonal
        self.allow_tween = tween

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def get(self, x: int, y: int) -> Optional[int]:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        value = int(self.cells[y, x])
        return None if value < 0 else value

    def diag(self) -> bool:
        return self.diagonal

    def tween(self) -> bool:
        return self.allow_tween

    def search(self, start: Cell, end: Cell,
               config: Optional[SearchConfig] = None) -> Optional[Tuple[Deque[Cell], int]]:
        """Find a cheapest path between two cells."""
        return astar_t(self, start, end, config)

    def render(self, path: Optional[Iterable[Cell]] = None) -> str:
        """Draw the grid, marking cells on ``path`` with ``*``."""
        on_path = set(path or ())
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                value = int(self.cells[y, x])
                if (x, y) in on_path:
                    row.append(PATH_CHAR)
                elif value < 0:
                    row.append(WALL_CHAR)
                elif value == 0:
                    row.append(OPEN_CHAR)
                else:
                    row.append(str(value))
            lines.append(''.join(row))
        return '\n'.join(lines)

    @classmethod
    def from_text(cls, text: str, diagonal: bool = False, tween: bool = False) -> 'GridMap':
        """Parse a character map.

        ``.`` is an open cell, a digit is an open cell with that extra cost
        and anything else is a wall. Short rows are padded with walls.
        """
        rows = text.splitlines()
        # Drop trailing blank lines but keep blank rows inside the map
        while rows and not rows[-1].strip():
            rows.pop()
        if not rows:
            raise GridFormatError("Grid map is empty")

        width = max(len(row) for row in rows)
        cells = np.full((len(rows), width), WALL, dtype=np.int32)
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char == OPEN_CHAR:
                    cells[y, x] = 0
                elif char in DIGITS:
                    cells[y, x] = int(char)

        logger.debug(f"Parsed grid map of {width}x{len(rows)} cells")
        return cls(cells, diagonal=diagonal, tween=tween)

    @classmethod
    def from_file(cls, file_path: Union[str, Path], diagonal: bool = False,
                  tween: bool = False) -> 'GridMap':
        """Load a character map from a text file.

        Raises:
            FileNotFoundError: If file doesn't exist
            GridFormatError: If file format is invalid
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Grid file not found: {file_path}")

        with open(file_path, 'r') as f:
            text = f.read()

        try:
            return cls.from_text(text, diagonal=diagonal, tween=tween)
        except GridFormatError as e:
            raise GridFormatError(f"Failed to load grid from {file_path}: {e}")
