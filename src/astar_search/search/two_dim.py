"""A* on two-dimensional grids.

Cells are addressed by integer ``(x, y)``. An orthogonal step onto a cell
costs the cell's value plus 2, a diagonal step its value plus 3, so the
Manhattan distance stays an admissible heuristic.
"""

import logging
from typing import Deque, List, Optional, Tuple

from astar_search.core.problem import SearchProblem, TwoDimSearchProblem
from astar_search.search.astar import SearchConfig, astar

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

ORTHOGONAL_STEP_COST = 2
DIAGONAL_STEP_COST = 3


class TwoDimSearchProblemWrapper(SearchProblem):
    """Adapts a TwoDimSearchProblem to the full SearchProblem contract."""

    def __init__(self, grid: TwoDimSearchProblem, start: Cell, end: Cell):
        self.grid = grid
        self._start = start
        self.end = end

    def start(self) -> Cell:
        return self._start

    def is_end(self, state: Cell) -> bool:
        return state == self.end

    def heuristic(self, state: Cell) -> int:
        bx, by = state
        ex, ey = self.end
        return abs(ex - bx) + abs(ey - by)

    def estimate_length(self) -> Optional[int]:
        return self.heuristic(self._start)

    def neighbors(self, state: Cell) -> List[Tuple[Cell, int]]:
        x, y = state
        grid = self.grid
        moves: List[Tuple[Cell, int]] = []

        up, left, right, down = (x, y + 1), (x - 1, y), (x + 1, y), (x, y - 1)
        a = grid.get(*up)
        b = grid.get(*left)
        c = grid.get(*right)
        d = grid.get(*down)

        for cell, value in ((up, a), (left, b), (right, c), (down, d)):
            if value is not None:
                moves.append((cell, value + ORTHOGONAL_STEP_COST))

        if grid.diag():
            # Each diagonal with the two orthogonal cells it passes between
            diagonals = (
                ((x - 1, y + 1), a, b),
                ((x + 1, y + 1), a, c),
                ((x + 1, y - 1), c, d),
                ((x - 1, y - 1), b, d),
            )
            tween = grid.tween()
            for cell, side1, side2 in diagonals:
                if not tween and (side1 is None or side2 is None):
                    continue
                value = grid.get(*cell)
                if value is not None:
                    moves.append((cell, value + DIAGONAL_STEP_COST))

        return moves


def astar_t(grid: TwoDimSearchProblem, start: Cell, end: Cell,
            config: Optional[SearchConfig] = None) -> Optional[Tuple[Deque[Cell], int]]:
    """Perform an A* search between two cells of a grid.

    Args:
        grid: Grid answering per-cell entry costs
        start: Start cell ``(x, y)``
        end: Goal cell ``(x, y)``
        config: Optional search configuration

    Returns:
        ``(path, cost)`` or None if ``end`` is unreachable.
    """
    logger.debug(f"Grid search {start} -> {end}, diag={grid.diag()}, tween={grid.tween()}")
    return astar(TwoDimSearchProblemWrapper(grid, start, end), config)
