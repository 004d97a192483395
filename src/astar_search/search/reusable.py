"""A* between endpoints chosen at call time."""

import logging
from typing import Any, Deque, Iterable, Optional, Tuple

from astar_search.core.problem import ReusableSearchProblem, SearchProblem
from astar_search.search.astar import SearchConfig, astar

logger = logging.getLogger(__name__)


class ReusableSearchProblemWrapper(SearchProblem):
    """Adapts a ReusableSearchProblem to the full SearchProblem contract."""

    def __init__(self, problem: ReusableSearchProblem, start: Any, end: Any):
        self.problem = problem
        self._start = start
        self.end = end

    def start(self) -> Any:
        return self._start

    def is_end(self, state: Any) -> bool:
        return state == self.end

    def heuristic(self, state: Any) -> Any:
        return self.problem.heuristic(state)

    def neighbors(self, state: Any) -> Iterable[Tuple[Any, Any]]:
        return self.problem.neighbors(state)

    def estimate_length(self) -> Optional[int]:
        return self.problem.estimate_length()

    def zero_cost(self) -> Any:
        return self.problem.zero_cost()


def astar_r(problem: ReusableSearchProblem, start: Any, end: Any,
            config: Optional[SearchConfig] = None) -> Optional[Tuple[Deque[Any], Any]]:
    """Perform an A* search from ``start`` to ``end`` on a reusable problem.

    Args:
        problem: Problem providing heuristic and neighbors
        start: Start state
        end: Goal state; the search succeeds on the state equal to it
        config: Optional search configuration

    Returns:
        ``(path, cost)`` or None if ``end`` is unreachable.
    """
    logger.debug(f"Reusable search {start!r} -> {end!r}")
    return astar(ReusableSearchProblemWrapper(problem, start, end), config)
