"""A* search algorithm.

This module implements A* over any ``SearchProblem``: a binary-heap frontier
keyed by ``f = g + h`` with lazy deletion of stale entries, a best-cost table
and predecessor links for path reconstruction.
"""

import time
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, Hashable, List, Optional, Tuple

from astar_search.core.data_models import SearchResult, SearchStatistics
from astar_search.core.problem import SearchProblem
from astar_search.search.frontier import Frontier, TIE_BREAK_POLICIES

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    tie_break: str = 'lifo'  # Order among equal f-scores: 'lifo' or 'fifo'
    statistics_tracking: bool = True  # Attach SearchStatistics to results

    def __post_init__(self):
        if self.tie_break not in TIE_BREAK_POLICIES:
            raise ValueError(f"tie_break must be one of {TIE_BREAK_POLICIES}, got {self.tie_break!r}")


class AStarSearcher:
    """A* search over caller-defined search problems.

    A searcher holds no state between searches apart from the statistics of
    the most recent one, so it can be reused. Concurrent searches need one
    searcher each.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()

        logger.debug(f"A* searcher initialized with tie_break={self.config.tie_break}, "
                     f"statistics_tracking={self.config.statistics_tracking}")

    def search(self, problem: SearchProblem) -> SearchResult:
        """Search for a lowest-cost path from the problem's start to a goal.

        Args:
            problem: Problem describing the state space

        Returns:
            SearchResult with the path (start first, goal last), its cost and
            statistics. ``success`` is False when no goal is reachable.
        """
        start_time = time.perf_counter()

        self.statistics = SearchStatistics()
        stats = self.statistics
        stats.estimated_length = problem.estimate_length()

        start = problem.start()
        zero = problem.zero_cost()

        logger.info(f"Starting A* search from {start!r}")

        if problem.is_end(start):
            return self._create_result(True, [start], zero, start_time, "start_is_goal")

        frontier: Frontier = Frontier(self.config.tie_break)
        best_costs: Dict[Hashable, Any] = {start: zero}
        parents: Dict[Hashable, Hashable] = {}
        heuristics: Dict[Hashable, Any] = {}

        frontier.push(start, zero, zero + self._heuristic(problem, start, heuristics))
        stats.nodes_generated += 1

        while frontier:
            entry = frontier.pop()
            state = entry.state

            # Skip entries superseded by a cheaper rediscovery
            if best_costs[state] < entry.cost:
                stats.stale_entries_skipped += 1
                continue

            if problem.is_end(state):
                path = self._reconstruct_path(state, parents)
                stats.max_frontier_size = frontier.max_size
                logger.debug(f"Goal {state!r} reached after {stats.nodes_expanded} expansions")
                return self._create_result(True, list(path), entry.cost, start_time, "goal_reached")

            stats.nodes_expanded += 1
            successors = 0

            for neighbor, edge_cost in problem.neighbors(state):
                stats.edges_examined += 1
                candidate = entry.cost + edge_cost

                if neighbor in best_costs and not candidate < best_costs[neighbor]:
                    continue

                best_costs[neighbor] = candidate
                parents[neighbor] = state
                h = self._heuristic(problem, neighbor, heuristics)
                frontier.push(neighbor, candidate, candidate + h)
                stats.nodes_generated += 1
                successors += 1

            stats.update_branching_factor(successors)

        stats.max_frontier_size = frontier.max_size
        return self._create_result(False, None, None, start_time, "search_exhausted")

    def _heuristic(self, problem: SearchProblem, state: Hashable, cache: Dict[Hashable, Any]) -> Any:
        """Heuristic with per-search memoization (heuristics are pure)."""
        if state in cache:
            return cache[state]
        value = problem.heuristic(state)
        cache[state] = value
        return value

    def _reconstruct_path(self, goal: Hashable, parents: Dict[Hashable, Hashable]) -> Deque[Hashable]:
        """Walk predecessor links back from the goal."""
        path = deque([goal])
        state = goal
        # A path never visits more states than have predecessors (plus start)
        for _ in range(len(parents)):
            if state not in parents:
                break
            state = parents[state]
            path.appendleft(state)
        return path

    def _create_result(self, success: bool, path: Optional[List[Any]], cost: Any,
                       start_time: float, termination_reason: str) -> SearchResult:
        computation_time = time.perf_counter() - start_time

        if success:
            logger.info(f"A* search finished: {termination_reason}, cost={cost!r}, "
                        f"path_length={len(path)}, nodes_expanded={self.statistics.nodes_expanded}")
        else:
            logger.info(f"A* search found no path after expanding "
                        f"{self.statistics.nodes_expanded} nodes")

        return SearchResult(
            success=success,
            path=path,
            cost=cost,
            statistics=self.statistics if self.config.statistics_tracking else None,
            computation_time=computation_time,
            termination_reason=termination_reason
        )

    def get_search_stats(self) -> Dict[str, Any]:
        """Get statistics of the most recent search."""
        return {
            **self.statistics.to_dict(),
            'config': {
                'tie_break': self.config.tie_break,
                'statistics_tracking': self.config.statistics_tracking
            }
        }


def astar(problem: SearchProblem,
          config: Optional[SearchConfig] = None) -> Optional[Tuple[Deque[Any], Any]]:
    """Perform an A* search on the provided search problem.

    Args:
        problem: Problem describing the state space
        config: Optional search configuration

    Returns:
        ``(path, cost)`` with the path as a deque from start to goal, or None
        if no goal is reachable.
    """
    result = AStarSearcher(config).search(problem)
    if not result.success:
        return None
    return deque(result.path), result.cost


def astar_path(problem: SearchProblem,
               config: Optional[SearchConfig] = None) -> Optional[List[Any]]:
    """Like ``astar`` but returns only the list of states."""
    result = AStarSearcher(config).search(problem)
    return result.path if result.success else None


def create_astar_searcher(tie_break: Optional[str] = None,
                          statistics_tracking: Optional[bool] = None) -> AStarSearcher:
    """Factory function to create A* searcher.

    Explicit arguments win over the loaded configuration's ``search.astar``
    section, which wins over the ``SearchConfig`` defaults.

    Args:
        tie_break: Order among equal f-scores ('lifo' or 'fifo')
        statistics_tracking: Attach statistics to search results

    Returns:
        Configured AStarSearcher instance
    """
    from astar_search.config import get_parameter

    defaults = SearchConfig()
    if tie_break is None:
        tie_break = str(get_parameter('search.astar.tie_break', defaults.tie_break))
    if statistics_tracking is None:
        statistics_tracking = bool(get_parameter('search.astar.statistics_tracking',
                                                 defaults.statistics_tracking))

    config = SearchConfig(tie_break=tie_break, statistics_tracking=statistics_tracking)

    return AStarSearcher(config)
