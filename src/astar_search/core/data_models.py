"""Core data models for the A* engine."""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

N = TypeVar('N')
C = TypeVar('C')


@dataclass
class FrontierEntry(Generic[N, C]):
    """Entry in the A* frontier."""
    state: N
    cost: C  # g(n) - accumulated cost from start
    estimate: C  # f(n) = g(n) + h(n)
    sequence: int  # tie-break key assigned by the frontier

    def __lt__(self, other: 'FrontierEntry') -> bool:
        """Comparison for priority queue (lower estimate has higher priority)."""
        if self.estimate < other.estimate:
            return True
        if other.estimate < self.estimate:
            return False
        # Equal (or unordered) estimates fall back to insertion sequence
        return self.sequence < other.sequence


@dataclass
class SearchStatistics:
    """Counters collected during one search."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    stale_entries_skipped: int = 0
    edges_examined: int = 0
    max_frontier_size: int = 0
    average_branching_factor: float = 0.0
    estimated_length: Optional[int] = None

    def update_branching_factor(self, total_successors: int) -> None:
        """Update average branching factor."""
        if self.nodes_expanded > 0:
            self.average_branching_factor = (
                (self.average_branching_factor * (self.nodes_expanded - 1) + total_successors)
                / self.nodes_expanded
            )
        else:
            self.average_branching_factor = total_successors

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'stale_entries_skipped': self.stale_entries_skipped,
            'edges_examined': self.edges_examined,
            'max_frontier_size': self.max_frontier_size,
            'average_branching_factor': self.average_branching_factor,
            'estimated_length': self.estimated_length,
        }


@dataclass
class SearchResult(Generic[N, C]):
    """Result from A* search.

    A failed search (``success=False``) means the goal is unreachable; it is
    a normal outcome, not an error.
    """
    success: bool
    path: Optional[List[N]] = None
    cost: Optional[C] = None
    statistics: Optional[SearchStatistics] = None
    computation_time: float = 0.0
    termination_reason: str = "unknown"

    @property
    def path_length(self) -> int:
        """Number of states on the path (0 when no path was found)."""
        return len(self.path) if self.path else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'path': list(self.path) if self.path is not None else None,
            'cost': self.cost,
            'termination_reason': self.termination_reason,
            'computation_time': self.computation_time,
            'stats': self.statistics.to_dict() if self.statistics else {},
        }
