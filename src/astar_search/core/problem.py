"""Problem contracts consumed by the A* engine.

A search problem describes a state space well enough that it can be solved
without any more information. ``N`` is the type of one search state and ``C``
is the type of the cost to get from one state to another.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, Tuple, TypeVar

N = TypeVar('N')
C = TypeVar('C')


class SearchProblem(ABC, Generic[N, C]):
    """Description of a problem that will be solved with A*.

    States must be hashable and comparable for equality. Costs must support
    ``+`` and ``<``, and ``zero_cost()`` must return their additive identity.
    The engine never mutates states and never checks the contract below; a
    problem that breaks it yields unspecified (but non-crashing) results.
    """

    @abstractmethod
    def start(self) -> N:
        """A state representing the start of the search.

        Called exactly once per search.
        """

    @abstractmethod
    def is_end(self, state: N) -> bool:
        """Check to see if a state is the goal state."""

    @abstractmethod
    def heuristic(self, state: N) -> C:
        """Estimate the cost to get from a state to the end.

        ``heuristic(end_state)`` should always be zero. The estimate must
        never exceed the true remaining cost for the returned path to be
        optimal.
        """

    @abstractmethod
    def neighbors(self, state: N) -> Iterable[Tuple[N, C]]:
        """Return the neighbors of a state along with the cost to reach each.

        The iterable must be finite and edge costs non-negative. It is
        consumed exactly once per expansion.
        """

    def estimate_length(self) -> Optional[int]:
        """Expected path length, if available. Only used as a sizing hint."""
        return None

    def zero_cost(self) -> C:
        """Additive identity of the cost type."""
        return 0  # type: ignore[return-value]


class ReusableSearchProblem(ABC, Generic[N, C]):
    """A search problem without ``start()`` and ``is_end()``.

    The start and end states are supplied when the search is run, so one
    instance can be searched repeatedly between different endpoints.
    """

    @abstractmethod
    def heuristic(self, state: N) -> C:
        """Estimate the cost to get from a state to the end."""

    @abstractmethod
    def neighbors(self, state: N) -> Iterable[Tuple[N, C]]:
        """Return the neighbors of a state along with the cost to reach each."""

    def estimate_length(self) -> Optional[int]:
        return None

    def zero_cost(self) -> C:
        return 0  # type: ignore[return-value]


class TwoDimSearchProblem(ABC):
    """A grid of integer cells addressed by ``(x, y)``.

    Implementations only answer what it costs to step onto a cell; moves,
    heuristic and goal test are provided by ``astar_t``.
    """

    @abstractmethod
    def get(self, x: int, y: int) -> Optional[int]:
        """Extra cost of entering cell ``(x, y)``, or None if it is impassable."""

    def diag(self) -> bool:
        """Whether diagonal moves are allowed."""
        return False

    def tween(self) -> bool:
        """Whether diagonal moves may squeeze between two impassable cells."""
        return False
