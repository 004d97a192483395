"""Min-priority frontier for A* with deterministic tie-breaking."""

import heapq
from typing import Generic, List, Optional, TypeVar

from astar_search.core.data_models import FrontierEntry

N = TypeVar('N')
C = TypeVar('C')

TIE_BREAK_POLICIES = ('lifo', 'fifo')


class Frontier(Generic[N, C]):
    """Binary heap of frontier entries ordered by estimated total cost.

    Entries are never updated in place; a state rediscovered with a lower
    cost is pushed again and the older entry is skipped when popped.
    Among equal estimates, ``lifo`` pops the most recently pushed entry
    first and ``fifo`` the oldest.
    """

    def __init__(self, tie_break: str = 'lifo'):
        if tie_break not in TIE_BREAK_POLICIES:
            raise ValueError(f"tie_break must be one of {TIE_BREAK_POLICIES}, got {tie_break!r}")
        self.tie_break = tie_break
        self._heap: List[FrontierEntry[N, C]] = []
        self._counter = 0
        self.max_size = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, state: N, cost: C, estimate: C) -> FrontierEntry[N, C]:
        """Add an entry and return it."""
        self._counter += 1
        sequence = -self._counter if self.tie_break == 'lifo' else self._counter
        entry = FrontierEntry(state=state, cost=cost, estimate=estimate,
                              sequence=sequence)
        heapq.heappush(self._heap, entry)
        if len(self._heap) > self.max_size:
            self.max_size = len(self._heap)
        return entry

    def pop(self) -> FrontierEntry[N, C]:
        """Remove and return the entry with the smallest estimate."""
        return heapq.heappop(self._heap)

    def peek(self) -> Optional[FrontierEntry[N, C]]:
        return self._heap[0] if self._heap else None
