"""Generic A* search.

Describe a state space by implementing ``SearchProblem`` and pass it to
``astar`` to get the cheapest path from its start to a goal::

    result = astar(problem)
    if result is not None:
        path, cost = result
"""

from .core.problem import SearchProblem, ReusableSearchProblem, TwoDimSearchProblem
from .core.data_models import SearchResult, SearchStatistics
from .search.astar import AStarSearcher, SearchConfig, astar, astar_path, create_astar_searcher
from .search.reusable import astar_r
from .search.two_dim import astar_t

__version__ = '0.1.0'

__all__ = [
    'SearchProblem',
    'ReusableSearchProblem',
    'TwoDimSearchProblem',
    'SearchResult',
    'SearchStatistics',
    'AStarSearcher',
    'SearchConfig',
    'astar',
    'astar_path',
    'create_astar_searcher',
    'astar_r',
    'astar_t'
]
