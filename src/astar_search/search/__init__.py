"""Search algorithms.

This module implements the A* engine and the adapters that run it over
reusable problems and two-dimensional grids.
"""

from .frontier import Frontier
from .astar import AStarSearcher, SearchConfig, astar, astar_path, create_astar_searcher
from .reusable import ReusableSearchProblemWrapper, astar_r
from .two_dim import TwoDimSearchProblemWrapper, astar_t

__all__ = [
    'Frontier',
    'AStarSearcher',
    'SearchConfig',
    'astar',
    'astar_path',
    'create_astar_searcher',
    'ReusableSearchProblemWrapper',
    'astar_r',
    'TwoDimSearchProblemWrapper',
    'astar_t'
]
