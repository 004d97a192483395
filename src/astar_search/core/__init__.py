"""Core contracts and data models."""

from .problem import SearchProblem, ReusableSearchProblem, TwoDimSearchProblem
from .data_models import FrontierEntry, SearchResult, SearchStatistics

__all__ = [
    'SearchProblem',
    'ReusableSearchProblem',
    'TwoDimSearchProblem',
    'FrontierEntry',
    'SearchResult',
    'SearchStatistics'
]
