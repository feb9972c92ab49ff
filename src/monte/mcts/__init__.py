"""
Monte Carlo Tree Search module.
"""

from .node import Node, EPSILON, CREDIT
from .search import MCTS
from .scoring import (
    ScoringStrategy,
    UCB1,
    RandomScore,
    ExploreFirst,
    exploit,
    get_strategy,
    list_strategies,
)

__all__ = [
    "Node",
    "EPSILON",
    "CREDIT",
    "MCTS",
    "ScoringStrategy",
    "UCB1",
    "RandomScore",
    "ExploreFirst",
    "exploit",
    "get_strategy",
    "list_strategies",
]
