"""
Exploration vs exploitation scoring.

A strategy scores one child during selection:

    score = strategy(wins, visits, parent_visits)

where wins is the child's credit for the player choosing, visits is the
child's visit count (already offset by a small epsilon so it is never zero)
and parent_visits is the choosing node's visit count.

Strategies:
- UCB1:         wins/visits + c * ln(parent_visits)/visits
- Random:       uniform random value, ignores its inputs
- ExploreFirst: 1/visits

Note the UCB1 exploration term has no square root over
ln(parent_visits)/visits, unlike the textbook formula.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, Optional
import numpy as np


ScoringFn = Callable[[float, float, float], float]


def exploit(wins: float, visits: float, parent_visits: float) -> float:
    """Pure exploitation: empirical win rate. Used to recommend moves."""
    return wins / visits


class ScoringStrategy(ABC):
    """Base class for selection-time scoring strategies."""

    name: str = ""

    @abstractmethod
    def score(self, wins: float, visits: float, parent_visits: float) -> float:
        """Score a child; the highest scoring child gets explored."""
        pass

    def __call__(self, wins: float, visits: float, parent_visits: float) -> float:
        return self.score(wins, visits, parent_visits)


class UCB1(ScoringStrategy):
    """
    Upper-confidence bound.

    Args:
        exploration: Exploration constant c (larger = more exploration)
    """

    name = "ucb1"

    def __init__(self, exploration: float = 1.41):
        if exploration < 0:
            raise ValueError("Exploration constant must be non-negative")
        self.exploration = exploration

    def score(self, wins: float, visits: float, parent_visits: float) -> float:
        return wins / visits + self.exploration * (math.log(parent_visits) / visits)

    def __repr__(self) -> str:
        return f"UCB1(exploration={self.exploration})"


class RandomScore(ScoringStrategy):
    """
    Pure exploration baseline: a fresh uniform value in [0, 1) per call.

    Args:
        rng: Random generator (a fresh unseeded one if None)
    """

    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def score(self, wins: float, visits: float, parent_visits: float) -> float:
        return float(self.rng.random())

    def __repr__(self) -> str:
        return "RandomScore()"


class ExploreFirst(ScoringStrategy):
    """Favours the least visited children: 1/visits."""

    name = "explore-first"

    def score(self, wins: float, visits: float, parent_visits: float) -> float:
        return 1.0 / visits

    def __repr__(self) -> str:
        return "ExploreFirst()"


_STRATEGIES: dict[str, type[ScoringStrategy]] = {
    UCB1.name: UCB1,
    RandomScore.name: RandomScore,
    ExploreFirst.name: ExploreFirst,
}


def get_strategy(
    name: str,
    exploration: float = 1.41,
    rng: Optional[np.random.Generator] = None,
) -> ScoringStrategy:
    """
    Build a scoring strategy by name.

    Args:
        name: One of list_strategies()
        exploration: UCB1 exploration constant (ignored by other strategies)
        rng: Random generator for the random strategy

    Returns:
        ScoringStrategy instance
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}")

    if name == UCB1.name:
        return UCB1(exploration)
    if name == RandomScore.name:
        return RandomScore(rng)
    return ExploreFirst()


def list_strategies() -> list[str]:
    """List all strategy names."""
    return list(_STRATEGIES.keys())
