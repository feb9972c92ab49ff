"""
Configuration management for the search engine and its drivers.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional
import numpy as np
import yaml

from ..mcts.scoring import ScoringStrategy, get_strategy, list_strategies


@dataclass
class MCTSConfig:
    """Search configuration."""

    cycles: int = 1000  # Simulation passes per move
    strategy: str = "ucb1"
    exploration: float = 1.41  # UCB1 constant

    def __post_init__(self):
        if self.cycles < 1:
            raise ValueError("Cycles must be at least 1")
        if self.exploration < 0:
            raise ValueError("Exploration constant must be non-negative")
        if self.strategy not in list_strategies():
            available = ", ".join(list_strategies())
            raise ValueError(
                f"Unknown strategy '{self.strategy}'. Available: {available}"
            )


@dataclass
class PlayConfig:
    """Self-play configuration."""

    game: str = "tictactoe"
    reuse_tree: bool = True  # Keep the tree between moves
    show_tree: bool = False  # Print the tree after each move


@dataclass
class ArenaConfig:
    """Strategy match configuration."""

    games: int = 10

    def __post_init__(self):
        if self.games < 1:
            raise ValueError("Games must be at least 1")


@dataclass
class Config:
    """Full configuration."""

    # Component configs
    mcts: MCTSConfig = field(default_factory=MCTSConfig)
    play: PlayConfig = field(default_factory=PlayConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)

    # Random seed (None = unseeded)
    seed: Optional[int] = None

    # Print per-move search summaries
    verbose: bool = True

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Parse nested configs
        return cls(
            mcts=MCTSConfig(**data.get("mcts", {})),
            play=PlayConfig(**data.get("play", {})),
            arena=ArenaConfig(**data.get("arena", {})),
            seed=data.get("seed"),
            verbose=data.get("verbose", True),
        )


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()


def make_strategy(
    config: MCTSConfig,
    rng: Optional[np.random.Generator] = None,
) -> ScoringStrategy:
    """Build the scoring strategy a config names."""
    return get_strategy(config.strategy, exploration=config.exploration, rng=rng)
