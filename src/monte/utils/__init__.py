"""Utilities module."""

from .config import (
    Config,
    MCTSConfig,
    PlayConfig,
    ArenaConfig,
    get_default_config,
    make_strategy,
)
from .seed import set_seed, make_rng
from .logging import (
    Logger,
    MoveRecord,
    console,
    create_progress,
    print_config,
    print_board,
    build_tree,
    print_tree,
)

__all__ = [
    "Config",
    "MCTSConfig",
    "PlayConfig",
    "ArenaConfig",
    "get_default_config",
    "make_strategy",
    "set_seed",
    "make_rng",
    "Logger",
    "MoveRecord",
    "console",
    "create_progress",
    "print_config",
    "print_board",
    "build_tree",
    "print_tree",
]
