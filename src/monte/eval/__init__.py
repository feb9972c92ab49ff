"""Engine-vs-engine games and strategy matches."""

from .arena import Arena, ArenaResult, GameResult, play_game

__all__ = ["Arena", "ArenaResult", "GameResult", "play_game"]
