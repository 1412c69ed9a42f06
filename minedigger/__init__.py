"""A terminal minesweeper game with leaderboards."""

__version__ = "1.0.0"
__all__ = ["assets", "board", "game", "rankings"]