"""Console gomoku: board and forbidden-move rules, a greedy computer opponent, and the game loop."""

__version__ = "0.1.0"
__all__ = ["rules", "machine", "game"]