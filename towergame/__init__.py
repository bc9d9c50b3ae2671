"""A turn-based tower-building board game for the terminal, with a random computer opponent."""

__version__ = "0.1.0"
__all__ = ["ai", "board", "cli"]