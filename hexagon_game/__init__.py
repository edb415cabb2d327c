"""A hexagonal-grid capture board game with a greedy computer opponent."""

__version__ = "0.1.0"
__all__ = ["ai", "board", "game", "main", "menu", "palette", "serialization", "state"]