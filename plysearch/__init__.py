"""Adversarial game-tree search for chess-like games."""

__version__ = "0.1.0"
