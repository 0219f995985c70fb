from __future__ import annotations


class InvalidMove(ValueError):
    """Out-of-range index, occupied cell, or a move after the game ended."""


class EngineInvariantViolation(RuntimeError):
    """The engine was asked to move on a board with no empty cell."""
