"""
Tenpin.

Ten-pin bowling roll validation and scoring.
"""

from tenpin.engine import Game, GameOverError, InvalidRollError, ScoringNotAvailableError

__all__ = ["Game", "GameOverError", "InvalidRollError", "ScoringNotAvailableError"]
