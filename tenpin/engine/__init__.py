"""
Tenpin Game Engine.

Pure Python bowling logic with zero I/O dependencies.
Handles roll validation, frame completion, and strike/spare scoring.
"""

from tenpin.engine.base import (
    FrameKind,
    FrameScore,
    FrameState,
    FrameType,
    Roll,
    RollKind,
)
from tenpin.engine.exceptions import (
    BowlingError,
    GameOverError,
    InvalidRollError,
    ScoringNotAvailableError,
)
from tenpin.engine.frames import Frame
from tenpin.engine.game import Game

__all__ = [
    # Data Classes
    "Frame",
    "FrameScore",
    "Roll",
    # Enums
    "FrameKind",
    "FrameState",
    "FrameType",
    "RollKind",
    # Errors
    "BowlingError",
    "GameOverError",
    "InvalidRollError",
    "ScoringNotAvailableError",
    # Game
    "Game",
]
