"""
Tenpin - Game

Owns the ten frames of a single-player game and is the only place where
game state changes. Frames are immutable, so the game swaps in a new frame
after each accepted roll and a rejected roll leaves everything untouched.
"""

import logging
from typing import Iterable

from tenpin.engine.base import FRAMES_PER_GAME, FrameScore
from tenpin.engine.exceptions import GameOverError, InvalidRollError, ScoringNotAvailableError
from tenpin.engine.frames import Frame
from tenpin.engine.scoring import build_scorecard, score_frames

logger = logging.getLogger(__name__)


class Game:
    """A single ten-frame bowling game fed one roll at a time."""

    def __init__(self) -> None:
        self._frames: list[Frame] = [
            Frame.empty(number) for number in range(1, FRAMES_PER_GAME + 1)
        ]

    @classmethod
    def from_rolls(cls, rolls: Iterable[int]) -> "Game":
        """Create a game and play the given rolls in order."""
        game = cls()
        for pins in rolls:
            game.roll(pins)
        return game

    @property
    def frames(self) -> tuple[Frame, ...]:
        """Snapshot of all ten frames."""
        return tuple(self._frames)

    @property
    def current_frame(self) -> Frame | None:
        """The frame accepting rolls, or None once the game is over."""
        for frame in self._frames:
            if frame.accepts_rolls:
                return frame
        return None

    @property
    def is_over(self) -> bool:
        return self.current_frame is None

    def roll(self, pins: int) -> None:
        """
        Record a roll against the active frame.

        Args:
            pins: Pins knocked down (0-10)

        Raises:
            GameOverError: If the tenth frame has already closed
            InvalidRollError: If the roll is out of range or exceeds the pins standing
        """
        frame = self.current_frame
        if frame is None:
            raise GameOverError()

        try:
            updated = frame.with_roll(pins)
        except InvalidRollError as exc:
            logger.debug("Rejected roll %r in frame %d: %s", pins, frame.number, exc)
            raise

        self._frames[frame.number - 1] = updated
        logger.debug("Frame %d rolls %s", updated.number, updated.rolls)

        if not updated.accepts_rolls:
            logger.debug("Frame %d closed", updated.number)
            if updated.is_final:
                logger.info("Game over after %d rolls", sum(len(f.rolls) for f in self._frames))

    def score(self) -> int:
        """
        Final score of the game.

        Raises:
            ScoringNotAvailableError: If the game is still in progress
        """
        if not self.is_over:
            raise ScoringNotAvailableError(self.current_frame.number)
        return score_frames(self._frames)

    def scorecard(self) -> tuple[FrameScore, ...]:
        """Frame-by-frame scores with running totals for a finished game."""
        return build_scorecard(self._frames)
