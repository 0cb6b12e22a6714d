"""Exceptions raised by the bowling game engine."""


class BowlingError(Exception):
    """Base class for all bowling game errors."""


class InvalidRollError(BowlingError, ValueError):
    """A roll is out of range or knocks down more pins than are standing."""

    def __init__(self, message: str, pins: object = None, frame_number: int | None = None) -> None:
        super().__init__(message)
        self.pins = pins
        self.frame_number = frame_number


class GameOverError(BowlingError):
    """A roll was submitted after the tenth frame closed."""

    def __init__(self) -> None:
        super().__init__("Game is over, no more rolls are accepted.")


class ScoringNotAvailableError(BowlingError):
    """Scoring was requested while frames can still accept rolls."""

    def __init__(self, frame_number: int | None = None) -> None:
        if frame_number is None:
            message = "Cannot score a game that is still in progress."
        else:
            message = f"Cannot score while frame {frame_number} is still in progress."
        super().__init__(message)
        self.frame_number = frame_number
