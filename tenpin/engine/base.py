"""
Tenpin - Game Engine Base Classes

This module defines the foundational constants, enums and value objects used
throughout the scoring engine. Value objects are frozen dataclasses so a
recorded roll can never change underneath the frame that holds it.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

TOTAL_PINS = 10
FRAMES_PER_GAME = 10


class FrameKind(Enum):
    """Kind of frame within the ten-frame sequence."""
    REGULAR = auto()   # Frames 1-9
    FINAL = auto()     # Frame 10, may take a bonus roll


class FrameState(Enum):
    """Position of a frame in its roll state machine."""
    WAITING_FIRST = auto()
    WAITING_SECOND = auto()
    WAITING_THIRD = auto()   # Final frame only
    CLOSED = auto()


class FrameType(Enum):
    """Classification of a completed regular frame."""
    OPEN = "open"
    SPARE = "spare"
    STRIKE = "strike"


class RollKind(Enum):
    """Position of a roll within its frame."""
    FIRST = 1
    SECOND = 2
    BONUS = 3   # Third roll of the final frame

    @classmethod
    def for_position(cls, index: int) -> "RollKind":
        """Map a zero-based roll index within a frame to its kind."""
        try:
            return cls(index + 1)
        except ValueError:
            raise ValueError(f"A frame holds at most 3 rolls, got index {index}.") from None


@dataclass(frozen=True)
class Roll:
    """
    Immutable record of a single delivery.

    Attributes:
        pins: Pins knocked down (0-10)
        kind: Position of the roll within its frame
        preceding: Snapshot of the earlier rolls in the same frame
    """
    pins: int
    kind: RollKind = RollKind.FIRST
    preceding: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate the kind matches the number of preceding rolls."""
        if len(self.preceding) != self.kind.value - 1:
            raise ValueError(
                f"{self.kind.name} roll expects {self.kind.value - 1} preceding rolls, "
                f"got {len(self.preceding)}."
            )

    @property
    def is_strike(self) -> bool:
        """True when this roll clears a full rack by itself."""
        return self.pins == TOTAL_PINS


@dataclass(frozen=True)
class FrameScore:
    """
    One line of a completed scorecard.

    Attributes:
        number: Frame number (1-10)
        rolls: Pins knocked down by each roll of the frame
        frame_type: Classification, None for the final frame
        score: Points the frame contributes including bonus pins
        running_total: Cumulative score through this frame
    """
    number: int
    rolls: tuple[int, ...]
    frame_type: FrameType | None
    score: int
    running_total: int

    def __str__(self) -> str:
        marks = " ".join(str(pins) for pins in self.rolls)
        return f"Frame {self.number}: [{marks}] {self.score} ({self.running_total})"
