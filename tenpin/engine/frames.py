"""
Tenpin - Frame State Machine

A frame is an immutable value: recording a roll returns a new frame, so a
rejected roll can never leave a frame half-updated.

Regular frames (1-9):
- WAITING_FIRST -> WAITING_SECOND -> CLOSED
- WAITING_FIRST -> CLOSED on a strike

Final frame (10):
- WAITING_FIRST -> WAITING_SECOND -> CLOSED
- WAITING_SECOND -> WAITING_THIRD -> CLOSED when the first two rolls total 10 or more
"""

from dataclasses import dataclass

from tenpin.engine.base import (
    FRAMES_PER_GAME,
    TOTAL_PINS,
    FrameKind,
    FrameState,
    FrameType,
    Roll,
    RollKind,
)
from tenpin.engine.exceptions import InvalidRollError
from tenpin.engine.validators import validate_frame_number, validate_roll


def _frame_state(kind: FrameKind, rolls: tuple[int, ...]) -> FrameState:
    """Derive the state machine position from the rolls recorded so far."""
    count = len(rolls)
    if count == 0:
        return FrameState.WAITING_FIRST

    if kind is FrameKind.REGULAR:
        if count == 1 and rolls[0] != TOTAL_PINS:
            return FrameState.WAITING_SECOND
        return FrameState.CLOSED

    if count == 1:
        return FrameState.WAITING_SECOND
    if count == 2 and sum(rolls) >= TOTAL_PINS:
        return FrameState.WAITING_THIRD
    return FrameState.CLOSED


@dataclass(frozen=True)
class Frame:
    """
    Immutable representation of one frame.

    Attributes:
        number: Frame number (1-10); frame 10 is the final frame
        rolls: Pins knocked down by each roll recorded so far
    """
    number: int
    rolls: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Validate the recorded rolls by replaying them through the state machine."""
        validate_frame_number(self.number)
        for index, pins in enumerate(self.rolls):
            prefix = self.rolls[:index]
            if _frame_state(self.kind, prefix) is FrameState.CLOSED:
                raise InvalidRollError(
                    f"Frame {self.number} was closed after {index} rolls.",
                    pins=pins,
                    frame_number=self.number,
                )
            validate_roll(
                Roll(pins=pins, kind=RollKind.for_position(index), preceding=prefix),
                self.number,
            )

    @classmethod
    def empty(cls, number: int) -> "Frame":
        """Create a frame with no rolls."""
        return cls(number=number)

    @property
    def kind(self) -> FrameKind:
        """REGULAR for frames 1-9, FINAL for frame 10."""
        if self.number == FRAMES_PER_GAME:
            return FrameKind.FINAL
        return FrameKind.REGULAR

    @property
    def is_final(self) -> bool:
        return self.kind is FrameKind.FINAL

    @property
    def state(self) -> FrameState:
        return _frame_state(self.kind, self.rolls)

    @property
    def accepts_rolls(self) -> bool:
        """True until the frame reaches CLOSED."""
        return self.state is not FrameState.CLOSED

    @property
    def total_pins(self) -> int:
        """Pins knocked down by this frame's own rolls."""
        return sum(self.rolls)

    @property
    def first_roll(self) -> int | None:
        return self.rolls[0] if self.rolls else None

    @property
    def second_roll(self) -> int | None:
        return self.rolls[1] if len(self.rolls) > 1 else None

    @property
    def is_strike(self) -> bool:
        """Regular frame closed by a single roll of ten."""
        return not self.is_final and self.first_roll == TOTAL_PINS

    @property
    def is_spare(self) -> bool:
        """Regular frame cleared across exactly two rolls."""
        return (
            not self.is_final
            and len(self.rolls) == 2
            and self.total_pins == TOTAL_PINS
        )

    @property
    def frame_type(self) -> FrameType | None:
        """
        Classification used by the scoring engine.

        Returns None for the final frame, which has no bonus lookahead.
        """
        if self.is_final:
            return None
        if self.is_strike:
            return FrameType.STRIKE
        if self.is_spare:
            return FrameType.SPARE
        return FrameType.OPEN

    def with_roll(self, pins: int) -> "Frame":
        """
        Record a roll and return the updated frame.

        Args:
            pins: Pins knocked down (0-10)

        Returns:
            New Frame including the roll

        Raises:
            InvalidRollError: If the frame is closed or the roll is illegal
        """
        if not self.accepts_rolls:
            raise InvalidRollError(
                f"Frame {self.number} is closed.",
                pins=pins,
                frame_number=self.number,
            )

        roll = validate_roll(
            Roll(pins=pins, kind=RollKind.for_position(len(self.rolls)), preceding=self.rolls),
            self.number,
        )
        return Frame(number=self.number, rolls=self.rolls + (roll.pins,))
