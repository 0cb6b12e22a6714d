"""
Tenpin - Scoring Engine

Pure functions over a completed ten-frame sequence.

Scoring rules:
- Open frame: pins knocked down in the frame
- Spare: 10 + the next roll
- Strike: 10 + the next two rolls
- Final frame: pins knocked down in the frame, no lookahead
"""

from itertools import chain, islice
from typing import Iterator, Sequence

from tenpin.engine.base import FRAMES_PER_GAME, FrameScore, FrameType
from tenpin.engine.exceptions import ScoringNotAvailableError
from tenpin.engine.frames import Frame

BONUS_ROLLS: dict[FrameType, int] = {
    FrameType.OPEN: 0,
    FrameType.SPARE: 1,
    FrameType.STRIKE: 2,
}


def _following_rolls(frame_index: int, frames: Sequence[Frame]) -> Iterator[int]:
    """Rolls delivered after the given frame, in bowling order."""
    return chain.from_iterable(frame.rolls for frame in frames[frame_index + 1:])


def require_complete(frames: Sequence[Frame]) -> None:
    """
    Check every frame of the game is closed.

    Raises:
        ScoringNotAvailableError: If frames are missing or any frame accepts rolls
    """
    if len(frames) != FRAMES_PER_GAME:
        raise ScoringNotAvailableError()

    for frame in frames:
        if frame.accepts_rolls:
            raise ScoringNotAvailableError(frame.number)


def bonus_pins_for(frame_index: int, frames: Sequence[Frame]) -> int:
    """
    Bonus pins earned by a frame from the rolls that follow it.

    Args:
        frame_index: Zero-based index of the frame
        frames: The complete frame sequence

    Returns:
        Bonus pins (0 for open frames and the final frame)
    """
    frame_type = frames[frame_index].frame_type
    if frame_type is None:
        return 0

    bonus_count = BONUS_ROLLS[frame_type]
    return sum(islice(_following_rolls(frame_index, frames), bonus_count))


def frame_score(frame_index: int, frames: Sequence[Frame]) -> int:
    """Points a single frame contributes, including bonus pins."""
    return frames[frame_index].total_pins + bonus_pins_for(frame_index, frames)


def score_frames(frames: Sequence[Frame]) -> int:
    """
    Total score of a completed game.

    Raises:
        ScoringNotAvailableError: If the game is still in progress
    """
    require_complete(frames)
    return sum(frame_score(index, frames) for index in range(len(frames)))


def build_scorecard(frames: Sequence[Frame]) -> tuple[FrameScore, ...]:
    """
    Frame-by-frame scorecard of a completed game.

    Args:
        frames: The complete frame sequence

    Returns:
        One FrameScore per frame, with running totals

    Raises:
        ScoringNotAvailableError: If the game is still in progress
    """
    require_complete(frames)

    lines = []
    running_total = 0
    for index, frame in enumerate(frames):
        points = frame_score(index, frames)
        running_total += points
        lines.append(
            FrameScore(
                number=frame.number,
                rolls=frame.rolls,
                frame_type=frame.frame_type,
                score=points,
                running_total=running_total,
            )
        )
    return tuple(lines)
