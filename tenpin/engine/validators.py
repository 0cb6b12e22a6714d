"""
Tenpin - Roll Validation Utilities

Provides validation functions for engine inputs. All validators either
return validated data or raise descriptive exceptions. Validators only ever
see immutable tuples of prior rolls.
"""

from typing import Sequence

from tenpin.engine.base import FRAMES_PER_GAME, TOTAL_PINS, Roll
from tenpin.engine.exceptions import InvalidRollError


def pins_standing(preceding: Sequence[int]) -> int:
    """
    Count the pins left standing after a run of rolls in one frame.

    The rack is reset to a full set of pins whenever it is cleared, so a
    strike or a spare in the final frame gives the next roll a fresh rack.

    Args:
        preceding: Earlier rolls in the frame, in order

    Returns:
        Number of pins the next roll may knock down
    """
    standing = TOTAL_PINS
    for pins in preceding:
        standing -= pins
        if standing == 0:
            standing = TOTAL_PINS
    return standing


def validate_pin_count(pins: object, frame_number: int | None = None) -> int:
    """
    Validate a raw pin count.

    Args:
        pins: Pins knocked down by a single roll
        frame_number: Frame the roll was offered to, for error reporting

    Returns:
        Validated pin count

    Raises:
        InvalidRollError: If pins is not an integer between 0 and 10
    """
    if not isinstance(pins, int) or isinstance(pins, bool):
        raise InvalidRollError(
            f"Pin count must be an integer, got {type(pins).__name__}.",
            pins=pins,
            frame_number=frame_number,
        )

    if not (0 <= pins <= TOTAL_PINS):
        raise InvalidRollError(
            f"Pin count must be between 0 and {TOTAL_PINS}, got {pins}.",
            pins=pins,
            frame_number=frame_number,
        )

    return pins


def validate_roll(roll: Roll, frame_number: int | None = None) -> Roll:
    """
    Validate a roll against the pins standing in its frame.

    Args:
        roll: The roll with its snapshot of preceding rolls
        frame_number: Frame the roll was offered to, for error reporting

    Returns:
        The validated roll

    Raises:
        InvalidRollError: If the roll knocks down more pins than are standing
    """
    validate_pin_count(roll.pins, frame_number)

    standing = pins_standing(roll.preceding)
    if roll.pins > standing:
        where = f" in frame {frame_number}" if frame_number is not None else ""
        raise InvalidRollError(
            f"{roll.kind.name.capitalize()} roll of {roll.pins}{where} exceeds "
            f"the {standing} pins standing.",
            pins=roll.pins,
            frame_number=frame_number,
        )

    return roll


def validate_frame_number(number: int) -> int:
    """
    Validate a frame number.

    Raises:
        ValueError: If number is not 1-10
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise ValueError(f"Frame number must be an integer, got {type(number).__name__}.")

    if not (1 <= number <= FRAMES_PER_GAME):
        raise ValueError(f"Frame number must be 1-{FRAMES_PER_GAME}, got {number}.")

    return number
