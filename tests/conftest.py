"""
Tenpin - Test Configuration and Fixtures

Common fixtures and roll sequences for all test modules.
"""

import pytest

from tenpin.engine.game import Game


# =============================================================================
# COMPLETE GAMES
# =============================================================================

@pytest.fixture
def complete_games() -> dict[str, tuple[tuple[int, ...], int, str]]:
    """
    Full-game roll sequences with expected final scores.

    Returns:
        Dict mapping name to (rolls, expected_score, description)
    """
    return {
        "gutter_game": ((0,) * 20, 0, "All gutter balls"),
        "all_ones": ((1,) * 20, 20, "One pin every roll"),
        "all_fives": ((5,) * 21, 150, "Ten spares of 5/5 plus a bonus 5"),
        "nine_one_spares": ((9, 1) * 10 + (9,), 190, "Ten 9/1 spares plus a bonus 9"),
        "perfect_game": ((10,) * 12, 300, "Twelve strikes"),
        "dutch_200": ((10, 5, 5) * 5 + (10,), 200, "Alternating strikes and spares"),
        "opening_strike": ((10, 3, 4) + (0,) * 16, 24, "Strike followed by 3, 4"),
        "opening_spare": ((5, 5, 3) + (0,) * 17, 16, "Spare followed by 3"),
        "double_strike": ((10, 10, 3, 4) + (0,) * 14, 47, "Two strikes followed by 3, 4"),
        "ninth_frame_strike": ((0,) * 16 + (10, 3, 4), 24, "Strike in the ninth, open tenth"),
        "closing_turkey": ((0,) * 16 + (10, 10, 10, 10), 60, "Strike in the ninth, three in the tenth"),
        "tenth_spare_strike": ((0,) * 18 + (7, 3, 10), 20, "Spare then strike in the tenth"),
        "tenth_strike_open": ((0,) * 18 + (10, 3, 4), 17, "Strike then 3, 4 in the tenth"),
    }


@pytest.fixture
def incomplete_games() -> list[tuple[int, ...]]:
    """Roll sequences that leave at least one frame accepting rolls."""
    return [
        (),
        (3,),
        (10,) * 9,
        (0,) * 19,
        (0,) * 18 + (10,),
        (0,) * 18 + (10, 10),
        (0,) * 18 + (6, 4),
        (10,) * 11,
    ]


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def new_game() -> Game:
    """A game with no rolls."""
    return Game()


@pytest.fixture
def finished_game() -> Game:
    """A completed game: strike, spare, then open frames."""
    return Game.from_rolls((10, 7, 3, 4, 2) + (0,) * 14)
