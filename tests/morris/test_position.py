"""Unit tests for /src/morris/position.py"""

import pytest

from src.core.exceptions import InvalidPositionError
from src.morris.position import BOARD_SIZE, is_within_bounds, validate_position


def test_positions_within_bounds() -> None:
    """happy case: every cell of the 3x3 grid"""
    assert BOARD_SIZE == 9
    for position in range(BOARD_SIZE):
        assert is_within_bounds(position)


@pytest.mark.parametrize("position", [-1, 9, 100])
def test_positions_out_of_bounds(position: int) -> None:
    assert not is_within_bounds(position)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (8, 8),
        ("4", 4),  # positions taken from a URL or loosely typed JSON
        (" 7 ", 7),
    ],
)
def test_validate_position(value: int | str, expected: int) -> None:
    assert validate_position(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        -1,
        9,
        "9",
        "-1",
        "four",
        "\u0664",  # ARABIC-INDIC DIGIT FOUR
        "\u00b2",  # SUPERSCRIPT TWO
        "",
        None,
        3.5,
        True,  # bool is an int subclass, but not a position
        [1],
    ],
)
def test_invalid_positions_are_rejected(value: object) -> None:
    with pytest.raises(InvalidPositionError):
        validate_position(value)
