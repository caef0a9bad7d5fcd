"""
A position on the board

(placed in its own module as multiple other modules need to import it)
"""

from typing import Any

from src.core.exceptions import InvalidPositionError

# The board is a 3x3 grid, positions are numbered row by row: 0 1 2 / 3 4 5 / 6 7 8
BOARD_DIMENSIONS = (3, 3)
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]

Position = int


def is_within_bounds(position: int) -> bool:
    return 0 <= position < BOARD_SIZE


def validate_position(value: Any) -> Position:
    """Accept an int (or a string holding one) in [0, 8], reject anything else."""
    # bool is a subclass of int, but True is not a board position
    if isinstance(value, bool):
        raise InvalidPositionError()
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.lstrip("-").isdecimal()):
            raise InvalidPositionError()
        value = int(value)
    if not isinstance(value, int) or not is_within_bounds(value):
        raise InvalidPositionError()
    return value
