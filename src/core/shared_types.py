"""
Type definitions used across layers
"""

from enum import StrEnum


class Player(StrEnum):
    """The two marks. Values are what ends up on the board and on the wire."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Phase(StrEnum):
    PLACING = "placing"
    MOVING = "moving"
