"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
Cell = Optional[str]
PlayerMark = str


@dataclass
class GameModel:
    """Transport-safe representation of a morris game used between API, Service, DB, and Game layers."""

    board: list[Cell]
    current_player: PlayerMark
    phase: str
    pieces_placed: dict[PlayerMark, int]
    selected_piece: Optional[int] = None
    winner: Optional[PlayerMark] = None
