"""Requests and Response models

On the wire, field names are camelCase (gameId, fromPosition, ...). In Python they are snake_case.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.core.shared_types import Phase, Player
from src.morris.position import Position

PlayerMark = str

# Positions are passed on as received. The Game validates them, after the game itself was found.
RawPosition = Any


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- REQUEST MODELS ---
class GetGameRequest(CamelModel):
    game_id: str


class PlaceRequest(CamelModel):
    game_id: str
    position: RawPosition


class SelectRequest(CamelModel):
    game_id: str
    position: RawPosition


class MoveRequest(CamelModel):
    game_id: str
    from_position: RawPosition
    to_position: RawPosition


# --- RESPONSE MODELS ---
class GameState(CamelModel):
    board: list[Optional[Player]]
    current_player: Player
    phase: Phase
    pieces_placed: dict[PlayerMark, int]
    selected_piece: Optional[int]
    winner: Optional[Player]


class StartGameResponse(CamelModel):
    game_id: UUID
    game: GameState


class GameResponse(CamelModel):
    """`message` is only set on the request that won the game."""

    game: GameState
    message: Optional[str] = None


class SelectResponse(CamelModel):
    game: GameState
    valid_moves: list[Position]


class ErrorResponse(BaseModel):
    error: str
