"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of three men's morris -->
passes this information to the service layer, which can then pass it onwards to the API layer.

A game goes through two phases:
* placing: players take turns dropping one of their 3 pieces on an empty cell.
* moving: once all 6 pieces are on the board, players take turns sliding one of their pieces to an empty, adjacent cell.
Three of the same mark on a row, column or diagonal wins, in either phase.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import (
    GameOverError,
    GameStateError,
    InvalidPhaseError,
    NotAdjacentError,
    NotYourPieceError,
    NoValidMovesError,
    OccupiedPositionError,
)
from src.core.models import GameModel
from src.core.shared_types import Phase, Player
from src.morris.board import ADJACENCY, Board
from src.morris.position import Position, validate_position

PIECES_PER_PLAYER = 3


def _no_pieces_placed() -> dict[Player, int]:
    return {player: 0 for player in Player}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board)
    current_player: Player = Player.X
    phase: Phase = Phase.PLACING
    pieces_placed: dict[Player, int] = field(default_factory=_no_pieces_placed)
    selected_piece: Optional[Position] = None
    winner: Optional[Player] = None

    @classmethod
    def new_game(cls) -> Self:
        """Empty board, X to place first."""
        return cls()

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        try:
            board = Board.from_marks(model.board)
            current_player = Player(model.current_player)
            phase = Phase(model.phase)
            pieces_placed = {
                player: model.pieces_placed.get(player.value, 0) for player in Player
            }
            winner = Player(model.winner) if model.winner else None
        except ValueError as e:
            raise GameStateError(f"Stored game cannot be interpreted: {e}") from e

        return cls(
            board=board,
            current_player=current_player,
            phase=phase,
            pieces_placed=pieces_placed,
            selected_piece=model.selected_piece,
            winner=winner,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_marks(),
            current_player=self.current_player.value,
            phase=self.phase.value,
            pieces_placed={
                player.value: count for player, count in self.pieces_placed.items()
            },
            selected_piece=self.selected_piece,
            winner=self.winner.value if self.winner else None,
        )

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def place(self, position: Position) -> Optional[Player]:
        """
        Drop a piece of the current player on an empty cell.
        ----

        Returns the winner if this placement completed a line. On a win the turn does NOT pass to the opponent.
        """
        position = validate_position(position)
        self._assert_in_phase(Phase.PLACING)

        if not self.board.is_empty(position):
            raise OccupiedPositionError()

        self.board.place(self.current_player, position)
        self.pieces_placed[self.current_player] += 1

        if self._check_winner():
            return self.winner

        if all(count == PIECES_PER_PLAYER for count in self.pieces_placed.values()):
            self.phase = Phase.MOVING

        self._switch_turn()
        return None

    def select(self, position: Position) -> list[Position]:
        """
        Pick up one of your pieces, to move it in the next call.
        ----

        Only records the selection (the board is untouched) and returns the cells the piece could slide to.
        """
        position = validate_position(position)
        self._assert_in_phase(Phase.MOVING)
        self._assert_own_piece(position)

        valid_moves = self.board.empty_neighbours(position)
        if not valid_moves:
            raise NoValidMovesError()

        self.selected_piece = position
        return valid_moves

    def move(self, from_position: Position, to_position: Position) -> Optional[Player]:
        """
        Slide a piece to an adjacent empty cell.
        ----

        1. the piece must belong to the current player
        2. the destination must be empty
        3. the destination must be adjacent
        Afterwards the selection is cleared, and the winner is returned if the move completed a line.
        """
        from_position = validate_position(from_position)
        to_position = validate_position(to_position)
        self._assert_in_phase(Phase.MOVING)
        self._assert_own_piece(from_position)

        if not self.board.is_empty(to_position):
            raise OccupiedPositionError("Destination position is occupied")

        if to_position not in ADJACENCY[from_position]:
            raise NotAdjacentError()

        self.board.slide(from_position, to_position)
        self.selected_piece = None

        if self._check_winner():
            return self.winner

        self._switch_turn()
        return None

    # --- Internal helpers ---
    def _assert_in_phase(self, phase: Phase) -> None:
        # a finished game accepts no more actions, whatever phase it ended in
        if self.is_over:
            raise GameOverError()
        if self.phase != phase:
            raise InvalidPhaseError(f"Game is not in {phase.value} phase")

    def _assert_own_piece(self, position: Position) -> None:
        if self.board.mark(position) != self.current_player:
            raise NotYourPieceError()

    def _check_winner(self) -> bool:
        winner = self.board.winner()
        if winner is None:
            return False
        self.winner = winner
        return True

    def _switch_turn(self) -> None:
        self.current_player = self.current_player.opponent
