"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    GameResponse,
    GameState,
    GetGameRequest,
    MoveRequest,
    PlaceRequest,
    SelectRequest,
    SelectResponse,
    StartGameResponse,
)
from src.core.exceptions import GameNotFoundError
from src.core.models import GameModel
from src.core.shared_types import Player
from src.db.repository import GameRepository
from src.morris.game import Game

logger = logging.getLogger(__name__)


class MorrisService:
    """Orchestration of layers for three men's morris."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def start_game(self) -> StartGameResponse:
        """A player requested a new game."""

        # Create a new Game and convert into GameModel
        new_game = Game.new_game()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Started game %s", game_id)

        return StartGameResponse(
            game_id=game_id, game=self._create_game_state(stored_game)
        )

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        _, game_model = self._fetch_game(request.game_id)
        return GameResponse(game=self._create_game_state(game_model))

    def place_piece(self, request: PlaceRequest) -> GameResponse:
        """Place a piece for the player whose turn it is (placing phase)."""

        # Retrieve persisted GameModel from repository, and rebuild the Game
        game_id, stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)
        player = game.current_player

        # Attempt the placement
        winner = game.place(request.position)
        logger.debug("Game %s: %s placed on %s", game_id, player, request.position)

        # Capture updated state in GameModel and store in repository
        after_place = game.to_model()
        self.repo.update_game(game_id, after_place)

        return self._create_game_response(game_id, after_place, winner)

    def select_piece(self, request: SelectRequest) -> SelectResponse:
        """Select a piece to move (first half of a turn in the moving phase)."""

        game_id, stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        valid_moves = game.select(request.position)
        logger.debug(
            "Game %s: %s selected %s, can move to %s",
            game_id,
            game.current_player,
            request.position,
            valid_moves,
        )

        after_select = game.to_model()
        self.repo.update_game(game_id, after_select)

        return SelectResponse(
            game=self._create_game_state(after_select), valid_moves=valid_moves
        )

    def move_piece(self, request: MoveRequest) -> GameResponse:
        """Move a piece to an adjacent empty position (second half of a turn in the moving phase)."""

        game_id, stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)
        player = game.current_player

        winner = game.move(request.from_position, request.to_position)
        logger.debug(
            "Game %s: %s moved %s -> %s",
            game_id,
            player,
            request.from_position,
            request.to_position,
        )

        after_move = game.to_model()
        self.repo.update_game(game_id, after_move)

        return self._create_game_response(game_id, after_move, winner)

    # -- Internal helpers --
    def _create_game_response(
        self, game_id: UUID, model: GameModel, winner: Player | None
    ) -> GameResponse:
        """Only the request that decided the game carries a message."""
        state = self._create_game_state(model)
        if winner is None:
            return GameResponse(game=state)

        logger.info("Game %s won by %s", game_id, winner)
        return GameResponse(game=state, message=f"{winner.value} wins!")

    def _create_game_state(self, model: GameModel) -> GameState:
        """Convert info in GameModel to the `game` part of a response."""
        return GameState(
            board=model.board,
            current_player=model.current_player,
            phase=model.phase,
            pieces_placed=model.pieces_placed,
            selected_piece=model.selected_piece,
            winner=model.winner,
        )

    def _fetch_game(self, raw_game_id: str) -> tuple[UUID, GameModel]:
        """Attempt to find the game in the repository and raise error if it fails. A malformed ID cannot be found either."""
        try:
            game_id = UUID(str(raw_game_id))
        except ValueError as e:
            raise GameNotFoundError() from e

        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError()
        return game_id, game_model
