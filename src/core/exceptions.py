"""
Custom exceptions.

Every error a client can trigger derives from GameError, so the API layer only needs to know about the top-level
classes to decide on a status code. Each exception has a default message, which is what gets sent back to the client.
"""


class GameError(Exception):
    """Top-level exception for anything that went wrong while handling a game."""

    default_message = "Something went wrong with this game."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# --- Persistence ---
class RepositoryError(GameError):
    default_message = "Could not access the game store."


class GameNotFoundError(RepositoryError):
    default_message = "Game not found"


# --- Game state ---
class GameStateError(GameError):
    default_message = "Game is in an invalid state for this action."


class InvalidPhaseError(GameStateError):
    default_message = "Game is in the wrong phase for this action."


class GameOverError(GameStateError):
    default_message = "Game is already over"


# --- Move legality ---
class IllegalMoveError(GameError):
    default_message = "Move not allowed."


class OccupiedPositionError(IllegalMoveError):
    default_message = "Position already occupied"


class NotYourPieceError(IllegalMoveError):
    default_message = "Not your piece"


class NoValidMovesError(IllegalMoveError):
    default_message = "This piece has no valid moves"


class NotAdjacentError(IllegalMoveError):
    default_message = "Invalid move. Positions must be adjacent"


# --- Request validation ---
class InvalidRequestError(GameError):
    default_message = "Invalid request."


class InvalidPositionError(InvalidRequestError):
    default_message = "Position must be an integer between 0 and 8"
