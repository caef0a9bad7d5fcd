"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from src.db.sql_repository import GameModel, SQLGameRepository


@pytest.fixture
def new_game() -> GameModel:
    return GameModel(
        board=[None] * 9,
        current_player="X",
        phase="placing",
        pieces_placed={"X": 0, "O": 0},
    )


@pytest.fixture
def moving_game() -> GameModel:
    return GameModel(
        board=["X", "O", None, None, "O", None, "O", "X", "X"],
        current_player="X",
        phase="moving",
        pieces_placed={"X": 3, "O": 3},
        selected_piece=8,
        winner=None,
    )


def test_create_game(db_session_repo: Session, moving_game: GameModel) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(moving_game)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == moving_game


def test_get_game_by_id(db_session_repo: Session, moving_game: GameModel) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(moving_game)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session, new_game: GameModel) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(new_game)
    assert repo.get_game(uuid4()) is None


def test_update_game(
    db_session_repo: Session, new_game: GameModel, moving_game: GameModel
) -> None:
    """Update an earlier created record."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(new_game)

    updated_game = repo.update_game(game_id, moving_game)
    assert updated_game is not None
    assert updated_game == moving_game
    assert repo.get_game(game_id) == moving_game


def test_consecutive_game_updates(db_session_repo: Session, new_game: GameModel) -> None:
    """Tests that we can successfully make multiple updates to the same game (loosely simulate a real game)."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(new_game)

    first_update = GameModel(
        board=["X"] + [None] * 8,
        current_player="O",
        phase="placing",
        pieces_placed={"X": 1, "O": 0},
    )
    second_update = GameModel(
        board=["X", None, None, "O"] + [None] * 5,
        current_player="X",
        phase="placing",
        pieces_placed={"X": 1, "O": 1},
    )
    winning_update = GameModel(
        board=["X", "X", "X", "O", "O"] + [None] * 4,
        current_player="X",
        phase="placing",
        pieces_placed={"X": 3, "O": 2},
        winner="X",
    )

    repo.update_game(game_id, first_update)
    repo.update_game(game_id, second_update)
    repo.update_game(game_id, winning_update)

    after_all_updates = repo.get_game(game_id)
    assert after_all_updates is not None
    assert after_all_updates == winning_update
    assert after_all_updates.winner == "X"


def test_attempt_updating_unknown_game(db_session_repo: Session, new_game: GameModel) -> None:
    """the update_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), new_game) is None
