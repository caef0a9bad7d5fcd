"""FastAPI dependencies: hand every request a MorrisService backed by the configured game store."""

from typing import Generator

from fastapi import Depends, Request

from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.morris_service import MorrisService


def get_repository(request: Request) -> Generator[GameRepository, None, None]:
    """
    The in-memory store is shared by all requests.
    The SQL store gets a fresh session per request, closed once the response is sent.
    """
    state = request.app.state
    if state.settings.game_store == "memory":
        yield state.repository
        return

    db = state.session_factory()
    try:
        yield SQLGameRepository(db)
    finally:
        db.close()


def get_service(repository: GameRepository = Depends(get_repository)) -> MorrisService:
    return MorrisService(repository)
