"""HTTP endpoints. Thin: parse the request, call the service, let the exception handlers deal with failures."""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.dependencies import get_service
from src.api.models import (
    ErrorResponse,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    PlaceRequest,
    SelectRequest,
    SelectResponse,
    StartGameResponse,
)
from src.core.exceptions import GameError, GameNotFoundError
from src.services.morris_service import MorrisService

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Action not allowed"},
    404: {"model": ErrorResponse, "description": "Game not found"},
}


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/start3", response_model=StartGameResponse)
def start_game(service: MorrisService = Depends(get_service)):
    """Start a new game"""
    return service.start_game()


@router.get(
    "/game/{game_id}",
    response_model=GameResponse,
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
)
def get_game(game_id: str, service: MorrisService = Depends(get_service)):
    """Get current game state"""
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.post(
    "/place",
    response_model=GameResponse,
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
)
def place(request: PlaceRequest, service: MorrisService = Depends(get_service)):
    """Place a piece (placing phase)"""
    return service.place_piece(request)


@router.post("/select", response_model=SelectResponse, responses=ERROR_RESPONSES)
def select(request: SelectRequest, service: MorrisService = Depends(get_service)):
    """Select a piece to move (first part of a turn in the moving phase)"""
    return service.select_piece(request)


@router.post(
    "/move3",
    response_model=GameResponse,
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
)
def move(request: MoveRequest, service: MorrisService = Depends(get_service)):
    """Move a piece (second part of a turn in the moving phase)"""
    return service.move_piece(request)


# --- Error handling ---
def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    status_code = 404 if isinstance(exc, GameNotFoundError) else 400
    logger.info(
        "Rejected %s %s (%s): %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc.message,
    )
    return _error(status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies get the same {error} shape as every other rejected request."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info("Invalid request %s %s: %s", request.method, request.url.path, details)
    return _error(400, f"Invalid request. {details}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameError, game_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
