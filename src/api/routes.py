"""HTTP routes. Thin: parse the request, call the service, translate domain errors into status codes."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    ResetGameRequest,
)
from src.core.exceptions import (
    BoundsError,
    GameError,
    GameStateError,
    InvalidMoveError,
    InvalidNotationError,
    InvalidRequestError,
    RepositoryError,
)
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.othello_service import OthelloService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])

# Most specific class wins (looked up along the exception's MRO)
ERROR_STATUS_CODES: dict[type[GameError], int] = {
    InvalidMoveError: 400,
    BoundsError: 400,
    RepositoryError: 404,
    InvalidRequestError: 422,
    InvalidNotationError: 422,
    GameStateError: 500,
}


class SquareBody(BaseModel):
    square: str


def get_service(db: Session = Depends(get_db)) -> OthelloService:
    return OthelloService(SQLGameRepository(db))


@router.post("", response_model=GameResponse, status_code=201)
def create_game(
    body: Optional[CreateGameRequest] = None,
    service: OthelloService = Depends(get_service),
) -> GameResponse:
    return service.create_new_game(body or CreateGameRequest())


@router.get("/{game_id}", response_model=GameResponse)
def get_game(game_id: UUID, service: OthelloService = Depends(get_service)) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.get("/{game_id}/moves", response_model=LegalMovesResponse)
def get_legal_moves(
    game_id: UUID, service: OthelloService = Depends(get_service)
) -> LegalMovesResponse:
    return service.legal_moves(LegalMovesRequest(game_id=game_id))


@router.post("/{game_id}/moves", response_model=GameResponse)
def make_move(
    game_id: UUID, body: SquareBody, service: OthelloService = Depends(get_service)
) -> GameResponse:
    return service.make_move(MoveRequest(game_id=game_id, square=body.square))


@router.post("/{game_id}/reset", response_model=GameResponse)
def reset_game(game_id: UUID, service: OthelloService = Depends(get_service)) -> GameResponse:
    return service.reset_game(ResetGameRequest(game_id=game_id))


@router.delete("/{game_id}", status_code=204)
def delete_game(game_id: UUID, service: OthelloService = Depends(get_service)) -> None:
    service.delete_game(DeleteGameRequest(game_id=game_id))


def status_code_for(exc: GameError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return 500


async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected (%d): %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameError, game_error_handler)
