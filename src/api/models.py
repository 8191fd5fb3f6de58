"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Outcome, Player, Status
from src.othello.notation import is_valid_notation
from src.othello.square import Square


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_position: Optional[str] = None

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        if not is_valid_notation(value.strip()):
            raise InvalidRequestError(
                f"Cannot interpret starting_position: {value!r} as board notation."
            )
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        def _is_algebraic_notation(value: str) -> bool:
            if len(value) != 2:
                return False

            first_character = value[0]
            second_character = value[1]
            if not (
                first_character.isalpha()
                and second_character.isascii()
                and second_character.isdigit()
            ):
                return False
            return Square.from_algebraic(value).is_within_bounds()

        value = value.strip().lower()
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    position: str
    current_player: Player
    status: Status
    score: dict[Player, int]
    outcome: Optional[Outcome]
    valid_moves: list[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player: Player
    legal_moves: list[str]
