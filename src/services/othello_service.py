"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

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
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Outcome, Player, Status
from src.db.repository import GameRepository
from src.othello.game import Game
from src.othello.square import Square

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for an Othello game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Create a new game, either from the standard position or the requested one."""

        new_game = Game.new_game(request.starting_position)
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to re-render the board.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Moves available to the player whose turn it is (used for move hints)."""

        game = Game.from_model(self._fetch_game(request.game_id))
        return LegalMovesResponse(
            game_id=request.game_id,
            player=Player[game.current_player.name],
            legal_moves=self._to_algebraic(game.valid_moves()),
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. An illegal move raises before anything gets stored."""

        game = Game.from_model(self._fetch_game(request.game_id))

        square = Square.from_algebraic(request.square)
        game.submit_move(square.row, square.col)

        after_move = game.to_model()
        self.repo.update_game(request.game_id, after_move)
        return self._create_game_response(request.game_id, game)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Start over (same game ID) from the standard position."""

        game = Game.from_model(self._fetch_game(request.game_id))
        game.reset()
        self.repo.update_game(request.game_id, game.to_model())
        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the state of the Game into a GameResponse (for game with given ID.)"""
        black_count, white_count = game.score()
        outcome = game.outcome
        return GameResponse(
            game_id=game_id,
            position=game.board.to_notation(),
            current_player=Player[game.current_player.name],
            status=Status[game.status.name],
            score={Player.BLACK: black_count, Player.WHITE: white_count},
            outcome=Outcome[outcome.name] if outcome else None,
            valid_moves=self._to_algebraic(game.valid_moves()),
        )

    def _to_algebraic(self, moves: set[tuple[int, int]]) -> list[str]:
        """Sorted row by row, so responses are stable."""
        return [Square(row, col).to_algebraic() for row, col in sorted(moves)]

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
