"""
The Game class will be the entrypoint into the domain layer for the service layer (and any other front end).
It is responsible for orchestrating all the business logic required to play a turn of Othello -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import BoundsError, GameStateError, InvalidMoveError
from src.core.models import GameModel
from src.othello.board import Board
from src.othello.discs import Disc
from src.othello.notation import NotationState
from src.othello.square import Square

logger = logging.getLogger(__name__)

Coordinate = tuple[int, int]


class Status(Enum):
    IN_PROGRESS = auto()
    GAME_OVER = auto()


class Outcome(Enum):
    BLACK_WINS = auto()
    WHITE_WINS = auto()
    TIE = auto()


def determine_winner(black_count: int, white_count: int) -> Outcome:
    """Whoever has the most discs on the board wins."""
    if black_count > white_count:
        return Outcome.BLACK_WINS
    if white_count > black_count:
        return Outcome.WHITE_WINS
    return Outcome.TIE


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Disc
    status: Status

    @classmethod
    def new_game(cls, starting_notation: Optional[str] = None) -> Self:
        """Start from the standard position, or from a given one (whose side to move gets checked for a legal move first)."""
        state = (
            NotationState.from_notation(starting_notation)
            if starting_notation
            else NotationState.starting_position()
        )
        game = cls(
            board=Board.from_notation(state.position),
            current_player=state.player_to_move,
            status=Status.IN_PROGRESS,
        )
        if starting_notation:
            game._resolve_turn(state.player_to_move)
        logger.info("New game started from %s", game.to_notation())
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        player_name = model.current_player.upper()
        if player_name not in (Disc.BLACK.name, Disc.WHITE.name):
            raise GameStateError(f"Invalid player: {model.current_player!r}")

        return cls(
            board=Board.from_notation(model.position),
            current_player=Disc[player_name],
            status=Status[status_name],
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            position=self.board.to_notation(),
            current_player=self.current_player.name.lower(),
            status=self.status.name.lower().replace("_", " "),
        )

    def to_notation(self) -> str:
        return NotationState(self.board.to_notation(), self.current_player).to_notation()

    # --- QUERIES FOR THE PRESENTATION LAYER ---
    def cell(self, row: int, col: int) -> Disc:
        return self.board.disc(Square(row, col))

    @property
    def is_over(self) -> bool:
        return self.status == Status.GAME_OVER

    @property
    def outcome(self) -> Optional[Outcome]:
        """Only defined once the game has ended."""
        if not self.is_over:
            return None
        return determine_winner(*self.score())

    def score(self) -> tuple[int, int]:
        """(black count, white count). Always recomputed from the board."""
        return self.board.score()

    def valid_moves(self, player: Optional[Disc] = None) -> set[Coordinate]:
        """
        Moves the player (default: the player to move) can make, used to highlight cells in a front end.
        ----
        An ended game has no moves for anyone.
        """
        if self.is_over:
            return set()
        player = player or self.current_player
        return {(square.row, square.col) for square in self.board.valid_moves(player)}

    # --- COMMANDS ---
    def submit_move(self, row: int, col: int) -> None:
        """
        Attempt to make a move for the player whose turn it is
        -----

        1. reject if the game is over
        2. reject if the cell is out of bounds / occupied / captures nothing
        3. place disc + flip captured discs
        4. pass the turn to the opponent, unless they cannot move (then the same player moves again).
           If neither can move, the game is over.
        """
        if self.is_over:
            raise InvalidMoveError("Game is over. Reset to play again.")

        square = Square(row, col)
        if not square.is_within_bounds():
            raise BoundsError(f"({row}, {col}) is outside of the board.")

        player = self.current_player
        try:
            flipped = self.board.apply_move(square, player)
        except InvalidMoveError:
            logger.debug(
                "Rejected move %s for %s", square.to_algebraic(), player.name.lower()
            )
            raise

        logger.debug(
            "%s played %s, flipped %d disc(s)",
            player.name.lower(),
            square.to_algebraic(),
            len(flipped),
        )
        self._resolve_turn(player.opponent())

    def reset(self) -> None:
        """Back to the standard starting position, black to move."""
        self.board = Board.starting_position()
        self.current_player = Disc.BLACK
        self.status = Status.IN_PROGRESS
        logger.info("Game reset")

    # -- PRIVATE HELPERS ---
    def _resolve_turn(self, next_player: Disc) -> None:
        """
        Decide who is to move next.
        ---

        * next player has a legal move -> their turn
        * otherwise, the other player has a legal move -> next player is skipped
        * neither of them can move -> game over
        """
        other_player = next_player.opponent()
        if self.board.has_any_valid_move(next_player):
            self.current_player = next_player
        elif self.board.has_any_valid_move(other_player):
            logger.debug("%s has no legal move and passes", next_player.name.lower())
            self.current_player = other_player
        else:
            self.status = Status.GAME_OVER
            black_count, white_count = self.score()
            logger.info(
                "Game over: %d - %d, %s",
                black_count,
                white_count,
                determine_winner(black_count, white_count).name.lower(),
            )
