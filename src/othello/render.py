"""Plain-text projection of a game: the grid, the turn / score line and the game over text. Nothing in here changes state."""

from src.core.exceptions import GameStateError
from src.othello.board import Board
from src.othello.discs import DISC_TO_NOTATION, Disc
from src.othello.game import Game, Outcome
from src.othello.square import BOARD_DIMENSIONS, COLUMN_LETTERS, Square

EMPTY_CELL = "."
HINT_CELL = "*"

OUTCOME_TEXT: dict[Outcome, str] = {
    Outcome.BLACK_WINS: "Black wins!",
    Outcome.WHITE_WINS: "White wins!",
    Outcome.TIE: "It's a tie!",
}


def render_board(board: Board, hints: set[tuple[int, int]] | None = None) -> str:
    """Grid with column letters on top and row numbers on the left. Cells in `hints` are marked with a '*'."""
    hint_cells = hints or set()
    lines = ["  " + " ".join(COLUMN_LETTERS[: BOARD_DIMENSIONS[1]])]
    for row in range(BOARD_DIMENSIONS[0]):
        cells: list[str] = []
        for col in range(BOARD_DIMENSIONS[1]):
            disc = board.disc(Square(row, col))
            if disc != Disc.EMPTY:
                cells.append(DISC_TO_NOTATION[disc])
            elif (row, col) in hint_cells:
                cells.append(HINT_CELL)
            else:
                cells.append(EMPTY_CELL)
        lines.append(f"{row + 1} " + " ".join(cells))
    return "\n".join(lines)


def render_status(game: Game) -> str:
    if game.is_over:
        return render_game_over(game)
    black_count, white_count = game.score()
    return f"Turn: {game.current_player.name.capitalize()} | Black: {black_count} White: {white_count}"


def render_game_over(game: Game) -> str:
    """ex) '40 - 24. Black wins!'"""
    outcome = game.outcome
    if outcome is None:
        raise GameStateError("The game is still in progress, there is no result yet.")
    black_count, white_count = game.score()
    return f"{black_count} - {white_count}. {OUTCOME_TEXT[outcome]}"


def render_game(game: Game, show_hints: bool = True) -> str:
    hints = game.valid_moves() if show_hints else set()
    return f"{render_board(game.board, hints)}\n{render_status(game)}"
