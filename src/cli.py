"""Play a game of Othello in the terminal. Two players share the keyboard."""

import argparse
from typing import Callable, Optional

from src.core.config import configure_logging
from src.core.exceptions import BoundsError, InvalidMoveError
from src.othello.game import Game
from src.othello.render import render_game
from src.othello.square import Square

HELP_TEXT = "Enter a move like 'd3', 'reset' to start over, or 'quit' to stop."
GAME_OVER_TEXT = "Type 'reset' to play again, or 'quit' to stop."

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_square(text: str) -> Optional[Square]:
    """'d3' -> Square(2, 3). Anything that does not look like a square gives None."""
    if len(text) != 2 or not text[0].isalpha() or not (text[1].isascii() and text[1].isdigit()):
        return None
    return Square.from_algebraic(text)


def play(
    game: Game,
    read: InputFn = input,
    write: OutputFn = print,
    show_hints: bool = True,
) -> Game:
    """Forward every line of input to the game until the player quits. A finished game stays on screen until it is reset."""
    write(render_game(game, show_hints))
    while True:
        try:
            text = read("> ").strip().lower()
        except EOFError:
            break

        if text in ("quit", "exit", "q"):
            break
        if text == "reset":
            game.reset()
            write(render_game(game, show_hints))
            continue

        square = parse_square(text)
        if square is None:
            write(HELP_TEXT)
            continue

        try:
            game.submit_move(square.row, square.col)
        except (InvalidMoveError, BoundsError):
            write(f"{text} is not a legal move.")
            continue

        write(render_game(game, show_hints))
        if game.is_over:
            write(GAME_OVER_TEXT)
    return game


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Two-player Othello in the terminal")
    parser.add_argument(
        "--position",
        default=None,
        help="Start from a position in board notation, e.g. '8/8/8/3WB3/3BW3/8/8/8 b'",
    )
    parser.add_argument(
        "--no-hints", action="store_true", help="Do not mark the legal moves on the board"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from OTHELLO_LOG_LEVEL)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    game = Game.new_game(args.position)
    print(HELP_TEXT)
    play(game, show_hints=not args.no_hints)


if __name__ == "__main__":
    main()
