"""
Text encoding of a position, modelled on chess FEN.

<board position string> <side to move>

* The board position lists the rows from top (row 0) to bottom (row 7), separated by slashes.
  "B" is a black disc, "W" a white disc, and a digit denotes that many consecutive empty cells.
* The side to move is either "b" or "w".

ex) The standard starting position:
8/8/8/3WB3/3BW3/8/8/8 b
"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.othello.discs import NOTATION_TO_DISC, Disc
from src.othello.square import BOARD_DIMENSIONS

STARTING_POSITION = "8/8/8/3WB3/3BW3/8/8/8"
STARTING_NOTATION = f"{STARTING_POSITION} b"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[0])

SIDE_TO_DISC: dict[str, Disc] = {"b": Disc.BLACK, "w": Disc.WHITE}
DISC_TO_SIDE: dict[Disc, str] = {value: key for key, value in SIDE_TO_DISC.items()}


def is_valid_notation(notation: str) -> bool:
    """Check if given string follows the notation described at the top of this module."""
    parts = notation.split(" ")
    if len(parts) != 2:
        return False

    position, side = parts
    return is_valid_position(position) and is_valid_side(side)


def is_valid_position(position: str) -> bool:
    """Only check the part of the encoding for the board position."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_notations = position.split("/")
    if len(row_notations) != num_rows:
        return False

    for row_notation in row_notations:
        col_count = 0
        for character in row_notation:
            if character.isdigit():
                col_count += int(character)
            elif character in NOTATION_TO_DISC:
                col_count += 1
            else:
                return False
        if col_count != num_cols:
            return False
    return True


def is_valid_side(side: str) -> bool:
    return side in SIDE_TO_DISC


@dataclass
class NotationState:
    """Position + side to move: everything needed to continue a game from a given point."""

    position: str
    player_to_move: Disc

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        if not is_valid_notation(notation):
            raise InvalidNotationError(f"Cannot parse board notation: {notation!r}")
        position, side = notation.split(" ")
        return cls(position, SIDE_TO_DISC[side])

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_notation(STARTING_NOTATION)

    def to_notation(self) -> str:
        return f"{self.position} {DISC_TO_SIDE[self.player_to_move]}"
