"""The Board implements all rules that affect the `position` (the configuration of discs on the 8x8 grid)"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import BoundsError, InvalidMoveError, InvalidNotationError
from src.othello.discs import DISC_TO_NOTATION, NOTATION_TO_DISC, Disc
from src.othello.notation import EMPTY_POSITION, STARTING_POSITION, is_valid_position
from src.othello.rays import captured_squares, has_capture
from src.othello.square import BOARD_DIMENSIONS, Square, all_squares


@dataclass
class Board:
    position: dict[Square, Disc]

    @classmethod
    def from_notation(cls, position_str: str) -> Self:
        """Construct a board from the position part of the notation (see src/othello/notation.py)

        ex. standard starting position:
        8/8/8/3WB3/3BW3/8/8/8
        means:
        * rows 0, 1, 2 and 5, 6, 7 are empty
        * row 3 has a white disc on d4 and a black disc on e4
        * row 4 has a black disc on d5 and a white disc on e5
        """
        if not is_valid_position(position_str):
            raise InvalidNotationError(f"Cannot parse board position: {position_str!r}")

        position: dict[Square, Disc] = {}
        for row, row_notation in enumerate(position_str.split("/")):
            col = 0
            for character in row_notation:
                if character in NOTATION_TO_DISC:
                    position[Square(row, col)] = NOTATION_TO_DISC[character]
                    col += 1
                else:
                    # A number denotes the amount of empty cells after each other
                    for _ in range(int(character)):
                        position[Square(row, col)] = Disc.EMPTY
                        col += 1
        return cls(position)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_notation(STARTING_POSITION)

    @classmethod
    def empty(cls) -> Self:
        return cls.from_notation(EMPTY_POSITION)

    def to_notation(self) -> str:
        """Rows are separated by slashes."""
        return "/".join(self._row_to_notation(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            disc = self.disc(Square(row, col))
            if disc == Disc.EMPTY:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(DISC_TO_NOTATION[disc])

        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    # --- CELL ACCESS ---
    def disc(self, square: Square) -> Disc:
        self._assert_within_bounds(square)
        return self.position[square]

    def place_disc(self, disc: Disc, square: Square) -> None:
        """Put a disc on the board without applying any rules (used for setting up positions)."""
        self._assert_within_bounds(square)
        self.position[square] = disc

    def is_empty(self, square: Square) -> bool:
        return self.disc(square) == Disc.EMPTY

    def is_full(self) -> bool:
        return all(disc != Disc.EMPTY for disc in self.position.values())

    # --- RULES ---
    def is_valid_move(self, square: Square, player: Disc) -> bool:
        """The cell must be empty and placing a disc there must capture along at least one of the 8 directions."""
        if not self.is_empty(square):
            return False
        return has_capture(square, self, player)

    def apply_move(self, square: Square, player: Disc) -> list[Square]:
        """Place the disc and flip every captured run. Returns the squares that got flipped.

        NOTE the board is left untouched when the move is not valid.
        """
        if not self.is_empty(square):
            raise InvalidMoveError(f"Square {square.to_algebraic()} is already occupied.")

        flips = captured_squares(square, self, player)
        if not flips:
            raise InvalidMoveError(
                f"Placing a disc on {square.to_algebraic()} does not capture anything."
            )

        self.position[square] = player
        for flipped_square in flips:
            self.position[flipped_square] = player
        return flips

    def valid_moves(self, player: Disc) -> set[Square]:
        return {square for square in all_squares() if self.is_valid_move(square, player)}

    def has_any_valid_move(self, player: Disc) -> bool:
        return any(self.is_valid_move(square, player) for square in all_squares())

    # --- SCORE ---
    def count_discs(self) -> dict[Disc, int]:
        """Tally every kind of cell, including the empty ones."""
        counts = {disc: 0 for disc in Disc}
        for disc in self.position.values():
            counts[disc] += 1
        return counts

    def score(self) -> tuple[int, int]:
        """(black count, white count)"""
        counts = self.count_discs()
        return counts[Disc.BLACK], counts[Disc.WHITE]

    def locate_discs(self, player: Disc) -> list[Square]:
        return [square for square, disc in self.position.items() if disc == player]

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise BoundsError(f"Square {square} is outside of the board.")
