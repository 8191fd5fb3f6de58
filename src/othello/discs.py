"""Defines what a single cell on the board can hold"""

from enum import Enum, auto
from typing import Self


class Disc(Enum):
    EMPTY = auto()
    BLACK = auto()
    WHITE = auto()

    def opponent(self) -> Self:
        """The other player's color. An empty cell has no opponent."""
        if self == Disc.EMPTY:
            raise ValueError("An empty cell does not belong to a player.")
        return Disc.WHITE if self == Disc.BLACK else Disc.BLACK

    @property
    def is_player(self) -> bool:
        return self != Disc.EMPTY


PLAYERS: tuple[Disc, Disc] = (Disc.BLACK, Disc.WHITE)

NOTATION_TO_DISC: dict[str, Disc] = {
    "B": Disc.BLACK,
    "W": Disc.WHITE,
}

DISC_TO_NOTATION: dict[Disc, str] = {
    value: key for key, value in NOTATION_TO_DISC.items()
}
