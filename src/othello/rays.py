"""
Geometry of a move: walking rays out from the square where a disc gets placed.

Both the legality check and the flipping of discs are built on the same `scan_ray` primitive,
so the edge conditions of the walk live in exactly one place.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from src.othello.discs import Disc
from src.othello.square import Square


class Board(Protocol):
    """Just the part of the board a ray scan needs"""

    def disc(self, square: Square) -> Disc: ...


Vector = tuple[int, int]

# The 8 compass directions as (d_row, d_col)
DIRECTIONS: list[Vector] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


class RayOutcome(Enum):
    INVALID = auto()
    CAPTURE = auto()


@dataclass(frozen=True)
class RayScan:
    """Classification of one direction: either nothing happens, or the listed opponent discs get flipped."""

    outcome: RayOutcome
    captured: list[Square] = field(default_factory=list)

    @property
    def is_capture(self) -> bool:
        return self.outcome == RayOutcome.CAPTURE


NO_CAPTURE = RayScan(RayOutcome.INVALID)


def scan_ray(start: Square, direction: Vector, board: Board, player: Disc) -> RayScan:
    """
    Raycasting algorithm
    -----

    Walk away from `start` (not included) one step at a time along `direction`:

    * opponent disc: remember it, keep walking.
    * own disc: if at least one opponent disc was seen, the run in between is captured. Otherwise nothing to capture.
    * empty cell or the edge of the board: nothing to capture, no matter how many opponent discs were seen.

    NOTE running off the board is never wrapped around to the next row.
    """
    opponent = player.opponent()
    d_row, d_col = direction

    run: list[Square] = []
    square = start.shifted(d_row, d_col)
    while square.is_within_bounds():
        disc = board.disc(square)
        if disc == opponent:
            run.append(square)
        elif disc == player:
            return RayScan(RayOutcome.CAPTURE, run) if run else NO_CAPTURE
        else:
            return NO_CAPTURE
        square = square.shifted(d_row, d_col)
    return NO_CAPTURE


def captured_squares(start: Square, board: Board, player: Disc) -> list[Square]:
    """All opponent discs that flip when `player` places a disc on `start`.

    Every direction is scanned on the board as it is before the move, so they do not influence each other.
    """
    captured: list[Square] = []
    for direction in DIRECTIONS:
        scan = scan_ray(start, direction, board, player)
        if scan.is_capture:
            captured.extend(scan.captured)
    return captured


def has_capture(start: Square, board: Board, player: Disc) -> bool:
    """Stops at the first capturing direction (cheaper than collecting all captures)."""
    return any(
        scan_ray(start, direction, board, player).is_capture for direction in DIRECTIONS
    )
