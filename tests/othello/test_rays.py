"""Unit tests for /src/othello/rays.py"""

import pytest

from src.othello.board import Board
from src.othello.discs import Disc
from src.othello.rays import (
    DIRECTIONS,
    RayOutcome,
    captured_squares,
    has_capture,
    scan_ray,
)
from src.othello.square import Square

STARTING_POSITION = "8/8/8/3WB3/3BW3/8/8/8"
# Black on a1, white b1, c1 empty, white d1 up to h1 (touching the edge)
EDGE_RUN_POSITION = "BW1WWWWW/8/8/8/8/8/8/8"
# White on g4, h4 (touching the edge), black on a5. Stepping east off h4 must NOT continue on a5.
WRAPAROUND_POSITION = "8/8/8/6WW/B7/8/8/8"
# Black placing on a1 captures along east, south, and south-east
THREE_WAY_POSITION = "1WB5/WW6/B1B5/8/8/8/8/8"


def test_eight_directions() -> None:
    assert len(DIRECTIONS) == 8
    assert len(set(DIRECTIONS)) == 8
    assert (0, 0) not in DIRECTIONS
    assert all(abs(d_row) <= 1 and abs(d_col) <= 1 for d_row, d_col in DIRECTIONS)


def test_capture_single_disc() -> None:
    """Black on d3 looking south: white d4, then black d5"""
    board = Board.from_notation(STARTING_POSITION)
    scan = scan_ray(Square(2, 3), (1, 0), board, Disc.BLACK)
    assert scan.outcome == RayOutcome.CAPTURE
    assert scan.is_capture
    assert scan.captured == [Square(3, 3)]


def test_empty_neighbour_is_invalid() -> None:
    board = Board.from_notation(STARTING_POSITION)
    scan = scan_ray(Square(2, 3), (0, 1), board, Disc.BLACK)
    assert scan.outcome == RayOutcome.INVALID
    assert scan.captured == []


def test_own_disc_without_opponent_run_is_invalid() -> None:
    """Black on e3 looking south immediately meets its own disc on e4"""
    board = Board.from_notation(STARTING_POSITION)
    scan = scan_ray(Square(2, 4), (1, 0), board, Disc.BLACK)
    assert scan.outcome == RayOutcome.INVALID


def test_opponent_run_then_empty_is_invalid() -> None:
    board = Board.from_notation("8/8/8/8/8/8/8/1WW5")
    scan = scan_ray(Square(7, 0), (0, 1), board, Disc.BLACK)
    assert scan.outcome == RayOutcome.INVALID
    assert scan.captured == []


def test_opponent_run_reaching_the_edge_is_invalid() -> None:
    """Opponent discs all the way up to the edge: no partial credit."""
    board = Board.from_notation(EDGE_RUN_POSITION)
    scan = scan_ray(Square(0, 2), (0, 1), board, Disc.BLACK)
    assert scan.outcome == RayOutcome.INVALID
    assert scan.captured == []

    # ... while the other direction does capture
    scan = scan_ray(Square(0, 2), (0, -1), board, Disc.BLACK)
    assert scan.captured == [Square(0, 1)]


def test_no_wraparound() -> None:
    board = Board.from_notation(WRAPAROUND_POSITION)
    scan = scan_ray(Square(3, 5), (0, 1), board, Disc.BLACK)
    assert scan.outcome == RayOutcome.INVALID
    assert not has_capture(Square(3, 5), board, Disc.BLACK)


def test_long_run_is_captured_in_order() -> None:
    board = Board.from_notation("1WWWWWWB/8/8/8/8/8/8/8")
    scan = scan_ray(Square(0, 0), (0, 1), board, Disc.BLACK)
    assert scan.captured == [Square(0, col) for col in range(1, 7)]


def test_captured_squares_all_directions() -> None:
    board = Board.from_notation(THREE_WAY_POSITION)
    captured = captured_squares(Square(0, 0), board, Disc.BLACK)
    assert captured == [Square(0, 1), Square(1, 0), Square(1, 1)]


@pytest.mark.parametrize(
    "square, expected",
    [
        (Square(2, 3), True),
        (Square(3, 2), True),
        (Square(4, 5), True),
        (Square(5, 4), True),
        (Square(2, 4), False),
        (Square(0, 0), False),
    ],
)
def test_has_capture_from_start(square: Square, expected: bool) -> None:
    board = Board.from_notation(STARTING_POSITION)
    assert has_capture(square, board, Disc.BLACK) == expected
