"""Unit tests for /src/othello/square.py"""

import pytest

from src.othello.square import BOARD_DIMENSIONS, COLUMN_LETTERS, Square, all_squares


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{COLUMN_LETTERS[col]}{row + 1}")
        for row in range(8)
        for col in range(8)
    ],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """The letter picks the column, the number the row: 'a1' is the top left corner"""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col
    assert square.to_algebraic() == notation


def test_standard_opening_moves_in_algebraic_notation() -> None:
    """The four opening moves for black are usually written as d3, c4, f5, e6"""
    assert Square.from_algebraic("d3") == Square(2, 3)
    assert Square.from_algebraic("c4") == Square(3, 2)
    assert Square.from_algebraic("f5") == Square(4, 5)
    assert Square.from_algebraic("e6") == Square(5, 4)


def test_upper_case_column_letter() -> None:
    assert Square.from_algebraic("D3") == Square(2, 3)


def test_square_within_bounds() -> None:
    """happy case: all squares of the 8x8 grid"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)])
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_shifted() -> None:
    assert Square(3, 3).shifted(-1, 1) == Square(2, 4)
    assert not Square(0, 7).shifted(0, 1).is_within_bounds()


def test_all_squares() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert len(set(squares)) == 64
    assert squares[0] == Square(0, 0)
    assert squares[-1] == Square(7, 7)
