"""Precomputed diagonal and counter-diagonal bitboards."""

from __future__ import annotations

from .bitboards import (
    CounterDiagonal,
    Diagonal,
    Direction,
    Square,
    counter_diagonal_of,
    diagonal_of,
    shift_no_wrap,
    squares_bitboard,
)

_BOTTOM_DIAGONALS = (
    Diagonal.A7G1,
    Diagonal.A6F1,
    Diagonal.A5E1,
    Diagonal.A4D1,
    Diagonal.A3C1,
    Diagonal.A2B1,
    Diagonal.A1,
)

_RIGHT_DIAGONALS = (
    Diagonal.B8H2,
    Diagonal.C8H3,
    Diagonal.D8H4,
    Diagonal.E8H5,
    Diagonal.F8H6,
    Diagonal.G8H7,
    Diagonal.H8,
)

_TOP_COUNTER_DIAGONALS = (
    CounterDiagonal.A2G8,
    CounterDiagonal.A3F8,
    CounterDiagonal.A4E8,
    CounterDiagonal.A5D8,
    CounterDiagonal.A6C8,
    CounterDiagonal.A7B8,
    CounterDiagonal.A8,
)

_RIGHT_COUNTER_DIAGONALS = (
    CounterDiagonal.B1H7,
    CounterDiagonal.C1H6,
    CounterDiagonal.D1H5,
    CounterDiagonal.E1H4,
    CounterDiagonal.F1H3,
    CounterDiagonal.G1H2,
    CounterDiagonal.H1,
)


def _fill_by_shifting(table: dict, start: int, keys: tuple, direction: Direction) -> None:
    previous = start
    for key in keys:
        previous = shift_no_wrap(previous, direction)
        table[key] = previous


def _build_diagonals() -> dict[Diagonal, int]:
    main = squares_bitboard(
        Square.A8, Square.B7, Square.C6, Square.D5, Square.E4, Square.F3, Square.G2, Square.H1
    )
    table = {Diagonal.A8H1: main}
    _fill_by_shifting(table, main, _BOTTOM_DIAGONALS, Direction.BOTTOM)
    _fill_by_shifting(table, main, _RIGHT_DIAGONALS, Direction.RIGHT)
    return table


def _build_counter_diagonals() -> dict[CounterDiagonal, int]:
    main = squares_bitboard(
        Square.A1, Square.B2, Square.C3, Square.D4, Square.E5, Square.F6, Square.G7, Square.H8
    )
    table = {CounterDiagonal.A1H8: main}
    _fill_by_shifting(table, main, _TOP_COUNTER_DIAGONALS, Direction.TOP)
    _fill_by_shifting(table, main, _RIGHT_COUNTER_DIAGONALS, Direction.RIGHT)
    return table


_DIAGONAL_BITBOARDS = _build_diagonals()
_COUNTER_DIAGONAL_BITBOARDS = _build_counter_diagonals()
_SQUARE_TO_DIAGONAL = {sq: _DIAGONAL_BITBOARDS[diagonal_of(sq)] for sq in Square}
_SQUARE_TO_COUNTER_DIAGONAL = {
    sq: _COUNTER_DIAGONAL_BITBOARDS[counter_diagonal_of(sq)] for sq in Square
}


def diagonal_bitboard(diagonal: Diagonal) -> int:
    return _DIAGONAL_BITBOARDS[diagonal]


def counter_diagonal_bitboard(counter_diagonal: CounterDiagonal) -> int:
    return _COUNTER_DIAGONAL_BITBOARDS[counter_diagonal]


def square_diagonal_mask(square: Square) -> int:
    """Bitboard of the whole diagonal the square lies on."""
    return _SQUARE_TO_DIAGONAL[square]


def square_counter_diagonal_mask(square: Square) -> int:
    """Bitboard of the whole counter-diagonal the square lies on."""
    return _SQUARE_TO_COUNTER_DIAGONAL[square]