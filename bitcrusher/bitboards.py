"""Board geometry, enumerations and bitboard primitives.

Squares are indexed from A8 (0) to H1 (63), rank by rank, so the top rank of
the board lives in the least significant byte of a bitboard.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, IntEnum
from typing import NamedTuple

BOARD_DIMENSION = 8
SQUARE_COUNT = BOARD_DIMENSION * BOARD_DIMENSION
PIECE_COUNT_PER_SIDE = 6
EMPTY_BITBOARD = 0
FULL_BITBOARD = (1 << SQUARE_COUNT) - 1


class Color(IntEnum):
    WHITE = 0
    BLACK = 1


class File(IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7


class Rank(IntEnum):
    """Ranks, numbered from the top of the board (rank 8) downwards."""

    R_8 = 0
    R_7 = 1
    R_6 = 2
    R_5 = 3
    R_4 = 4
    R_3 = 5
    R_2 = 6
    R_1 = 7


_FILE_LETTERS = "ABCDEFGH"

Square = IntEnum(  # type: ignore[misc]
    "Square",
    [
        (f"{_FILE_LETTERS[index % BOARD_DIMENSION]}{BOARD_DIMENSION - index // BOARD_DIMENSION}", index)
        for index in range(SQUARE_COUNT)
    ],
    module=__name__,
    qualname="Square",
)
Square.__doc__ = "Board squares, A8 = 0 through H1 = 63."


class Direction(Enum):
    """Orthogonal directions; the value is the square index offset."""

    TOP = -BOARD_DIMENSION
    BOTTOM = BOARD_DIMENSION
    LEFT = -1
    RIGHT = 1


class PieceType(IntEnum):
    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    NONE = 6


class Piece(IntEnum):
    WHITE_PAWN = 0
    WHITE_KNIGHT = 1
    WHITE_BISHOP = 2
    WHITE_ROOK = 3
    WHITE_QUEEN = 4
    WHITE_KING = 5
    BLACK_PAWN = 6
    BLACK_KNIGHT = 7
    BLACK_BISHOP = 8
    BLACK_ROOK = 9
    BLACK_QUEEN = 10
    BLACK_KING = 11
    NONE = 12


class Side(Enum):
    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"


class Diagonal(IntEnum):
    """Diagonals running from the top-left to the bottom-right."""

    A1 = 0
    A2B1 = 1
    A3C1 = 2
    A4D1 = 3
    A5E1 = 4
    A6F1 = 5
    A7G1 = 6
    A8H1 = 7
    B8H2 = 8
    C8H3 = 9
    D8H4 = 10
    E8H5 = 11
    F8H6 = 12
    G8H7 = 13
    H8 = 14


class CounterDiagonal(IntEnum):
    """Diagonals running from the bottom-left to the top-right."""

    A8 = 0
    A7B8 = 1
    A6C8 = 2
    A5D8 = 3
    A4E8 = 4
    A3F8 = 5
    A2G8 = 6
    A1H8 = 7
    B1H7 = 8
    C1H6 = 9
    D1H5 = 10
    E1H4 = 11
    F1H3 = 12
    G1H2 = 13
    H1 = 14


DIAGONAL_COUNT = len(Diagonal)


class SquareChars(NamedTuple):
    file: str
    rank: str


_PIECE_CHARS = {
    Piece.WHITE_PAWN: "P",
    Piece.BLACK_PAWN: "p",
    Piece.WHITE_KNIGHT: "N",
    Piece.BLACK_KNIGHT: "n",
    Piece.WHITE_BISHOP: "B",
    Piece.BLACK_BISHOP: "b",
    Piece.WHITE_ROOK: "R",
    Piece.BLACK_ROOK: "r",
    Piece.WHITE_QUEEN: "Q",
    Piece.BLACK_QUEEN: "q",
    Piece.WHITE_KING: "K",
    Piece.BLACK_KING: "k",
    Piece.NONE: ".",
}

_PROMOTION_CHARS = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

_PROMOTION_PIECE_TYPES = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
}


# --- conversions -----------------------------------------------------------


def to_digit(c: str) -> int:
    """Return the numeric value of a single decimal digit character."""
    if len(c) != 1 or c not in "0123456789":
        raise ValueError(f"not a digit: {c!r}")
    return ord(c) - ord("0")


def to_square(file: File, rank: Rank) -> Square:
    return Square(rank * BOARD_DIMENSION + file)


def file_from_char(c: str) -> File:
    """Convert a lower-case file letter ('a'..'h') to a File."""
    if len(c) != 1 or c not in "abcdefgh":
        raise ValueError(f"not a file letter: {c!r}")
    return File(ord(c) - ord("a"))


def rank_from_char(c: str) -> Rank:
    """Convert a rank digit ('1'..'8') to a Rank."""
    try:
        return Rank(BOARD_DIMENSION - to_digit(c))
    except ValueError:
        raise ValueError(f"not a rank digit: {c!r}") from None


def square_bitboard(square: Square) -> int:
    return 1 << square


def squares_bitboard(*args: Square) -> int:
    """Bitboard with every given square set."""
    bitboard = EMPTY_BITBOARD
    for square in args:
        bitboard |= square_bitboard(square)
    return bitboard


def rank_of(square: Square) -> Rank:
    return Rank(square // BOARD_DIMENSION)


def file_of(square: Square) -> File:
    return File(square % BOARD_DIMENSION)


def opposite_color(color: Color) -> Color:
    return Color.BLACK if color is Color.WHITE else Color.WHITE


def direction_delta(direction: Direction) -> int:
    """Square index offset of one step towards ``direction``."""
    return direction.value


def diagonal_of(square: Square) -> Diagonal:
    return Diagonal(file_of(square) - rank_of(square) + BOARD_DIMENSION - 1)


def counter_diagonal_of(square: Square) -> CounterDiagonal:
    return CounterDiagonal(file_of(square) + rank_of(square))


def rank_char(rank: Rank) -> str:
    return str(BOARD_DIMENSION - rank)


def file_char(file: File) -> str:
    return _FILE_LETTERS[file].lower()


def piece_char(piece: Piece) -> str:
    return _PIECE_CHARS[piece]


def promotion_uci(piece_type: PieceType) -> str:
    """UCI suffix letter for a promotion piece."""
    try:
        return _PROMOTION_CHARS[piece_type]
    except KeyError:
        raise ValueError(f"{piece_type.name} is not a promotion piece") from None


def promotion_piece_type(c: str) -> PieceType:
    """Piece type named by a UCI promotion letter."""
    try:
        return _PROMOTION_PIECE_TYPES[c]
    except KeyError:
        raise ValueError(f"unknown promotion letter: {c!r}") from None


def square_chars(square: Square) -> SquareChars:
    return SquareChars(file_char(file_of(square)), rank_char(rank_of(square)))


def to_piece(color: Color, piece_type: PieceType) -> Piece:
    if piece_type is PieceType.NONE:
        return Piece.NONE
    return Piece(piece_type + PIECE_COUNT_PER_SIDE * (color is Color.BLACK))


def file_mask(file: File) -> int:
    return squares_bitboard(*(to_square(file, rank) for rank in Rank))


def rank_mask(rank: Rank) -> int:
    return squares_bitboard(*(to_square(file, rank) for file in File))


_NOT_FILE_A = FULL_BITBOARD & ~file_mask(File.A)
_NOT_FILE_H = FULL_BITBOARD & ~file_mask(File.H)


# --- bitboard utilities ----------------------------------------------------


def is_square_set(bitboard: int, square: Square) -> bool:
    return bitboard & square_bitboard(square) != 0


def set_square(bitboard: int, square: Square) -> int:
    return bitboard | square_bitboard(square)


def clear_square(bitboard: int, square: Square) -> int:
    return bitboard & ~square_bitboard(square) & FULL_BITBOARD


def first_set_square(bitboard: int) -> Square:
    """Lowest-index set square of a non-empty bitboard."""
    if bitboard & FULL_BITBOARD == 0:
        raise ValueError("bitboard is empty")
    return Square((bitboard & -bitboard).bit_length() - 1)


def pop_first_set_square(bitboard: int) -> tuple[Square, int]:
    """Return the lowest set square and the bitboard without it."""
    square = first_set_square(bitboard)
    return square, bitboard & (bitboard - 1)


def toggle_squares(bitboard: int, source: Square, destination: Square) -> int:
    """Flip the source and destination bits, as when a piece moves."""
    return bitboard ^ (square_bitboard(source) | square_bitboard(destination))


def shift(bitboard: int, direction: Direction) -> int:
    """Shift one step towards ``direction`` without guarding file edges."""
    if direction is Direction.TOP:
        return bitboard >> BOARD_DIMENSION
    if direction is Direction.BOTTOM:
        return (bitboard << BOARD_DIMENSION) & FULL_BITBOARD
    if direction is Direction.LEFT:
        return bitboard >> 1
    return (bitboard << 1) & FULL_BITBOARD


def shift_no_wrap(bitboard: int, *args: Direction) -> int:
    """Shift step by step through each direction, dropping bits that leave the board."""
    for direction in args:
        if direction is Direction.LEFT:
            bitboard &= _NOT_FILE_A
        elif direction is Direction.RIGHT:
            bitboard &= _NOT_FILE_H
        bitboard = shift(bitboard, direction)
    return bitboard


def iter_squares(bitboard: int) -> Iterator[Square]:
    """Yield the set squares from lowest to highest index."""
    bitboard &= FULL_BITBOARD
    while bitboard:
        square, bitboard = pop_first_set_square(bitboard)
        yield square


def format_bitboard(bitboard: int, message: str = "") -> str:
    """Render a bitboard as a grid of 0/1 with rank and file labels."""
    lines = []
    if message:
        lines.append(f"{message}\n")
    lines.append("\n")
    for rank in Rank:
        cells = "".join(
            f"{int(is_square_set(bitboard, to_square(file, rank)))} " for file in File
        )
        lines.append(f"r{rank_char(rank)} {cells}\n")
    lines.append("\n   a b c d e f g h\n")
    lines.append(f"Bitboard value: {bitboard}\n \n")
    return "".join(lines)