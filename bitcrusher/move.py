"""Moves, their UCI notation and a bounded move list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .bitboards import (
    Color,
    PieceType,
    Side,
    Square,
    promotion_uci,
    square_chars,
)

MAX_LEGAL_MOVES = 256


class MoveType(Enum):
    QUIET = 0
    DOUBLE_PAWN_PUSH = 1
    KINGSIDE_CASTLE = 2
    QUEENSIDE_CASTLE = 3
    CAPTURE = 4
    EN_PASSANT = 5
    PROMOTION = 6
    PROMOTION_CAPTURE = 7
    NULL_MOVE = 8


_CASTLING_SQUARES = {
    (Color.WHITE, Side.KINGSIDE): (Square.E1, Square.G1, MoveType.KINGSIDE_CASTLE),
    (Color.WHITE, Side.QUEENSIDE): (Square.E1, Square.C1, MoveType.QUEENSIDE_CASTLE),
    (Color.BLACK, Side.KINGSIDE): (Square.E8, Square.G8, MoveType.KINGSIDE_CASTLE),
    (Color.BLACK, Side.QUEENSIDE): (Square.E8, Square.C8, MoveType.QUEENSIDE_CASTLE),
}


@dataclass(frozen=True)
class Move:
    """A move. For promotions ``moving_piece`` is the piece promoted to."""

    from_square: Square
    to_square: Square
    moving_piece: PieceType
    flag: MoveType
    captured_piece: PieceType = PieceType.NONE

    @classmethod
    def quiet(cls, from_square: Square, to_square: Square, moving_piece: PieceType) -> Move:
        return cls(from_square, to_square, moving_piece, MoveType.QUIET)

    @classmethod
    def double_pawn_push(cls, from_square: Square, to_square: Square) -> Move:
        return cls(from_square, to_square, PieceType.PAWN, MoveType.DOUBLE_PAWN_PUSH)

    @classmethod
    def castling(cls, color: Color, side: Side) -> Move:
        from_square, to_square, flag = _CASTLING_SQUARES[(color, side)]
        return cls(from_square, to_square, PieceType.KING, flag)

    @classmethod
    def capture(
        cls,
        from_square: Square,
        to_square: Square,
        moving_piece: PieceType,
        captured_piece: PieceType,
    ) -> Move:
        return cls(from_square, to_square, moving_piece, MoveType.CAPTURE, captured_piece)

    @classmethod
    def en_passant(cls, from_square: Square, to_square: Square) -> Move:
        return cls(from_square, to_square, PieceType.PAWN, MoveType.EN_PASSANT, PieceType.PAWN)

    @classmethod
    def promotion(cls, from_square: Square, to_square: Square, promoted_to: PieceType) -> Move:
        return cls(from_square, to_square, promoted_to, MoveType.PROMOTION)

    @classmethod
    def promotion_capture(
        cls,
        from_square: Square,
        to_square: Square,
        promoted_to: PieceType,
        captured_piece: PieceType,
    ) -> Move:
        return cls(from_square, to_square, promoted_to, MoveType.PROMOTION_CAPTURE, captured_piece)

    @classmethod
    def none(cls) -> Move:
        """The null move."""
        return cls(Square.A1, Square.A1, PieceType.NONE, MoveType.NULL_MOVE, PieceType.NONE)

    @property
    def promotion_piece(self) -> PieceType:
        return self.moving_piece

    def is_quiet(self) -> bool:
        return self.flag is MoveType.QUIET

    def is_en_passant(self) -> bool:
        return self.flag is MoveType.EN_PASSANT

    def is_capture(self) -> bool:
        return self.flag in (MoveType.CAPTURE, MoveType.PROMOTION_CAPTURE, MoveType.EN_PASSANT)

    def is_promotion(self) -> bool:
        return self.flag in (MoveType.PROMOTION, MoveType.PROMOTION_CAPTURE)

    def is_promotion_capture(self) -> bool:
        return self.flag is MoveType.PROMOTION_CAPTURE

    def is_pawn_double_push(self) -> bool:
        return self.flag is MoveType.DOUBLE_PAWN_PUSH

    def is_kingside_castle(self) -> bool:
        return self.flag is MoveType.KINGSIDE_CASTLE

    def is_queenside_castle(self) -> bool:
        return self.flag is MoveType.QUEENSIDE_CASTLE

    def is_null_move(self) -> bool:
        return self.flag is MoveType.NULL_MOVE


def to_uci(move: Move) -> str:
    """Long algebraic notation, e.g. ``e2e4`` or ``e7e8q``."""
    origin = square_chars(move.from_square)
    target = square_chars(move.to_square)
    text = f"{origin.file}{origin.rank}{target.file}{target.rank}"
    if move.is_promotion():
        text += promotion_uci(move.moving_piece)
    return text


class MoveList:
    """Collects generated moves, holding at most ``MAX_LEGAL_MOVES``."""

    def __init__(self) -> None:
        self._moves: list[Move] = []

    def append(self, move: Move) -> None:
        if len(self._moves) >= MAX_LEGAL_MOVES:
            raise OverflowError(f"move list holds at most {MAX_LEGAL_MOVES} moves")
        self._moves.append(move)

    def clear(self) -> None:
        self._moves.clear()

    def empty(self) -> bool:
        return not self._moves

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index):
        return self._moves[index]