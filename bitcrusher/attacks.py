"""Attack sets for rook-like sliders, kings and pawns."""

from __future__ import annotations

from .bitboards import (
    BOARD_DIMENSION,
    EMPTY_BITBOARD,
    FULL_BITBOARD,
    Color,
    Direction,
    Rank,
    direction_delta,
    rank_mask,
    shift_no_wrap,
)

PROMOTION_RANKS_MASK = rank_mask(Rank.R_1) | rank_mask(Rank.R_8)
NON_PROMOTION_RANKS_MASK = FULL_BITBOARD & ~PROMOTION_RANKS_MASK

_ORTHOGONAL_DIRECTIONS = (Direction.TOP, Direction.LEFT, Direction.RIGHT, Direction.BOTTOM)

_KING_STEPS = (
    (Direction.TOP,),
    (Direction.TOP, Direction.LEFT),
    (Direction.TOP, Direction.RIGHT),
    (Direction.LEFT,),
    (Direction.RIGHT,),
    (Direction.BOTTOM, Direction.LEFT),
    (Direction.BOTTOM, Direction.RIGHT),
    (Direction.BOTTOM,),
)


def _byteswap(bitboard: int) -> int:
    return int.from_bytes((bitboard & FULL_BITBOARD).to_bytes(8, "little"), "big")


def _require_horizontal(direction: Direction) -> None:
    if direction not in (Direction.LEFT, Direction.RIGHT):
        raise ValueError(f"pawn attack direction must be LEFT or RIGHT, not {direction.name}")


# --- rook-like sliders -----------------------------------------------------


def bottom_attacks(square_bitboard: int, occ_file: int, file_mask: int) -> int:
    """Squares attacked towards rank 1 along a file; ``occ_file`` includes the slider."""
    difference = (occ_file - 2 * square_bitboard) & FULL_BITBOARD
    return (occ_file ^ difference) & file_mask


def top_attacks(square_bitboard: int, occ_file: int, file_mask: int) -> int:
    """Squares attacked towards rank 8 along a file; ``occ_file`` includes the slider."""
    reversed_occupancy = _byteswap(occ_file)
    reversed_slider = _byteswap(square_bitboard)
    difference = (reversed_occupancy - 2 * reversed_slider) & FULL_BITBOARD
    return _byteswap(reversed_occupancy ^ difference) & file_mask


def right_attacks(square_bitboard: int, occ_rank: int, rank_mask: int) -> int:
    """Squares attacked towards the H file along a rank; ``occ_rank`` includes the slider."""
    difference = (occ_rank - 2 * square_bitboard) & FULL_BITBOARD
    return (occ_rank ^ difference) & rank_mask


def left_attacks(square_bitboard: int, occ_rank: int, rank_mask: int) -> int:
    """Squares attacked towards the A file, up to and including the closest blocker.

    With no blocker to the left of the slider the result is empty; ``rank_mask``
    is accepted for symmetry with the other ray generators and is not used.
    """
    below_slider = (square_bitboard - 1) & FULL_BITBOARD
    occupancy = occ_rank & ~square_bitboard
    west_occupancy = occupancy & below_slider
    closest_blocker = 1 << (west_occupancy.bit_length() - 1) if west_occupancy else 0
    masked = west_occupancy | square_bitboard
    difference = (masked - 3 * closest_blocker) & FULL_BITBOARD
    return (masked ^ difference) & below_slider


def horizontal_vertical_attacks(sliders: int, occupancy: int) -> int:
    """Every square attacked by rook-like ``sliders`` given the board ``occupancy``."""
    empty = FULL_BITBOARD & ~occupancy
    attacks = EMPTY_BITBOARD
    for direction in _ORTHOGONAL_DIRECTIONS:
        flood = sliders & FULL_BITBOARD
        frontier = flood
        for _ in range(BOARD_DIMENSION - 1):
            frontier = shift_no_wrap(frontier, direction) & empty
            if not frontier:
                break
            flood |= frontier
        attacks |= shift_no_wrap(flood, direction)
    return attacks


# --- king ------------------------------------------------------------------


def king_attacks(king_bitboard: int) -> int:
    """Squares one king step away from any set square."""
    attacks = EMPTY_BITBOARD
    for steps in _KING_STEPS:
        attacks |= shift_no_wrap(king_bitboard, *steps)
    return attacks


# --- pawns -----------------------------------------------------------------


def pawn_push_direction(color: Color) -> Direction:
    return Direction.TOP if color is Color.WHITE else Direction.BOTTOM


def pawn_attack_offset(color: Color, direction: Direction) -> int:
    """Square index offset of a pawn capture towards ``direction``."""
    _require_horizontal(direction)
    return direction_delta(pawn_push_direction(color)) + direction_delta(direction)


def pawn_single_side_attacks(color: Color, direction: Direction, pawns: int) -> int:
    _require_horizontal(direction)
    return shift_no_wrap(pawns, pawn_push_direction(color), direction)


def pawn_push_offset(color: Color) -> int:
    return direction_delta(pawn_push_direction(color))


def pawn_double_push_offset(color: Color) -> int:
    return 2 * direction_delta(pawn_push_direction(color))


def pawns_on_start_rank(color: Color, pawns: int) -> int:
    """Pawns still on their starting rank, i.e. allowed a double push."""
    start_rank = Rank.R_2 if color is Color.WHITE else Rank.R_7
    return pawns & rank_mask(start_rank)


def pawn_attacks(color: Color, pawns: int) -> int:
    return pawn_single_side_attacks(color, Direction.LEFT, pawns) | pawn_single_side_attacks(
        color, Direction.RIGHT, pawns
    )


def pawn_single_push(color: Color, pawns: int) -> int:
    return shift_no_wrap(pawns, pawn_push_direction(color))


def pawn_double_push(color: Color, pawns: int) -> int:
    direction = pawn_push_direction(color)
    return shift_no_wrap(pawns, direction, direction)


def en_passant_rank_mask(color: Color) -> int:
    """Rank on which ``color``'s pawns can capture en passant."""
    return rank_mask(Rank.R_5 if color is Color.WHITE else Rank.R_4)