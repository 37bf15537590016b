import pytest
from hypothesis import given
from hypothesis import strategies as st

from bitcrusher.attacks import (
    NON_PROMOTION_RANKS_MASK,
    PROMOTION_RANKS_MASK,
    bottom_attacks,
    en_passant_rank_mask,
    horizontal_vertical_attacks,
    king_attacks,
    left_attacks,
    pawn_attack_offset,
    pawn_attacks,
    pawn_double_push,
    pawn_double_push_offset,
    pawn_push_direction,
    pawn_push_offset,
    pawn_single_push,
    pawn_single_side_attacks,
    pawns_on_start_rank,
    right_attacks,
    top_attacks,
)
from bitcrusher.bitboards import (
    FULL_BITBOARD,
    Color,
    Direction,
    File,
    Rank,
    Square,
    direction_delta,
    file_mask,
    file_of,
    is_square_set,
    iter_squares,
    rank_mask,
    rank_of,
    square_bitboard,
    squares_bitboard,
    to_square,
)

squares = st.sampled_from(list(Square))
bitboards = st.integers(min_value=0, max_value=FULL_BITBOARD)


def _popcount(bitboard):
    return bin(bitboard).count("1")


@given(square=squares, occupancy=bitboards)
def test_rays_combine_to_rook_attacks(square, occupancy):
    slider = square_bitboard(square)
    rank = rank_of(square)
    occ = occupancy | slider | square_bitboard(to_square(File.A, rank))
    fmask = file_mask(file_of(square))
    rmask = rank_mask(rank)
    rays = (
        bottom_attacks(slider, occ & fmask, fmask)
        | top_attacks(slider, occ & fmask, fmask)
        | left_attacks(slider, occ & rmask, rmask)
        | right_attacks(slider, occ & rmask, rmask)
    )
    assert rays == horizontal_vertical_attacks(slider, occ)


@given(square=squares, occupancy=bitboards)
def test_rays_stay_on_their_lines(square, occupancy):
    slider = square_bitboard(square)
    occ = occupancy | slider
    fmask = file_mask(file_of(square))
    rmask = rank_mask(rank_of(square))
    assert bottom_attacks(slider, occ & fmask, fmask) & ~fmask == 0
    assert top_attacks(slider, occ & fmask, fmask) & ~fmask == 0
    assert right_attacks(slider, occ & rmask, rmask) & ~rmask == 0
    assert left_attacks(slider, occ & rmask, rmask) & ~rmask == 0


def test_bottom_and_top_attacks_split_the_file():
    slider = square_bitboard(Square.D4)
    fmask = file_mask(File.D)
    occ = slider
    below = bottom_attacks(slider, occ, fmask)
    above = top_attacks(slider, occ, fmask)
    assert all(rank_of(sq) > Rank.R_4 for sq in iter_squares(below))
    assert all(rank_of(sq) < Rank.R_4 for sq in iter_squares(above))
    assert below | above == fmask & ~slider


def test_left_attacks_stop_at_blocker():
    slider = square_bitboard(Square.E1)
    occ = squares_bitboard(Square.E1, Square.C1, Square.A1)
    rmask = rank_mask(Rank.R_1)
    attacks = left_attacks(slider, occ, rmask)
    assert is_square_set(attacks, Square.C1)
    assert is_square_set(attacks, Square.D1)
    assert not is_square_set(attacks, Square.B1)
    assert not is_square_set(attacks, Square.A1)


@given(square=squares)
def test_rook_on_empty_board_attacks_whole_lines(square):
    slider = square_bitboard(square)
    expected = (file_mask(file_of(square)) | rank_mask(rank_of(square))) & ~slider
    assert horizontal_vertical_attacks(slider, slider) == expected
    assert _popcount(horizontal_vertical_attacks(slider, slider)) == 14


def test_king_attacks_in_corner():
    assert king_attacks(square_bitboard(Square.A8)) == squares_bitboard(
        Square.B8, Square.A7, Square.B7
    )


def test_king_attacks_in_center_has_eight_squares():
    assert _popcount(king_attacks(square_bitboard(Square.D5))) == 8


@given(first=squares, second=squares)
def test_king_attacks_are_symmetric(first, second):
    assert is_square_set(king_attacks(square_bitboard(first)), second) == is_square_set(
        king_attacks(square_bitboard(second)), first
    )


@given(first=squares, second=squares)
def test_king_attacks_of_union_is_union(first, second):
    both = squares_bitboard(first, second)
    assert king_attacks(both) == king_attacks(square_bitboard(first)) | king_attacks(
        square_bitboard(second)
    )
    assert not is_square_set(king_attacks(square_bitboard(first)), first)


@given(first=squares, second=squares)
def test_pawn_attacks_mirror_between_colors(first, second):
    assert is_square_set(pawn_attacks(Color.WHITE, square_bitboard(first)), second) == (
        is_square_set(pawn_attacks(Color.BLACK, square_bitboard(second)), first)
    )


def test_white_pawn_attacks_from_e2():
    assert pawn_attacks(Color.WHITE, square_bitboard(Square.E2)) == squares_bitboard(
        Square.D3, Square.F3
    )


@pytest.mark.parametrize("color", list(Color))
@pytest.mark.parametrize("direction", [Direction.LEFT, Direction.RIGHT])
def test_single_side_attack_lands_on_offset(color, direction):
    origin = Square.E4
    attacks = pawn_single_side_attacks(color, direction, square_bitboard(origin))
    assert attacks == square_bitboard(Square(origin + pawn_attack_offset(color, direction)))


def test_single_side_attacks_do_not_wrap():
    assert pawn_single_side_attacks(Color.WHITE, Direction.LEFT, file_mask(File.A)) == 0
    assert pawn_single_side_attacks(Color.BLACK, Direction.RIGHT, file_mask(File.H)) == 0


@pytest.mark.parametrize("direction", [Direction.TOP, Direction.BOTTOM])
def test_vertical_attack_direction_is_rejected(direction):
    with pytest.raises(ValueError):
        pawn_attack_offset(Color.WHITE, direction)
    with pytest.raises(ValueError):
        pawn_single_side_attacks(Color.WHITE, direction, square_bitboard(Square.E4))


def test_push_directions_and_offsets():
    assert pawn_push_direction(Color.WHITE) is Direction.TOP
    assert pawn_push_direction(Color.BLACK) is Direction.BOTTOM
    for color in Color:
        assert pawn_push_offset(color) == direction_delta(pawn_push_direction(color))
        assert pawn_double_push_offset(color) == 2 * pawn_push_offset(color)


def test_pushes_move_pawns_forward():
    assert pawn_single_push(Color.WHITE, square_bitboard(Square.E2)) == square_bitboard(Square.E3)
    assert pawn_double_push(Color.WHITE, square_bitboard(Square.E2)) == square_bitboard(Square.E4)
    assert pawn_double_push(Color.BLACK, square_bitboard(Square.D7)) == square_bitboard(Square.D5)
    assert pawn_single_push(Color.WHITE, rank_mask(Rank.R_8)) == 0
    assert pawn_single_push(Color.BLACK, rank_mask(Rank.R_1)) == 0


@given(pawns=bitboards)
def test_single_push_matches_offset(pawns):
    for color in Color:
        pushed = pawn_single_push(color, pawns)
        for square in iter_squares(pushed):
            assert is_square_set(pawns, Square(square - pawn_push_offset(color)))


def test_pawns_on_start_rank():
    pawns = rank_mask(Rank.R_2) | rank_mask(Rank.R_7) | square_bitboard(Square.E4)
    assert pawns_on_start_rank(Color.WHITE, pawns) == rank_mask(Rank.R_2)
    assert pawns_on_start_rank(Color.BLACK, pawns) == rank_mask(Rank.R_7)


def test_en_passant_rank_masks():
    assert en_passant_rank_mask(Color.WHITE) == rank_mask(Rank.R_5)
    assert en_passant_rank_mask(Color.BLACK) == rank_mask(Rank.R_4)


def test_promotion_masks_partition_the_board():
    assert PROMOTION_RANKS_MASK | NON_PROMOTION_RANKS_MASK == FULL_BITBOARD
    assert PROMOTION_RANKS_MASK & NON_PROMOTION_RANKS_MASK == 0
    assert PROMOTION_RANKS_MASK == rank_mask(Rank.R_1) | rank_mask(Rank.R_8)