# bitcrusher

Building blocks for a bitboard chess engine:

- `bitcrusher.bitboards` – square, file, rank, piece and direction
  enumerations, conversions between them, and helpers for 64-bit bitboards.
- `bitcrusher.diagonals` – precomputed diagonal and counter-diagonal masks.
- `bitcrusher.attacks` – attack sets for rook-like sliders, kings and pawns.
- `bitcrusher.move` – an immutable `Move`, UCI formatting with `to_uci`, and a
  bounded `MoveList`.
- `bitcrusher.transposition` – a fixed-size, thread-safe transposition table.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Board layout

Squares are numbered from `Square.A8` (0) to `Square.H1` (63): rank 8 comes
first and files run from `a` to `h`. `Rank.R_8` is 0 and `Rank.R_1` is 7. A
bitboard is a plain Python `int` holding 64 bits, where bit *n* stands for
square *n*. Shifting toward `Direction.TOP` moves bits toward rank 8.

## Examples

Bitboards and squares:

```python
from bitcrusher.bitboards import Square, squares_bitboard, iter_squares, format_bitboard

rooks = squares_bitboard(Square.A1, Square.H1)
list(iter_squares(rooks))            # Square.A1 then Square.H1
print(format_bitboard(rooks, "white rooks"))
```

`pop_first_set_square` returns the lowest set square together with the
bitboard without it; `first_set_square` raises `ValueError` on an empty
bitboard. `shift` moves bits one step without guarding file edges, while
`shift_no_wrap` takes one or more directions and drops bits that would wrap
around the board.

Diagonal masks:

```python
from bitcrusher.bitboards import Square
from bitcrusher.diagonals import square_diagonal_mask, square_counter_diagonal_mask

mask = square_diagonal_mask(Square.D4) | square_counter_diagonal_mask(Square.D4)
```

Attacks:

```python
from bitcrusher.bitboards import Color, Square, square_bitboard
from bitcrusher.attacks import king_attacks, pawn_attacks, horizontal_vertical_attacks

king_attacks(square_bitboard(Square.E1))
pawn_attacks(Color.WHITE, square_bitboard(Square.E2))   # d3 and f3
horizontal_vertical_attacks(square_bitboard(Square.A1), 0)
```

The single-ray functions `top_attacks`, `bottom_attacks`, `left_attacks` and
`right_attacks` expect the occupancy of the slider's own file or rank,
including the slider itself. `left_attacks` returns an empty set when there is
no blocker to the left of the slider.

Moves:

```python
from bitcrusher.bitboards import Color, PieceType, Side, Square
from bitcrusher.move import Move, MoveList, to_uci

moves = MoveList()
moves.append(Move.quiet(Square.G1, Square.F3, PieceType.KNIGHT))
moves.append(Move.castling(Color.WHITE, Side.KINGSIDE))
[to_uci(m) for m in moves]           # ['g1f3', 'e1g1']

to_uci(Move.promotion(Square.E7, Square.E8, PieceType.QUEEN))  # 'e7e8q'
```

A `MoveList` holds at most 256 moves; appending more raises `OverflowError`.

Transposition table:

```python
from bitcrusher.move import Move
from bitcrusher.transposition import EvaluationType, TranspositionTable

table = TranspositionTable(1024)
table.store(4, 35, EvaluationType.EXACT_VALUE, 0xDEADBEEF, Move.none())
table.probe(3, -100, 100, 0xDEADBEEF)   # 35
table.probe(5, -100, 100, 0xDEADBEEF)   # None: stored search was too shallow
```

`store` replaces a slot only when the new depth is at least the stored one.
`probe` returns the exact value, `alpha` or `beta` for bound entries that
allow a cutoff, and `None` otherwise. `resize` changes the slot count and
raises `ValueError` for sizes below one.

## What this package does not do

It has no board-state type, no FEN parsing, no legal move generation, no
move application or undo, no search or evaluation, and no UCI command loop.
It provides the geometry, attack sets, move encoding and table those parts
are built on.