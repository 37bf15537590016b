"""Bitboard primitives, attack sets, moves and a transposition table for chess engines."""

__version__ = "0.1.0"
__all__ = ["attacks", "bitboards", "diagonals", "move", "transposition"]