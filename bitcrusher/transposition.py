"""A fixed-size, thread-safe transposition table."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum

from .move import Move

BUCKET_COUNT = 1024
MIN_TABLE_SIZE = 1024


class EvaluationType(Enum):
    EXACT_VALUE = 0
    AT_BEST = 1
    AT_LEAST = 2


@dataclass(frozen=True)
class TranspositionEntry:
    """One slot of the table; a depth of -1 marks an empty slot."""

    key: int = 0
    depth: int = -1
    value: int | None = None
    evaluation_type: EvaluationType = EvaluationType.EXACT_VALUE
    best_move: Move = field(default_factory=Move.none)


_EMPTY_ENTRY = TranspositionEntry()


class TranspositionTable:
    """Position evaluations keyed by hash, one lock per bucket of keys."""

    def __init__(self, size: int = MIN_TABLE_SIZE) -> None:
        self._locks = [threading.Lock() for _ in range(BUCKET_COUNT)]
        self._table: list[TranspositionEntry] = []
        self._size = 0
        self.resize(size)

    @property
    def size(self) -> int:
        return self._size

    def _lock_for(self, key: int) -> threading.Lock:
        return self._locks[key % BUCKET_COUNT]

    def store(
        self,
        depth: int,
        evaluation: int,
        evaluation_type: EvaluationType,
        key: int,
        best_move: Move,
    ) -> None:
        """Store an evaluation, replacing the slot only when searched as deep or deeper."""
        index = key % self._size
        with self._lock_for(key):
            if depth >= self._table[index].depth:
                self._table[index] = TranspositionEntry(
                    key, depth, evaluation, evaluation_type, best_move
                )

    def probe(self, depth: int, alpha: int, beta: int, key: int) -> int | None:
        """Return a usable evaluation for ``key`` at ``depth``, or None."""
        with self._lock_for(key):
            entry = self._table[key % self._size]
        if entry.key != key or entry.depth < depth:
            return None
        if entry.evaluation_type is EvaluationType.EXACT_VALUE:
            return entry.value
        if entry.evaluation_type is EvaluationType.AT_BEST and entry.value <= alpha:
            return alpha
        if entry.evaluation_type is EvaluationType.AT_LEAST and entry.value >= beta:
            return beta
        return None

    def entry(self, key: int) -> TranspositionEntry:
        """The slot ``key`` maps to, whichever position it holds."""
        return self._table[key % self._size]

    def resize(self, size: int) -> None:
        """Change the slot count, keeping the leading slots."""
        if size < 1:
            raise ValueError("table size must be positive")
        self._table = self._table[:size] + [_EMPTY_ENTRY] * (size - len(self._table))
        self._size = size