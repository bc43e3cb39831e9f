# =========================================================
# --- core_undo.py ---
# =========================================================

from collections import deque
from typing import Iterator, List, Optional

from .board import MAX_MOVES
from .moves import Coord, MoveRecord

# =========================================================

class MoveHistory:
    """
    Append/pop-only history of applied moves.

    Each entry is a MoveRecord carrying the inverse delta of its move, so
    undoing never re-derives anything from the board.
    """

    def __init__(self, max_moves: int = MAX_MOVES) -> None:
        """
        Initialize the history.

        Args:
            max_moves: Capacity of the history (the hard move ceiling).
        """
        self.max_moves: int = max_moves
        self.records: deque[MoveRecord] = deque(maxlen=max_moves)

    def copy(self) -> "MoveHistory":
        new_history = MoveHistory(self.max_moves)
        new_history.records.extend(self.records)
        return new_history

    def record_move(self, record: MoveRecord) -> None:
        """
        Record an applied move.

        Raises:
            ValueError: If record is None or the history is full.
        """
        if record is None:
            raise ValueError("Move record cannot be None")
        if self.is_full():
            raise ValueError("Move history is full")
        self.records.append(record)

    def pop(self) -> Optional[MoveRecord]:
        """Remove and return the last record, or None if the history is empty."""
        if not self.records:
            return None
        return self.records.pop()

    def last(self, back: int = 1) -> Optional[MoveRecord]:
        """Return the record `back` plies ago (1 = most recent), or None."""
        if back < 1 or back > len(self.records):
            return None
        return self.records[-back]

    def is_full(self) -> bool:
        return len(self.records) >= self.max_moves

    @property
    def coords(self) -> List[Coord]:
        return [record.coord for record in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[MoveRecord]:
        return iter(self.records)
