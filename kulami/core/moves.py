# =========================================================
# --- core_moves.py ---
# =========================================================

import numbers
from dataclasses import dataclass
from typing import Iterator

from .board import PLAYER_NAMES
from .scoring import ScoreDelta

# =========================================================

@dataclass(frozen=True, order=True)
class Coord:
    """
    A cell on the board grid.

    Attributes:
        row (int): Row index, 0 at the top.
        col (int): Column index, 0 at the left.
    """
    row: int
    col: int

    def __iter__(self) -> Iterator[int]:
        """Allow unpacking as `row, col = coord`."""
        return iter((self.row, self.col))

    def __str__(self) -> str:
        """Return the `row,col` form used for input and messages."""
        return f"{self.row},{self.col}"

    def shares_line(self, other: "Coord") -> bool:
        """Return True if both cells lie in the same row or the same column."""
        return self.row == other.row or self.col == other.col


def as_coord(value) -> Coord:
    """
    Accept a Coord or a (row, col) pair.

    Raises:
        TypeError: If a component is not an integer (floats are not truncated).
    """
    if isinstance(value, Coord):
        return value
    row, col = value
    for part in (row, col):
        if isinstance(part, bool) or not isinstance(part, numbers.Integral):
            raise TypeError(f"coordinates must be integers, got {value!r}")
    return Coord(int(row), int(col))


@dataclass(frozen=True)
class MoveRecord:
    """
    A successfully applied move together with its inverse delta.

    Attributes:
        player (int): The player who moved (RED or BLACK).
        coord (Coord): Cell the marble was placed on.
        delta (ScoreDelta): Scoring change made by the move.
    """
    player: int
    coord: Coord
    delta: ScoreDelta

    @property
    def tile(self) -> int:
        return self.delta.tile

    def __str__(self) -> str:
        return f"{PLAYER_NAMES[self.player]} {self.coord}"

    def __repr__(self) -> str:
        return str(self)


@dataclass(frozen=True)
class Resign:
    """A player's decision to resign instead of moving."""

    def __str__(self) -> str:
        return "resign"
