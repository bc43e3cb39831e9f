# =========================================================
# --- core_errors.py ---
# =========================================================

from typing import Optional, Tuple

# =========================================================

class KulamiError(Exception):
    """Base class for all errors raised by the Kulami engine."""


class LayoutError(KulamiError):
    """
    Raised when a tile layout cannot be turned into a board.

    Attributes:
        cell: Grid cell (row, col) where two tiles intersect, if any.
        tiles: Indices of the two intersecting tiles (new, existing), if any.
        expected: Required number of tile placements, if the count was wrong.
        received: Number of tile placements given, if the count was wrong.
    """

    def __init__(
        self,
        message: str,
        cell: Optional[Tuple[int, int]] = None,
        tiles: Optional[Tuple[int, int]] = None,
        expected: Optional[int] = None,
        received: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.cell = cell
        self.tiles = tiles
        self.expected = expected
        self.received = received


# --- Move errors ---

class MoveError(KulamiError):
    """
    Base class for rejected moves. The board is unchanged when one is raised.

    Attributes:
        coord: The rejected coordinate.
    """

    def __init__(self, message: str, coord=None) -> None:
        super().__init__(message)
        self.coord = coord


class TurnError(MoveError):
    """The mover has the same color as the previous move."""


class GameOverError(MoveError):
    """All marbles have been played."""


class OutOfBoundsError(MoveError):
    """The coordinate is outside the grid or on a cell no tile covers."""


class OccupiedError(MoveError):
    """
    The cell holds a marble, or it is off the line of play.

    Attributes:
        reason: "occupied" or "line_of_play".
    """

    def __init__(self, message: str, coord=None, reason: str = "occupied") -> None:
        super().__init__(message, coord)
        self.reason = reason


class TileBlockedError(MoveError):
    """
    The target tile was used by one of the two previous moves.

    Attributes:
        tile: Index of the blocked tile.
        blocked_by: "opponent" for the previous move, "self" for the one before it.
    """

    def __init__(self, message: str, coord=None, tile: int = -1, blocked_by: str = "opponent") -> None:
        super().__init__(message, coord)
        self.tile = tile
        self.blocked_by = blocked_by


# --- Strategy errors ---

class NoLegalMovesError(KulamiError):
    """A strategy was asked for a move in a terminal position."""


class StrategyUnavailableError(KulamiError, NotImplementedError):
    """A strategy exists in the interface but has no implementation yet."""
