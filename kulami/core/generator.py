# =========================================================
# --- core_generator.py ---
# =========================================================

from typing import TYPE_CHECKING, Iterator, List

import numpy as np

from .board import EMPTY
from .moves import Coord
from .rules import KulamiRules

if TYPE_CHECKING:
    from .state import KulamiState

# =========================================================

class LegalMoveGenerator:
    """Enumerates every coordinate the move validator would accept next."""

    def generate_legal_moves(self, state: "KulamiState", rules: KulamiRules) -> List[Coord]:
        """
        Generate all legal moves for the player to move.

        The order is stable: on an empty board all empty cells in row-major
        order; afterwards the candidates in the column of the last move by
        ascending row, then those in its row by ascending column.

        Args:
            state: Current game state.
            rules: Game rules engine.

        Returns:
            List of legal target coordinates.
        """
        if not state.history:
            rows, cols = np.nonzero(state.marbles == EMPTY)
            return [Coord(int(r), int(c)) for r, c in zip(rows, cols)]

        if not rules.marbles_left(state):
            return []

        return [coord for coord in self._line_cells(state) if self._is_candidate(state, rules, coord)]

    def any_move_left(self, state: "KulamiState", rules: KulamiRules) -> bool:
        """Return True if at least one legal move exists."""
        if not state.history:
            return bool(np.any(state.marbles == EMPTY))
        if not rules.marbles_left(state):
            return False
        return any(self._is_candidate(state, rules, coord) for coord in self._line_cells(state))

    def _line_cells(self, state: "KulamiState") -> Iterator[Coord]:
        """Yield the cells of the last move's column, then of its row."""
        last = state.last_move
        rows, cols = state.shape
        for row in range(rows):
            yield Coord(row, last.col)
        for col in range(cols):
            yield Coord(last.row, col)

    def _is_candidate(self, state: "KulamiState", rules: KulamiRules, coord: Coord) -> bool:
        # Cells no tile covers are never EMPTY, so the empty check covers bounds.
        return rules.is_empty(state, coord) and rules.blocked_by(state, coord) is None
