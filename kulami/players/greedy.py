# =========================================================
# --- players_greedy.py ---
# =========================================================

import random
from typing import List, Optional

from core.errors import NoLegalMovesError
from core.moves import Coord
from core.state import KulamiState

from .player import Player
from .valuation import Valuation

# =========================================================

class GreedyPlayer(Player):
    """
    Takes the move maximizing the immediate score differential, with no look-ahead.

    Every candidate is tried on a private copy of the state and taken back
    again, so the state handed in is never touched. Ties between equally
    good moves are broken uniformly at random.

    Attributes:
        id (int): Player index (RED or BLACK).
        rng (random.Random): Random number generator for tie-breaking.
        eval (Valuation): Position evaluation.
    """

    def __init__(
        self,
        id: Optional[int] = None,
        rng: Optional[random.Random] = None,
        valuation: Optional[Valuation] = None,
    ):
        self.id: Optional[int] = id
        self.rng: random.Random = rng or random.Random()
        self.eval: Valuation = valuation or Valuation()

    def __str__(self) -> str:
        return "Greedy AI"

    def best_moves(self, state: KulamiState) -> List[Coord]:
        """
        Return all legal moves reaching the best immediate evaluation.

        Raises:
            NoLegalMovesError: If no legal move exists.
        """
        moves = state.legal_moves()
        if not moves:
            raise NoLegalMovesError("no legal moves")

        work = state.copy()
        player = work.turn
        root_hash = work.zobrist_hash

        best_moves: List[Coord] = []
        best_value: Optional[int] = None
        for coord in moves:
            value = self.eval.evaluate_move(work, coord, player)
            if best_value is None or value > best_value:
                best_value = value
                best_moves = [coord]
            elif value == best_value:
                best_moves.append(coord)

        # check that the working copy is back at the root position
        assert work.zobrist_hash == root_hash, "Working state was modified during move selection!"
        return best_moves

    def select_move(self, state: KulamiState) -> Coord:
        """Select one of the best moves at random."""
        return self.rng.choice(self.best_moves(state))
