# =========================================================
# --- players_random.py ---
# =========================================================

import random
from typing import Optional

from core.errors import NoLegalMovesError
from core.moves import Coord
from core.state import KulamiState

from .player import Player

# =========================================================

class RandomPlayer(Player):
    """
    Random player: picks uniformly among the legal moves (a smart monkey).

    Attributes:
        id (int): Player index (RED or BLACK).
        rng (random.Random): Random number generator.
    """

    def __init__(self, id: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize a RandomPlayer.

        Args:
            id (Optional[int]): Player index (RED or BLACK).
            rng (Optional[random.Random]): Optional RNG instance. If None, a new RNG is created.
        """
        self.id: Optional[int] = id
        self.rng: random.Random = rng or random.Random()

    def __str__(self) -> str:
        """Return a human-readable name for the player."""
        return "Random AI"

    def select_move(self, state: KulamiState) -> Coord:
        """
        Select a move randomly from the legal moves.

        Raises:
            NoLegalMovesError: If no legal move exists.
        """
        moves = state.legal_moves()
        if not moves:
            raise NoLegalMovesError("no legal moves")
        return self.rng.choice(moves)
