# =========================================================
# --- players_calculating.py ---
# =========================================================

from typing import Optional

from core.errors import StrategyUnavailableError
from core.moves import Coord
from core.state import KulamiState

from .player import Player
from .valuation import Valuation

# =========================================================

class CalculatingPlayer(Player):
    """
    Deep-search player (minimax with alpha-beta over Valuation).

    Not available yet: select_move() always raises StrategyUnavailableError
    instead of falling back to a weaker strategy. A search would walk the
    tree with move()/undo_last_move() on a state.copy(), bounded by
    max_depth and time_budget.

    Attributes:
        id (int): Player index (RED or BLACK).
        eval (Valuation): Evaluation applied at the search horizon.
        max_depth (int): Search depth in plies.
        time_budget (Optional[float]): Seconds allowed per move, None for no limit.
    """

    def __init__(
        self,
        id: Optional[int] = None,
        valuation: Optional[Valuation] = None,
        max_depth: int = 4,
        time_budget: Optional[float] = None,
    ):
        self.id: Optional[int] = id
        self.eval: Valuation = valuation or Valuation(win_bonus=100)
        self.max_depth: int = max_depth
        self.time_budget: Optional[float] = time_budget

    def __str__(self) -> str:
        return "Calculating AI"

    def select_move(self, state: KulamiState) -> Coord:
        """
        Raises:
            StrategyUnavailableError: Always.
        """
        raise StrategyUnavailableError("the calculating AI is not implemented yet")
