# =========================================================
# --- players_player.py ---
# =========================================================

from abc import ABC, abstractmethod
from typing import Optional, Union

from core.moves import Coord, Resign
from core.state import KulamiState


# =========================================================

class Player(ABC):
    """
    Abstract base class for a Kulami player.

    A player proposes the next move for whichever color is to move on the
    state it is given. Implementations must never mutate that state.

    Attributes:
        id (Optional[int]): Player index (RED or BLACK). Initialized in constructor.
        is_human (bool): True if moves come from a person and may be illegal.
    """

    is_human: bool = False

    def __init__(self, id: Optional[int] = None):
        """
        Initialize a player with an optional ID.

        Args:
            id (Optional[int]): Player index (RED or BLACK). Defaults to None.
        """
        self.id: Optional[int] = id

    @abstractmethod
    def select_move(self, state: KulamiState) -> Union[Coord, Resign]:
        """
        Select the next move.

        Args:
            state (KulamiState): Current game state.

        Returns:
            Coord: Proposed target cell (humans may also return Resign).

        Raises:
            NoLegalMovesError: If no legal move exists.
            StrategyUnavailableError: If the strategy is not implemented.
        """
        pass
