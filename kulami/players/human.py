# =========================================================
# --- players_human.py ---
# =========================================================

from typing import Callable, Optional, Union

from core.board import PLAYER_NAMES
from core.moves import Coord, Resign
from core.state import KulamiState

from .player import Player

# =========================================================

class HumanPlayer(Player):
    """
    Human-controlled player class.

    Moves come from an injected input function, so the same class serves the
    terminal and tests. The engine asks again whenever the returned move is
    illegal.

    Attributes:
        id (int): Player index (RED or BLACK).
        name (str): Player display name.
        input_func (Callable[[KulamiState], Union[Coord, Resign]]):
            Function returning the chosen move for the given state.
    """

    is_human: bool = True

    def __init__(
        self,
        id: int,
        input_func: Callable[[KulamiState], Union[Coord, Resign]],
        name: Optional[str] = None,
    ):
        """
        Initialize a human player.

        Args:
            id (int): Player index (RED or BLACK).
            input_func (callable): Function to select a move.
            name (str, optional): Player display name. Defaults to the color name.
        """
        self.id: int = id
        self.name: str = name or PLAYER_NAMES[id]
        self.input_func = input_func

    def __str__(self) -> str:
        return self.name

    def select_move(self, state: KulamiState) -> Union[Coord, Resign]:
        """Ask the input function for a coordinate or a resignation."""
        return self.input_func(state)
