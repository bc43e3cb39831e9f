# =========================================================
# --- players_valuation.py ---
# =========================================================

from core.board import RED
from core.moves import Coord
from core.state import KulamiState

# =========================================================

class Valuation:
    """
    Position evaluation shared by the searching players.

    The value of a position for a player is the signed score differential,
    own running score minus the opponent's. Terminal positions can be
    weighted with a win bonus so a search prefers finished wins over equal
    differentials.

    Attributes:
        win_bonus (int): Added for a won finished game, subtracted for a lost one.
        evaluations (int): Number of positions evaluated so far.
    """

    def __init__(self, win_bonus: int = 0):
        self.win_bonus: int = win_bonus
        self.evaluations: int = 0

    def evaluate(self, state: KulamiState, player: int) -> int:
        """
        Evaluate a state for a given player.

        Args:
            state (KulamiState): Current game state.
            player (int): Player index (RED or BLACK).

        Returns:
            int: Score differential for the player, plus or minus the win bonus.
        """
        self.evaluations += 1
        value = state.score_diff(player == RED)

        if self.win_bonus and state.is_game_over():
            if value > 0:
                value += self.win_bonus
            elif value < 0:
                value -= self.win_bonus
        return value

    def evaluate_move(self, state: KulamiState, coord: Coord, player: int) -> int:
        """
        Evaluate the position after a trial move, then take the move back.

        Args:
            state (KulamiState): Working state; it is restored before returning.
            coord (Coord): Candidate move.
            player (int): Player making the move.

        Returns:
            int: Evaluation of the resulting position for the player.
        """
        state.move(coord, player == RED)
        try:
            return self.evaluate(state, player)
        finally:
            state.undo_last_move()
