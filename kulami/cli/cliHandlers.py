# =========================================================
# --- cli_cliHandlers.py ---
# =========================================================

from typing import Any, Dict, Callable

from .cliColors import PLAYER
from .cliUtils import interruptible_sleep
from .boardDisplay import BoardDisplay

# =========================================================

class CLIHandlers:
    """
    Handles engine events for Kulami game visualization.

    Attributes:
        delay (float): Delay in seconds after AI moves to allow the user to follow the game.
        clear_screen (bool): Whether the board display clears the terminal.
        use_color (bool): Whether to use colored output.
    """

    def __init__(self, delay: float = 1.0, clear_screen: bool = True, use_color: bool = True):
        self.delay: float = delay
        self.clear_screen: bool = clear_screen
        self.use_color: bool = use_color

    def _names(self):
        return PLAYER if self.use_color else ("Red", "Black")

    def _draw(self, state) -> None:
        BoardDisplay(state, clear_screen=self.clear_screen, use_color=self.use_color).draw_all()

    # ---------------- Event Handlers ----------------
    def handle_game_start(self, event: Dict[str, Any]) -> None:
        """
        Announce who plays which color.

        Args:
            event (dict): Event data with 'players'.
        """
        names = self._names()
        for idx, player in enumerate(event["players"]):
            print(f"{names[idx]}: {player}")

    def handle_turn_start(self, event: Dict[str, Any]) -> None:
        """
        Handle start of a turn: display board and current player.

        Args:
            event (dict): Event data with 'state', 'turn' and 'round'.
        """
        self._draw(event["state"])
        print(f"Round {event['round']}: it is {self._names()[event['turn']]} to move. ", end="")

    def handle_chosen_move(self, event: Dict[str, Any]) -> None:
        """
        Handle event when an AI player has chosen a move.

        Args:
            event (dict): Event data with 'move' and 'is_human'.
        """
        if not event["is_human"]:
            print(f"AI chooses {event['move']}.")
            interruptible_sleep(self.delay)

    def handle_illegal_move(self, event: Dict[str, Any]) -> None:
        """
        Report a rejected move; the player is asked again.

        Args:
            event (dict): Event data with 'error'.
        """
        print(f"Error: {event['error']}")
        interruptible_sleep(self.delay)

    def handle_resign(self, event: Dict[str, Any]) -> None:
        """
        Announce a resignation.

        Args:
            event (dict): Event data with 'turn'.
        """
        names = self._names()
        print(f"{names[event['turn']]} resigned. {names[1 - event['turn']]} wins.")

    def handle_game_over(self, event: Dict[str, Any]) -> None:
        """
        Handle game over event: display the board and the final score.

        Args:
            event (dict): Event data with 'state', 'winner', 'red_score', 'black_score' and 'result_type'.
        """
        if event["result_type"] == "RESIGN":
            return
        self._draw(event["state"])
        red, black = event["red_score"], event["black_score"]
        names = self._names()
        if event["winner"] is None:
            print(f"\nThe game is a draw with final score {red} vs. {black}!")
        elif event["winner"] == 0:
            print(f"\n{names[0]} wins with final score {red} vs. {black}!")
        else:
            print(f"\n{names[1]} wins with final score {black} vs. {red}!")

    # ---------------- Handler Mapping ----------------
    @property
    def handlers(self) -> Dict[str, Callable[[Dict[str, Any]], None]]:
        """
        Returns a dictionary mapping event types to their handler functions.
        """
        return {
            "game_start": self.handle_game_start,
            "turn_start": self.handle_turn_start,
            "chosen_move": self.handle_chosen_move,
            "illegal_move": self.handle_illegal_move,
            "resign": self.handle_resign,
            "game_over": self.handle_game_over,
        }
