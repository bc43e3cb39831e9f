# =========================================================
# --- cli_cliHumanInterface.py ---
# =========================================================
from typing import Callable, Union

from core.moves import Coord, Resign
from core.state import KulamiState

from .cliUtils import safe_input, parse_command

# =========================================================

class HumanMoveReader:
    """
    Reads a move for a human player from the terminal.

    Used as the input function of a HumanPlayer: it keeps asking until the
    text parses as a coordinate or `resign`. Legality is left to the engine,
    which reports an illegal move and asks again.
    """

    PROMPT: str = "Type `resign` to resign, or a move coordinate: "

    def __init__(self, read: Callable[[str], str] = safe_input, show_legal: bool = False):
        """
        Args:
            read: Function prompting for one line of input.
            show_legal: Print the legal moves before prompting.
        """
        self.read = read
        self.show_legal: bool = show_legal

    def __call__(self, state: KulamiState) -> Union[Coord, Resign]:
        if self.show_legal:
            print("Legal moves: " + " ".join(str(m) for m in state.legal_moves()))
        while True:
            text = self.read(self.PROMPT)
            try:
                return parse_command(text)
            except ValueError as err:
                print(f"Error: {err}")
