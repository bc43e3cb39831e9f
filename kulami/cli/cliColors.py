# =========================================================
# --- cli_cliColors.py ---
# =========================================================

from typing import Tuple

# =========================================================

class TColor:
    """
    ANSI escape codes used by the board and the event messages.

    Attributes:
        RED (str): Red marbles and the red player.
        BLUE (str): Black marbles and the black player.
        RESET (str): Back to the terminal default.
        BOLD (str): Headings.
    """
    RED: str     = "\033[91m"
    BLUE: str    = "\033[94m"
    RESET: str   = "\033[0m"
    BOLD: str    = "\033[1m"


#: Colored player names, indexed by RED / BLACK
PLAYER: Tuple[str, str] = (
    f"{TColor.RED}Red{TColor.RESET}",
    f"{TColor.BLUE}Black{TColor.RESET}",
)
