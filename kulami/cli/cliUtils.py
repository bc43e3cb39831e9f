# =========================================================
# --- cli_cliUtils.py ---
# =========================================================
import os
import time
from typing import Union

from core.moves import Coord, Resign

# =========================================================

#: Inputs that leave the game from any prompt
QUIT_WORDS = ("q", "quit", "exit")


class ExitGame(Exception):
    """
    The player left the game from a prompt.
    Raised by `safe_input` on a quit word, Ctrl+C or a closed stdin.
    """


def safe_input(prompt: str) -> str:
    """
    Read one line from the terminal, turning every way out into ExitGame.

    Args:
        prompt (str): Text shown before the cursor.

    Returns:
        str: The line without surrounding whitespace.

    Raises:
        ExitGame: On a quit word, Ctrl+C or end of input.
    """
    try:
        line = input(prompt)
    except (KeyboardInterrupt, EOFError):
        raise ExitGame()
    line = line.strip()
    if line.lower() in QUIT_WORDS:
        raise ExitGame()
    return line


def parse_command(text: str) -> Union[Coord, Resign]:
    """
    Parse a move command.

    Accepts `resign` or a coordinate as `row,col` (spaces around the numbers
    are ignored).

    Raises:
        ValueError: If the text is neither.
    """
    text = text.strip()
    if text.lower() == "resign":
        return Resign()

    toks = text.split(",")
    if len(toks) != 2:
        raise ValueError("expected coordinate as Row,Col")
    try:
        row, col = int(toks[0]), int(toks[1])
    except ValueError as err:
        raise ValueError(f"{err}: expected coordinate as Row,Col") from err
    return Coord(row, col)


def interruptible_sleep(seconds: float, step: float = 0.05) -> None:
    """Pause between AI moves in short steps so Ctrl+C is noticed quickly."""
    deadline = time.monotonic() + seconds
    while time.monotonic() < deadline:
        time.sleep(min(step, max(0.0, deadline - time.monotonic())))


def clear() -> None:
    """Clear the terminal ('cls' on Windows, 'clear' elsewhere)."""
    os.system('cls' if os.name == 'nt' else 'clear')
