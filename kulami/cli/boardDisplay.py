# =========================================================
# --- cli_boardDisplay.py ---
# =========================================================

from typing import List

from core.board import OUT_OF_BOUNDS, EMPTY, RED_MARBLE, BLACK_MARBLE
from core.moves import Coord
from core.state import KulamiState

from .cliColors import TColor
from .cliUtils import clear

# =========================================================

class BoardDisplay:
    """
    Class for displaying the Kulami board in the terminal.

    Tile borders are drawn with `-` and `|`, empty cells as `.`, red marbles
    as `x` and black marbles as `o`; the last two moves are upper-case.

    Attributes:
        state (KulamiState): The current game state.
        clear_screen (bool): Whether to clear the screen before drawing.
        field_size (int): Width of a cell for formatting.
        use_color (bool): Whether to use colored output.
    """

    def __init__(self, state: 'KulamiState', clear_screen: bool = True, use_color: bool = True) -> None:
        self.state: 'KulamiState' = state
        self.clear_screen: bool = clear_screen
        self.field_size: int = 4  # Width of each cell for alignment
        self.use_color: bool = use_color

    def _marble_str(self, value: int, is_last: bool) -> str:
        """Return the symbol of a cell, colored if enabled."""
        if value == EMPTY:
            return "."
        if value == RED_MARBLE:
            m, color = ("X" if is_last else "x"), TColor.RED
        elif value == BLACK_MARBLE:
            m, color = ("O" if is_last else "o"), TColor.BLUE
        else:
            return " "
        return f"{color}{m}{TColor.RESET}" if self.use_color else m

    def render(self) -> str:
        """
        Return the board as text, followed by the score line.

        Returns:
            str: Multi-line board representation.
        """
        snap = self.state.snapshot()
        tiles, marbles = snap.tiles, snap.marbles
        end_row, end_col = tiles.shape[0] - 1, tiles.shape[1] - 1
        highlight = set(snap.last_moves)

        res: List[str] = []
        # Column index.
        res.append("*  ")
        for col in range(end_col + 1):
            res.append(f"{col:{self.field_size}d}")
        res.append("\n")

        for row in range(end_row + 1):
            # A row of separators above the cells.
            res.append("    ")
            for col in range(end_col + 1):
                t = tiles[row, col]
                if row == 0 and t != OUT_OF_BOUNDS or row != 0 and t != tiles[row - 1, col]:
                    res.append("----")
                elif col == 0 and t != OUT_OF_BOUNDS or col != 0 and t != tiles[row, col - 1]:
                    if t == OUT_OF_BOUNDS and (row == 0 or tiles[row - 1, col - 1] == OUT_OF_BOUNDS):
                        res.append("-   ")
                    else:
                        res.append("|   ")
                elif col != 0 and row != 0 and t == OUT_OF_BOUNDS and tiles[row - 1, col - 1] != OUT_OF_BOUNDS:
                    res.append("-   ")
                else:
                    res.append("    ")
            # Close the separator row on the right; | only inside the same tile.
            if tiles[row, end_col] != OUT_OF_BOUNDS or row != 0 and tiles[row - 1, end_col] != OUT_OF_BOUNDS:
                if row != 0 and tiles[row, end_col] == tiles[row - 1, end_col]:
                    res.append("|")
                else:
                    res.append("-")
            res.append("\n")

            # Row index and the cells themselves.
            res.append(f"{row:<{self.field_size}d}")
            for col in range(end_col + 1):
                t = tiles[row, col]
                m = self._marble_str(marbles[row, col], Coord(row, col) in highlight)
                sep = " "
                if col == 0 and t != OUT_OF_BOUNDS or col != 0 and t != tiles[row, col - 1]:
                    sep = "|"
                res.append(f"{sep} {m} ")
            if tiles[row, end_col] != OUT_OF_BOUNDS:
                res.append("|")
            res.append("\n")

        # Last closing row.
        res.append("    ")
        for col in range(end_col + 1):
            t = tiles[end_row, col]
            if t != OUT_OF_BOUNDS:
                res.append("----")
            elif col != 0 and tiles[end_row, col - 1] != OUT_OF_BOUNDS:
                res.append("-   ")
            else:
                res.append("    ")
        res.append("\n")
        res.append(f"\nScore:\t\tRed: {snap.red_score}\tBlack: {snap.black_score}\n")
        return "".join(res)

    def draw_all(self) -> None:
        """Draw the entire board, including the score line."""
        if self.clear_screen:
            clear()  # Clear terminal for clean board display
        print(f"{TColor.BOLD + '--- Board ---' + TColor.RESET if self.use_color else '--- Board ---'}")
        print(self.render(), end="")
