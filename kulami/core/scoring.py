# =========================================================
# --- core_scoring.py ---
# =========================================================

import numpy as np
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .board import RED, BLACK, SIGN

# =========================================================

@dataclass(frozen=True)
class ScoreDelta:
    """
    Inverse delta of a single marble placement.

    Attributes:
        tile (int): Tile the marble was placed on.
        step (int): Counter step applied (+1 red, -1 black).
        red (int): Change applied to red's running score.
        black (int): Change applied to black's running score.
    """
    tile: int
    step: int
    red: int
    black: int


class ScoreLedger:
    """
    Incremental majority accounting per tile and the two running totals.

    A tile is worth its size to the color holding the marble majority on it.
    The counter of a tile is +1 per red marble and -1 per black marble, so its
    sign names the majority holder. Scores change only on the placement that
    first establishes a majority or breaks the opponent's, never when a lead is
    reinforced.

    Attributes:
        tile_sizes (np.ndarray): Size of every tile.
        tile_score (np.ndarray): Majority counter per tile.
        scores (list[int]): Running totals [red, black].
    """

    def __init__(self, tile_sizes: Sequence[int]) -> None:
        self.tile_sizes: np.ndarray = np.asarray(tile_sizes, dtype=np.int16)
        self.tile_score: np.ndarray = np.zeros(len(self.tile_sizes), dtype=np.int16)
        self.scores: list = [0, 0]

    def copy(self) -> "ScoreLedger":
        """Return an independent copy of the ledger."""
        new_ledger = ScoreLedger(self.tile_sizes)
        new_ledger.tile_score = self.tile_score.copy()
        new_ledger.scores = self.scores.copy()
        return new_ledger

    # ---------- Properties ----------
    @property
    def red(self) -> int:
        return self.scores[RED]

    @property
    def black(self) -> int:
        return self.scores[BLACK]

    def majority(self, tile: int) -> Optional[int]:
        """Return the player holding the majority on a tile, or None on a tie."""
        value = self.tile_score[tile]
        if value > 0:
            return RED
        if value < 0:
            return BLACK
        return None

    # ---------- Updates ----------
    def apply(self, tile: int, player: int) -> ScoreDelta:
        """
        Account for a marble of the given player placed on a tile.

        Args:
            tile: Tile index.
            player: Player index (RED or BLACK).

        Returns:
            ScoreDelta: The change made, to be handed back to revert().
        """
        step = SIGN[player]
        prev = int(self.tile_score[tile])
        size = int(self.tile_sizes[tile])
        change = [0, 0]

        if prev == 0:
            change[player] = size
        elif prev == -step:
            change[1 - player] = -size

        self.tile_score[tile] += step
        self.scores[RED] += change[RED]
        self.scores[BLACK] += change[BLACK]
        return ScoreDelta(tile, step, change[RED], change[BLACK])

    def revert(self, delta: ScoreDelta) -> None:
        """Undo a change previously returned by apply()."""
        self.tile_score[delta.tile] -= delta.step
        self.scores[RED] -= delta.red
        self.scores[BLACK] -= delta.black

    # ---------- Recomputation ----------
    def recompute(self) -> Tuple[int, int]:
        """Recompute (red, black) from the majority counters alone."""
        red = int(self.tile_sizes[self.tile_score > 0].sum())
        black = int(self.tile_sizes[self.tile_score < 0].sum())
        return red, black
