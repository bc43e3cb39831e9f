# =========================================================
# --- core_state_invariants.py ---
# =========================================================

import numpy as np
from typing import Any

from .board import MARBLE, RED_MARBLE, BLACK_MARBLE, EMPTY, OUT_OF_BOUNDS

# =========================================================

def assert_score_invariant(state: Any, where: str = "") -> None:
    """
    Check that the running scores equal a full recomputation from the counters.

    Args:
        state: The KulamiState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If an incremental score drifted from the recomputation.
    """
    red, black = state.ledger.recompute()
    if (state.red_score, state.black_score) != (red, black):
        raise AssertionError(
            f"[SCORE DESYNC] at {where}\n"
            f"Current =Red {state.red_score}, Black {state.black_score}\n"
            f"Expected=Red {red}, Black {black}"
        )


def assert_counter_invariant(state: Any, where: str = "") -> None:
    """
    Check every tile counter against the marbles actually on the tile.

    Args:
        state: The KulamiState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If a counter does not equal red minus black marbles,
            or more marbles lie on a tile than it has cells.
    """
    for tile, size in enumerate(state.ledger.tile_sizes):
        on_tile = state.tiles == tile
        red = int(np.count_nonzero(on_tile & (state.marbles == RED_MARBLE)))
        black = int(np.count_nonzero(on_tile & (state.marbles == BLACK_MARBLE)))
        counter = int(state.ledger.tile_score[tile])
        if counter != red - black or red + black > size:
            raise AssertionError(
                f"[COUNTER DESYNC] tile {tile} at {where}\n"
                f"Counter={counter}, Red={red}, Black={black}, Size={size}"
            )


def assert_history_invariant(state: Any, where: str = "") -> None:
    """
    Check that the move history and the marbles on the board agree.

    Args:
        state: The KulamiState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If colors do not alternate, a marble does not match
            its move, or marbles exist that no move placed.
    """
    placed = int(np.count_nonzero((state.marbles != EMPTY) & (state.marbles != OUT_OF_BOUNDS)))
    if placed != len(state.history):
        raise AssertionError(
            f"[MARBLE LOST] at {where}: {placed} marbles for {len(state.history)} moves"
        )

    prev_player = None
    for idx, record in enumerate(state.history):
        if record.player == prev_player:
            raise AssertionError(f"[TURN ORDER] move {idx} repeats player {record.player} at {where}")
        marble = state.marbles[record.coord.row, record.coord.col]
        if marble != MARBLE[record.player]:
            raise AssertionError(
                f"[MARBLE DESYNC] move {idx} at {record.coord} at {where}\n"
                f"Marble={marble}, Expected={MARBLE[record.player]}"
            )
        prev_player = record.player


def assert_state_invariant(state: Any, where: str = "") -> None:
    """
    Perform full invariant check for a Kulami state.

    This includes:
    - Score consistency with the majority counters
    - Counter consistency with the marbles per tile
    - History consistency with the marbles on the board

    Raises:
        AssertionError: If any invariant fails.
    """
    assert_score_invariant(state, where)
    assert_counter_invariant(state, where)
    assert_history_invariant(state, where)
