# =========================================================
# --- core_state.py ---
# =========================================================

import numpy as np
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from .board import MARBLE, RED, BLACK, EMPTY
from .generator import LegalMoveGenerator
from .layout import TileLayout, TileLocation
from .moves import Coord, MoveRecord, as_coord
from .rules import KulamiRules
from .scoring import ScoreLedger
from .state_invariants import assert_state_invariant
from .undo import MoveHistory

# =========================================================

@dataclass(frozen=True)
class BoardSnapshot:
    """
    Read-only view of a board, sufficient for rendering.

    Attributes:
        tiles (np.ndarray): Tile index per cell (OUT_OF_BOUNDS where uncovered).
        marbles (np.ndarray): Cell code per cell.
        moves (Tuple[Coord, ...]): Move history, oldest first.
        red_score (int): Red's running score.
        black_score (int): Black's running score.
    """
    tiles: np.ndarray
    marbles: np.ndarray
    moves: Tuple[Coord, ...]
    red_score: int
    black_score: int

    @property
    def last_moves(self) -> Tuple[Coord, ...]:
        """The last two moves, which renderers highlight."""
        return self.moves[-2:]


class KulamiMovesMixin:
    """
    Mixin class providing the marble-placing operations:
    - placing and clearing marbles
    - applying and undoing whole moves
    """

    def _place_marble(self, coord: Coord, player: int) -> None:
        """Put a marble on a cell and update the hash."""
        self.marbles[coord.row, coord.col] = MARBLE[player]
        self.zobrist_hash ^= int(self.layout.zobrist[coord.row, coord.col, player])

    def _clear_marble(self, coord: Coord, player: int) -> None:
        """Take a marble off a cell and update the hash."""
        self.marbles[coord.row, coord.col] = EMPTY
        self.zobrist_hash ^= int(self.layout.zobrist[coord.row, coord.col, player])

    def move(self, coord: Coord, is_red: bool) -> MoveRecord:
        """
        Apply a move to the board, if legal.

        Validation finishes before anything is written, so a rejected move
        leaves the board exactly as it was.

        Args:
            coord: Target cell.
            is_red: True for a red marble, False for a black one.

        Returns:
            MoveRecord: The applied move with its inverse delta.

        Raises:
            TurnError, GameOverError, OutOfBoundsError, OccupiedError, TileBlockedError
        """
        coord = as_coord(coord)
        self.rules.validate_move(self, coord, is_red)

        player = RED if is_red else BLACK
        delta = self.ledger.apply(self.tile_at(coord), player)
        record = MoveRecord(player, coord, delta)
        self.history.record_move(record)
        self._place_marble(coord, player)

        self._assert("move")
        return record

    def undo_last_move(self) -> Optional[MoveRecord]:
        """
        Remove the last move from the board, if any.

        Returns:
            The undone MoveRecord, or None if there was nothing to undo.
        """
        record = self.history.pop()
        if record is None:
            return None

        self._clear_marble(record.coord, record.player)
        self.ledger.revert(record.delta)

        self._assert("undo_last_move")
        return record


class KulamiState(KulamiMovesMixin):
    """
    Represents the complete mutable Kulami game state.

    Attributes:
        layout (TileLayout): Tile placement, shared between copies.
        tiles (np.ndarray): Read-only tile index per cell.
        marbles (np.ndarray): Cell code per cell.
        history (MoveHistory): Applied moves with their inverse deltas.
        ledger (ScoreLedger): Majority counters and running scores.
        rules (KulamiRules): Move validator.
        zobrist_hash (int): Zobrist hash of the marbles on the board.
        debug (bool): Enable state invariant assertions.
    """

    def __init__(self, layout: Optional[TileLayout] = None, rules: Optional[KulamiRules] = None, debug: bool = False):
        self.debug: bool = debug
        self.layout: TileLayout = layout or TileLayout.default()
        self.rules: KulamiRules = rules or KulamiRules()
        self.generator: LegalMoveGenerator = LegalMoveGenerator()

        self.tiles: np.ndarray = self.layout.grid
        self.marbles: np.ndarray = self.layout.empty_marbles()
        self.history: MoveHistory = MoveHistory(self.rules.max_moves)
        self.ledger: ScoreLedger = ScoreLedger(self.layout.tile_sizes)
        self.zobrist_hash: int = 0

    @classmethod
    def from_locations(cls, locations: Sequence[TileLocation], **kwargs) -> "KulamiState":
        """Build a fresh board from tile placements (raises LayoutError)."""
        return cls(TileLayout(locations), **kwargs)

    # ---------- Setup / Copy ----------
    def copy(self) -> "KulamiState":
        """Return an independent copy; moves on it never reach this state."""
        new_state = KulamiState(self.layout, self.rules, debug=self.debug)
        new_state.marbles = self.marbles.copy()
        new_state.history = self.history.copy()
        new_state.ledger = self.ledger.copy()
        new_state.zobrist_hash = self.zobrist_hash
        return new_state

    # ---------- Properties ----------
    @property
    def shape(self) -> Tuple[int, int]:
        return self.tiles.shape

    @property
    def moves(self) -> List[Coord]:
        """All moves made thus far."""
        return self.history.coords

    @property
    def last_move(self) -> Optional[Coord]:
        record = self.history.last(1)
        return record.coord if record else None

    @property
    def previous_move(self) -> Optional[Coord]:
        """The move before the last one."""
        record = self.history.last(2)
        return record.coord if record else None

    def last_moves(self, n: int = 2) -> List[Coord]:
        """The last n moves, oldest first."""
        return self.moves[-n:] if n > 0 else []

    @property
    def turn(self) -> int:
        """Player to move: red on an empty board, otherwise the opponent of the last mover."""
        record = self.history.last(1)
        return RED if record is None else 1 - record.player

    @property
    def is_reds_turn(self) -> bool:
        return self.turn == RED

    @property
    def red_score(self) -> int:
        return self.ledger.red

    @property
    def black_score(self) -> int:
        return self.ledger.black

    def score(self, player: int) -> int:
        return self.ledger.scores[player]

    def score_diff(self, is_red: bool) -> int:
        """Own running score minus the opponent's."""
        player = RED if is_red else BLACK
        return self.score(player) - self.score(1 - player)

    def tile_score(self, tile: int) -> int:
        """Majority counter of a tile: positive favours red, negative black."""
        return int(self.ledger.tile_score[tile])

    def tile_at(self, coord: Coord) -> int:
        return int(self.tiles[coord.row, coord.col])

    def cell(self, coord: Coord) -> int:
        """Return the cell code (OUT_OF_BOUNDS, EMPTY, RED_MARBLE or BLACK_MARBLE)."""
        return int(self.marbles[coord.row, coord.col])

    # ---------- Queries ----------
    def legal_moves(self) -> List[Coord]:
        """Return all legal move candidates for the next move."""
        return self.generator.generate_legal_moves(self, self.rules)

    def is_legal_move(self, coord: Coord, is_red: Optional[bool] = None) -> bool:
        if is_red is None:
            is_red = self.is_reds_turn
        return self.rules.is_legal_move(self, as_coord(coord), is_red)

    def is_game_over(self) -> bool:
        return not self.generator.any_move_left(self, self.rules)

    def recompute_scores(self) -> Tuple[int, int]:
        """Recompute (red, black) from the tile majority counters."""
        return self.ledger.recompute()

    def snapshot(self) -> BoardSnapshot:
        """Return a read-only snapshot for rendering."""
        marbles = self.marbles.copy()
        marbles.setflags(write=False)
        return BoardSnapshot(
            tiles=self.tiles,
            marbles=marbles,
            moves=tuple(self.moves),
            red_score=self.red_score,
            black_score=self.black_score,
        )

    # ---------- Zobrist / Hash ----------
    def __hash__(self) -> int:
        """Return the Zobrist hash of the current state."""
        return self.zobrist_hash

    def __eq__(self, other: Any) -> bool:
        """Check equality with another KulamiState."""
        if not isinstance(other, KulamiState):
            return NotImplemented
        return (
            np.array_equal(self.tiles, other.tiles) and
            np.array_equal(self.marbles, other.marbles) and
            self.moves == other.moves
        )

    def update_zobrist_hash(self) -> None:
        """Recompute the Zobrist hash of the current state."""
        h = 0
        for record in self.history:
            h ^= int(self.layout.zobrist[record.coord.row, record.coord.col, record.player])
        self.zobrist_hash = h

    # ---------- Debug / Assertions ----------
    def _assert(self, where: str = "") -> None:
        """Assert state invariants if debug mode is active."""
        if self.debug:
            assert_state_invariant(self, where)

    def __repr__(self) -> str:
        return (f"<KulamiState moves={len(self.history)} "
                f"red={self.red_score} black={self.black_score}>")
