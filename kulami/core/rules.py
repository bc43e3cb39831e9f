# =========================================================
# --- core_rules.py ---
# =========================================================

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .board import MAX_MOVES, EMPTY, OUT_OF_BOUNDS, RED_MARBLE, RED, BLACK
from .errors import MoveError, TurnError, GameOverError, OutOfBoundsError, OccupiedError, TileBlockedError
from .moves import Coord

if TYPE_CHECKING:
    from .state import KulamiState

# =========================================================

class Rule:
    """Base class for Kulami rules."""

    def __init__(self, rule_id: str, description: str) -> None:
        """
        Initialize a rule.

        Args:
            rule_id: Unique identifier for the rule.
            description: Human-readable description.
        """
        self.id: str = rule_id
        self.description: str = description

    def check(self, state: "KulamiState", **kwargs) -> Union[bool, str, None, "GameResult"]:
        """
        Evaluate the rule on the given state.

        Raises:
            NotImplementedError: Must be implemented in subclasses.
        """
        raise NotImplementedError


# --- Specific Rules ---

class TurnOrderRule(Rule):
    """R1: Colors strictly alternate."""

    def __init__(self) -> None:
        super().__init__("R1", "Players alternate; the first move has no color constraint.")

    def check(self, state: "KulamiState", is_red: bool, **kwargs) -> bool:
        """Return True if a marble of the given color may be played next."""
        last = state.last_move
        if last is None:
            return True
        # The color of the last move is read back from its marble.
        last_is_red = state.marbles[last.row, last.col] == RED_MARBLE
        return last_is_red != is_red


class MarbleSupplyRule(Rule):
    """R2: No move once every marble has been played."""

    def __init__(self, max_moves: int = MAX_MOVES) -> None:
        super().__init__("R2", f"At most {max_moves} marbles are played in total.")
        self.max_moves: int = max_moves

    def check(self, state: "KulamiState", **kwargs) -> bool:
        """Return True if marbles are left."""
        return len(state.history) < self.max_moves


class InBoundsRule(Rule):
    """R3: Marbles go on cells covered by a tile."""

    def __init__(self) -> None:
        super().__init__("R3", "The target must lie on the board.")

    def check(self, state: "KulamiState", coord: Coord, **kwargs) -> bool:
        """Return True if the coordinate is inside the grid and covered by a tile."""
        rows, cols = state.shape
        if not (0 <= coord.row < rows and 0 <= coord.col < cols):
            return False
        return state.tiles[coord.row, coord.col] != OUT_OF_BOUNDS


class EmptyCellRule(Rule):
    """R4: The target cell must be free."""

    def __init__(self) -> None:
        super().__init__("R4", "The target cell must not hold a marble.")

    def check(self, state: "KulamiState", coord: Coord, **kwargs) -> bool:
        return state.marbles[coord.row, coord.col] == EMPTY


class LineOfPlayRule(Rule):
    """R5: Every move after the first shares a row or column with the previous one."""

    def __init__(self) -> None:
        super().__init__("R5", "A move must be in the row or column of the opponent's last move.")

    def check(self, state: "KulamiState", coord: Coord, **kwargs) -> bool:
        last = state.last_move
        return last is None or coord.shares_line(last)


class TileBlockedRule(Rule):
    """R6: The tiles of the two previous moves are blocked."""

    def __init__(self) -> None:
        super().__init__("R6", "The tiles of the last move and of the move before it are blocked.")

    def check(self, state: "KulamiState", coord: Coord, **kwargs) -> Optional[str]:
        """
        Return who blocks the target tile.

        Returns:
            "opponent" if the previous move used that tile, "self" if the move
            two plies earlier did, None if the tile is free.
        """
        tile = state.tile_at(coord)
        last = state.last_move
        if last is not None and tile == state.tile_at(last):
            return "opponent"
        prev = state.previous_move
        if prev is not None and tile == state.tile_at(prev):
            return "self"
        return None


@dataclass(frozen=True)
class GameResult:
    """Encapsulates the outcome of a completed game."""

    winner: Optional[int]  # None for a draw
    red_score: int
    black_score: int
    type: str  # WIN / DRAW / RESIGN


class GameOverRule(Rule):
    """R7: The game ends when no legal move is left or the marbles run out."""

    def __init__(self) -> None:
        super().__init__("R7", "Check if the game is over and return GameResult if so.")

    def check(self, state: "KulamiState", **kwargs) -> Optional[GameResult]:
        if state.legal_moves():
            return None

        red, black = state.red_score, state.black_score
        if red == black:
            return GameResult(None, red, black, "DRAW")
        return GameResult(RED if red > black else BLACK, red, black, "WIN")


class KulamiRules:
    """Aggregates all rules and provides the move validator."""

    def __init__(self, max_moves: int = MAX_MOVES) -> None:
        """
        Initialize all rule instances.

        Args:
            max_moves: Hard ceiling on the number of moves in a game.
        """
        self.max_moves: int = max_moves

        self.R1 = TurnOrderRule()
        self.R2 = MarbleSupplyRule(max_moves)
        self.R3 = InBoundsRule()
        self.R4 = EmptyCellRule()
        self.R5 = LineOfPlayRule()
        self.R6 = TileBlockedRule()
        self.R7 = GameOverRule()

        self.rules = [self.R1, self.R2, self.R3, self.R4, self.R5, self.R6, self.R7]

    def is_turn_of(self, state: "KulamiState", is_red: bool) -> bool:
        return self.R1.check(state, is_red=is_red)

    def marbles_left(self, state: "KulamiState") -> bool:
        return self.R2.check(state)

    def on_board(self, state: "KulamiState", coord: Coord) -> bool:
        return self.R3.check(state, coord=coord)

    def is_empty(self, state: "KulamiState", coord: Coord) -> bool:
        return self.R4.check(state, coord=coord)

    def on_line_of_play(self, state: "KulamiState", coord: Coord) -> bool:
        return self.R5.check(state, coord=coord)

    def blocked_by(self, state: "KulamiState", coord: Coord) -> Optional[str]:
        return self.R6.check(state, coord=coord)

    def game_over(self, state: "KulamiState") -> Optional[GameResult]:
        """Check if the game is over and return GameResult."""
        return self.R7.check(state)

    # ---------- Validation ----------
    def validate_move(self, state: "KulamiState", coord: Coord, is_red: bool) -> None:
        """
        Check a move against every rule without touching the state.

        Raises:
            TurnError: The previous move had the same color.
            GameOverError: No marbles are left.
            OutOfBoundsError: The cell is outside the board.
            OccupiedError: The cell is taken or off the line of play.
            TileBlockedError: The tile is blocked by one of the last two moves.
        """
        if not self.is_turn_of(state, is_red):
            raise TurnError("it is now the other player's turn", coord)
        if not self.marbles_left(state):
            raise GameOverError("game is over, out of marbles", coord)
        if not self.on_board(state, coord):
            raise OutOfBoundsError(f"{coord} is not a legal move, it is off the board", coord)
        if not self.is_empty(state, coord):
            raise OccupiedError(f"{coord} is not a legal move, the space is taken", coord, reason="occupied")
        if not self.on_line_of_play(state, coord):
            raise OccupiedError(
                f"{coord} is not a legal move, it is not in the row or column of {state.last_move}",
                coord,
                reason="line_of_play",
            )
        blocked = self.blocked_by(state, coord)
        if blocked == "opponent":
            raise TileBlockedError(
                f"{coord} is not a legal move, the tile is blocked by the other player",
                coord, tile=state.tile_at(coord), blocked_by=blocked,
            )
        if blocked == "self":
            raise TileBlockedError(
                f"{coord} is not a legal move, the tile is blocked by you",
                coord, tile=state.tile_at(coord), blocked_by=blocked,
            )

    def is_legal_move(self, state: "KulamiState", coord: Coord, is_red: bool) -> bool:
        """Return True if validate_move() accepts the move."""
        try:
            self.validate_move(state, coord, is_red)
        except MoveError:
            return False
        return True
