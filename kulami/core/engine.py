# =========================================================
# --- core_engine.py ---
# =========================================================

from typing import Any, Dict, Optional

from players.player import Player

from .board import RED
from .errors import MoveError
from .moves import Coord, MoveRecord, Resign
from .rules import GameResult
from .state import KulamiState

# ========================================================

class EngineEvents:
    """
    Event factory for game engine events.
    Returns structured dictionaries for UI, logging, or tests.
    """

    def game_start(self, players: list[str], state: KulamiState) -> Dict[str, Any]:
        """Event: A game is about to start."""
        return {
            "type": "game_start",
            "players": players,
            "state": state,
        }

    def turn_start(self, turn: int, round: int, state: KulamiState, player_type: str) -> Dict[str, Any]:
        """Event: A player is asked for a move."""
        return {
            "type": "turn_start",
            "turn": turn,
            "round": round,
            "state": state,
            "player_type": player_type,
        }

    def chosen_move(self, turn: int, move: Coord, is_human: bool) -> Dict[str, Any]:
        """Event: Player has chosen a move."""
        return {
            "type": "chosen_move",
            "turn": turn,
            "move": move,
            "is_human": is_human,
        }

    def illegal_move(self, turn: int, move: Any, error: MoveError) -> Dict[str, Any]:
        """Event: The chosen move was rejected; the player is asked again."""
        return {
            "type": "illegal_move",
            "turn": turn,
            "move": move,
            "error": error,
        }

    def apply_move(self, record: MoveRecord, state: KulamiState) -> Dict[str, Any]:
        """Event: A move has been applied to the game state."""
        return {
            "type": "apply_move",
            "move": record,
            "state": state,
        }

    def resign(self, turn: int) -> Dict[str, Any]:
        """Event: A player resigned."""
        return {
            "type": "resign",
            "turn": turn,
        }

    def game_over(self, state: KulamiState, result: GameResult, player_type: Optional[str]) -> Dict[str, Any]:
        """Event: The game has ended."""
        return {
            "type": "game_over",
            "state": state,
            "winner": result.winner,
            "player_type": player_type,
            "red_score": result.red_score,
            "black_score": result.black_score,
            "result_type": result.type,
        }


class GameEngine:
    """
    Kulami game engine managing players, game state, turns and events.

    Attributes:
        players (list): Red and black player objects.
        state (KulamiState): Authoritative game state.
        emit_enabled (bool): If True, yield events during play.
        events (EngineEvents): Event generator for logging/UI.
        result (Optional[GameResult]): Outcome once the game has ended.
    """

    def __init__(
        self,
        red_player: Player,
        black_player: Player,
        state: Optional[KulamiState] = None,
        emit_enabled: bool = True,
    ):
        self.players: list[Player] = [red_player, black_player]
        self.state: KulamiState = state or KulamiState()
        self.emit_enabled: bool = emit_enabled
        self.events: EngineEvents = EngineEvents()
        self.result: Optional[GameResult] = None

    # ---------- Properties ----------
    @property
    def turn(self) -> int:
        """Index of the active player (RED or BLACK)."""
        return self.state.turn

    @property
    def player(self) -> Player:
        """Return the current player object."""
        return self.players[self.turn]

    @property
    def round(self) -> int:
        """Round number; a round is one red and one black move."""
        return len(self.state.history) // 2 + 1

    @property
    def legal_moves(self) -> list[Coord]:
        return self.state.legal_moves()

    def get_player_type(self, player: Optional[int]) -> Optional[str]:
        """Return string representation of a player."""
        if player is None:
            return None
        return str(self.players[player])

    # ---------- Game end ----------
    def game_finished(self) -> Optional[GameResult]:
        """Check if the game is over, returning a GameResult if so."""
        return self.state.rules.game_over(self.state)

    def resign(self, player: int) -> GameResult:
        """Return the result of the given player resigning."""
        return GameResult(1 - player, self.state.red_score, self.state.black_score, "RESIGN")

    # ---------- Event Emission ----------
    def emit(self, event: dict) -> Any:
        """Yield an event if emission is enabled."""
        if self.emit_enabled:
            yield event

    # ---------- Game Loop ----------
    def play_from_state(self, max_turns: Optional[int] = None):
        """
        Play the game from the current state, yielding events.

        Illegal moves from a human player are reported and asked again;
        any other player choosing an illegal move is a bug and propagates.

        Args:
            max_turns (Optional[int]): Maximum moves to play. None = no limit.

        Yields:
            dict: Engine events describing the game progression.

        Returns:
            Optional[GameResult]: The outcome, or None if stopped by max_turns.
        """
        game_result = self.game_finished()
        turns_played = 0

        while not game_result:
            if max_turns is not None and turns_played >= max_turns:
                break

            turn = self.turn
            player = self.player
            yield from self.emit(self.events.turn_start(turn, self.round, self.state, self.get_player_type(turn)))

            choice = player.select_move(self.state.copy())
            if isinstance(choice, Resign):
                game_result = self.resign(turn)
                yield from self.emit(self.events.resign(turn))
                break

            yield from self.emit(self.events.chosen_move(turn, choice, player.is_human))
            try:
                record = self.state.move(choice, turn == RED)
            except MoveError as err:
                if not player.is_human:
                    raise
                yield from self.emit(self.events.illegal_move(turn, choice, err))
                continue

            yield from self.emit(self.events.apply_move(record, self.state))
            turns_played += 1
            game_result = self.game_finished()

        self.result = game_result
        if game_result:
            yield from self.emit(self.events.game_over(
                self.state, game_result, self.get_player_type(game_result.winner)
            ))
        return game_result

    def play_game(self, max_turns: Optional[int] = None):
        """
        Announce the players and play the game to its end.

        Yields:
            dict: Engine events describing the game progression.
        """
        yield from self.emit(self.events.game_start([str(p) for p in self.players], self.state))
        return (yield from self.play_from_state(max_turns=max_turns))
