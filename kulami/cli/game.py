# =========================================================
# --- cli_game.py ---
# =========================================================

import argparse
import random
from typing import List, Optional

from core.board import RED, BLACK, PLAYER_NAMES
from core.engine import GameEngine
from core.errors import KulamiError, LayoutError
from core.state import KulamiState

from players.player import Player
from players.human import HumanPlayer
from players.random import RandomPlayer
from players.greedy import GreedyPlayer
from players.calculating import CalculatingPlayer

from .cliUtils import ExitGame, clear
from .cliHumanInterface import HumanMoveReader
from .cliHandlers import CLIHandlers

# =========================================================

#: Selectable player types; "random" is the "monkey" opponent
PLAYER_TYPES = ("human", "random", "greedy", "calculating")


class CLISetup:
    """
    Factory and setup utilities for configuring players
    and initializing the game engine for the CLI.
    """

    def __init__(self, rng: Optional[random.Random] = None, show_legal: bool = False):
        self.rng: random.Random = rng or random.Random()
        self.show_legal: bool = show_legal

    def create_player(self, kind: str, slot: int) -> Player:
        """
        Create a player of the given type for a slot.

        Args:
            kind (str): One of PLAYER_TYPES.
            slot (int): Player index (RED or BLACK).

        Raises:
            ValueError: If the type is unknown.
        """
        if kind == "human":
            return HumanPlayer(id=slot, input_func=HumanMoveReader(show_legal=self.show_legal))
        if kind == "random":
            return RandomPlayer(id=slot, rng=self.rng)
        if kind == "greedy":
            return GreedyPlayer(id=slot, rng=self.rng)
        if kind == "calculating":
            return CalculatingPlayer(id=slot)
        raise ValueError(f"unknown player type {kind!r}, expected one of {PLAYER_TYPES}")

    def choose_player(self, slot: int) -> Player:
        """
        Prompt the user to choose a player type for a given slot.

        Args:
            slot (int): Player index (RED or BLACK).
        """
        print(f"\nChoose player for {PLAYER_NAMES[slot]}: 1-Human, 2-Random, 3-Greedy, 4-Calculating")
        while True:
            choice: str = input("Choice (1/2/3/4): ").strip()
            if choice in ("1", "2", "3", "4"):
                return self.create_player(PLAYER_TYPES[int(choice) - 1], slot)
            print("Invalid input, enter 1,2,3,4")

    def setup_engine(self, opponent: Optional[str] = None, ai_player: int = BLACK) -> GameEngine:
        """
        Initialize the game engine with a fresh board and the players.

        Args:
            opponent (Optional[str]): Opponent type. "human" means hot-seat;
                None asks for both players interactively.
            ai_player (int): Slot of the AI opponent.

        Returns:
            GameEngine: Fully configured game engine.
        """
        state = KulamiState()
        if opponent is None:
            players = [self.choose_player(RED), self.choose_player(BLACK)]
        else:
            players = [self.create_player("human", RED), self.create_player("human", BLACK)]
            if opponent != "human":
                players[ai_player] = self.create_player(opponent, ai_player)
                print(f"Playing vs. the {opponent} AI. The AI opponent is playing {PLAYER_NAMES[ai_player]}.")
        return GameEngine(players[RED], players[BLACK], state)


class KulamiCLI:
    """
    Main command-line interface controller for running a Kulami game.
    """

    def __init__(
        self,
        setup: Optional[CLISetup] = None,
        delay: float = 1.0,
        clear_screen: bool = True,
        use_color: bool = True,
    ):
        self.setup = setup or CLISetup()
        self.handlers = CLIHandlers(delay, clear_screen, use_color).handlers
        self.clear_screen = clear_screen

    def play_game(self, engine: GameEngine) -> None:
        """
        Run the game loop and dispatch events to CLI handlers.

        Raises:
            ExitGame: If the user exits the game intentionally.
        """
        for event in engine.play_game():
            handler = self.handlers.get(event["type"])
            if handler:
                handler(event)

    def run(self, opponent: Optional[str] = None, ai_player: int = BLACK) -> int:
        """
        Start the CLI application and run a complete game session.

        Returns:
            int: Process exit code.
        """
        if self.clear_screen:
            clear()
        try:
            engine = self.setup.setup_engine(opponent, ai_player)
            self.play_game(engine)
        except ExitGame:
            print("\nGame exited by player.")
        except KeyboardInterrupt:
            print("\nGame interrupted by user. Exiting...")
        except LayoutError as err:
            print(f"Error initializing board: {err}")
            return 1
        except KulamiError as err:
            print(f"\nAn AI error: {err}")
            return 1
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Kulami in the terminal")
    parser.add_argument("--opponent", choices=PLAYER_TYPES, default=None,
                        help="Opponent type; 'human' plays hot-seat. Asks interactively if omitted.")
    parser.add_argument("--ai-player", choices=["red", "black"], default="black",
                        help="Color played by the AI opponent")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for the AI players")
    parser.add_argument("--delay", type=float, default=1.0, help="Pause in seconds after AI moves")
    parser.add_argument("--show-legal", action="store_true", help="List the legal moves before each human move")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup = CLISetup(rng=random.Random(args.seed), show_legal=args.show_legal)
    cli = KulamiCLI(
        setup,
        delay=args.delay,
        clear_screen=not args.no_clear,
        use_color=not args.no_color,
    )
    return cli.run(args.opponent, RED if args.ai_player == "red" else BLACK)


# ---------------- Main ----------------
if __name__ == "__main__":
    raise SystemExit(main())
