"""
Main game script for terminal TicTacToe.

This script ties together:
- Logic (game state, win detection)
- Terminal (raw-mode input, rendering)

Two players share the keyboard: WASD moves the cursor, SPACE places
a mark, 'q' quits.
"""

import argparse
import logging
import sys
import time
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.game_state import GameState, CellOccupied, Outcome, OutcomeKind

# Terminal imports
from terminal.config import TerminalConfig
from terminal.driver import TerminalDriver, TerminalSetupError, InputReadError
from terminal.renderer import Renderer


__version__ = "1.0.0"

log = logging.getLogger("game_loop")


class TicTacToeGame:
    """
    Main controller for one game.

    Game flow:
    1. Draw the board
    2. Read one key
    3. Move the cursor or place a mark
    4. Redraw and evaluate the board
    5. Repeat until quit, win or draw
    """

    def __init__(
        self,
        terminal,
        renderer: Optional[Renderer] = None,
        config: Optional[GameConfig] = None,
    ):
        """
        Initialize the game.

        Args:
            terminal: Something with read_key(), write() and clear_screen(),
                normally a TerminalDriver already in raw mode.
            renderer: Screen renderer. Uses defaults if not provided.
            config: Game configuration. Uses defaults if not provided.
        """
        self.terminal = terminal
        self.renderer = renderer or Renderer()
        self.config = config or GameConfig()
        self.game_state = GameState(
            width=self.config.BOARD_SIZE,
            height=self.config.BOARD_SIZE,
            config=self.config,
        )

    def run(self) -> Outcome:
        """
        Play until the game ends.

        Returns:
            The terminal Outcome (QUIT, WIN or DRAW).

        Raises:
            InputReadError: If the terminal stops delivering keys.
        """
        log.info("Starting %dx%d game", self.game_state.width, self.game_state.height)
        self.renderer.draw(self.terminal, self.game_state)

        while True:
            key = self.terminal.read_key()
            self._process_key(key)
            self.renderer.draw(self.terminal, self.game_state)

            outcome = self.game_state.evaluate_outcome(key)
            if outcome.is_terminal:
                self._show_outcome(outcome)
                return outcome

    def _process_key(self, key: str):
        try:
            self.game_state.handle_input(key)
        except CellOccupied as e:
            log.debug("%s", e)
            self.terminal.write(self.renderer.occupied_notice())
            self._pause(self.config.NOTICE_DELAY)

    def _show_outcome(self, outcome: Outcome):
        log.info(
            "Game over: %s%s after %d moves",
            outcome.kind.value,
            f" ({outcome.winner.symbol})" if outcome.winner else "",
            self.game_state.move_count,
        )
        self.terminal.write(self.renderer.outcome_message(outcome))

        if outcome.kind == OutcomeKind.QUIT:
            self._pause(self.config.QUIT_DELAY)
        else:
            self._pause(self.config.END_DELAY)

    def _pause(self, seconds: float):
        if seconds > 0:
            time.sleep(seconds)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Terminal TicTacToe")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help=f"Board size NxN ({GameConfig.MIN_BOARD_SIZE}-{GameConfig.MAX_BOARD_SIZE})"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the short pauses after messages"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write diagnostic logs to this file"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for --log-file"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    if not GameConfig.MIN_BOARD_SIZE <= args.size <= GameConfig.MAX_BOARD_SIZE:
        parser.error(
            f"--size must be between {GameConfig.MIN_BOARD_SIZE} and {GameConfig.MAX_BOARD_SIZE}"
        )
    return args


def setup_logging(log_file: Optional[str], level: str = "INFO"):
    """
    Send logs to a file if one is given.
    stdout is the game screen, so nothing is logged to the console.
    """
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level, logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_file, args.log_level)

    config = GameConfig()
    config.BOARD_SIZE = args.size
    if args.no_delay:
        config.disable_delays()

    terminal_config = TerminalConfig()
    driver = TerminalDriver(terminal_config)

    try:
        with driver:
            game = TicTacToeGame(driver, Renderer(terminal_config), config)
            game.run()
    except TerminalSetupError as e:
        log.error("Error configuring terminal: %s", e)
        print(f"Error configuring terminal: {e}", file=sys.stderr)
        return 1
    except InputReadError as e:
        log.error("Error reading input: %s", e)
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        log.info("Interrupted")

    return 0


if __name__ == "__main__":
    sys.exit(main())
