"""
Game state management for terminal TicTacToe.
Tracks the board, the cursor, the current player and the move count.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig
from .win_checker import WinChecker


class Mark(Enum):
    """What a cell can hold. The values are the codes stored in the grid."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        """Character shown on screen for this mark."""
        return " " if self == Mark.EMPTY else self.name

    def opposite(self) -> "Mark":
        """Get the opposite player."""
        return Mark.O if self == Mark.X else Mark.X


class Direction(Enum):
    """Cursor directions as (dx, dy) steps."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class OutcomeKind(Enum):
    CONTINUE = "continue"
    QUIT = "quit"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating the board after one input.
    """
    kind: OutcomeKind
    winner: Optional[Mark] = None  # Only set for WIN

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.CONTINUE


class CellOccupied(Exception):
    """Raised when placing a mark on a cell that already holds one."""

    def __init__(self, x: int, y: int, mark: Mark):
        super().__init__(f"Cell ({x}, {y}) is already occupied by {mark.symbol}")
        self.x = x
        self.y = y
        self.mark = mark


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The board (height x width grid of mark codes)
    - Cursor position (x = column, y = row)
    - Current player
    - How many marks have been placed
    """

    width: int = GameConfig.BOARD_SIZE
    height: int = GameConfig.BOARD_SIZE
    config: GameConfig = field(default_factory=GameConfig, repr=False)

    # Filled in by __post_init__
    grid: np.ndarray = field(init=False, repr=False, compare=False)
    cursor_x: int = field(init=False)
    cursor_y: int = field(init=False)

    current_player: Mark = Mark.X
    move_count: int = 0

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False)

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Invalid board size {self.width}x{self.height}")

        self.grid = np.full((self.height, self.width), Mark.EMPTY.value, dtype=np.int8)

        # Start with the cursor in the middle
        self.cursor_x = self.width // 2
        self.cursor_y = self.height // 2

    @property
    def cursor(self) -> Tuple[int, int]:
        return self.cursor_x, self.cursor_y

    def get_cell(self, x: int, y: int) -> Mark:
        """Get the mark at column x, row y."""
        return Mark(int(self.grid[y, x]))

    def other_player(self) -> Mark:
        return self.current_player.opposite()

    def move_cursor(self, direction: Direction):
        """
        Move the cursor one step and clamp it to the board.

        Args:
            direction: Where to move. Moving off the edge leaves the
                cursor on the edge (no wraparound).
        """
        dx, dy = direction.value
        self.cursor_x = min(max(self.cursor_x + dx, 0), self.width - 1)
        self.cursor_y = min(max(self.cursor_y + dy, 0), self.height - 1)

    def place_mark(self):
        """
        Place the current player's mark under the cursor.

        Raises:
            CellOccupied: If the cell already holds a mark. The state is
                left untouched in that case.
        """
        x, y = self.cursor
        existing = self.get_cell(x, y)
        if existing != Mark.EMPTY:
            raise CellOccupied(x, y, existing)

        self.grid[y, x] = self.current_player.value
        self.move_count += 1
        self.current_player = self.other_player()

    def handle_input(self, symbol: str):
        """
        Apply one input symbol to the state.

        WASD moves the cursor, space places a mark, anything else
        (quit included) leaves the state alone.

        Raises:
            CellOccupied: From place_mark().
        """
        if symbol in self.config.KEYS_UP:
            self.move_cursor(Direction.UP)
        elif symbol in self.config.KEYS_LEFT:
            self.move_cursor(Direction.LEFT)
        elif symbol in self.config.KEYS_DOWN:
            self.move_cursor(Direction.DOWN)
        elif symbol in self.config.KEYS_RIGHT:
            self.move_cursor(Direction.RIGHT)
        elif symbol == self.config.KEY_PLACE:
            self.place_mark()

    def check_win(self) -> bool:
        return self.win_checker.check_winner(self.grid) is not None

    def is_full(self) -> bool:
        return self.win_checker.is_full(self.grid)

    def evaluate_outcome(self, last_input: str) -> Outcome:
        """
        Decide whether the game goes on after the last input.

        Order matters: quit beats everything, then win, then draw.

        Args:
            last_input: The symbol that was just processed.

        Returns:
            The Outcome. A win is credited to other_player(), the one who
            just moved, because place_mark() already switched turns.
        """
        if last_input == self.config.KEY_QUIT:
            return Outcome(OutcomeKind.QUIT)
        if self.check_win():
            return Outcome(OutcomeKind.WIN, winner=self.other_player())
        if self.is_full():
            return Outcome(OutcomeKind.DRAW)
        return Outcome(OutcomeKind.CONTINUE)
