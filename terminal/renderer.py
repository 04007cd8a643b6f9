"""
Renderer for terminal TicTacToe.
Turns a GameState into the text drawn after every key press.
"""

from typing import Optional

from logic.game_state import GameState, Mark, Outcome, OutcomeKind
from .config import TerminalConfig


class Renderer:
    """
    Builds screen text for the game.

    Frame layout:
    - Instruction header
    - The grid, "|" between columns and "-" lines between rows
    - "Current Player: X" trailer
    """

    def __init__(self, config: Optional[TerminalConfig] = None):
        self.config = config or TerminalConfig()

    def instructions(self) -> str:
        nl = self.config.NEWLINE
        return nl.join(self.config.INSTRUCTIONS) + nl + nl

    def render_cell(self, state: GameState, x: int, y: int) -> str:
        """
        Text for one cell.

        The cursor cell is a solid block when empty, or the mark in
        reverse video when occupied.
        """
        mark = state.get_cell(x, y)
        if (x, y) != state.cursor:
            return mark.symbol
        if mark == Mark.EMPTY:
            return self.config.CURSOR_BLOCK
        return f"{self.config.REVERSE_VIDEO}{mark.symbol}{self.config.RESET_STYLE}"

    def render_board(self, state: GameState) -> str:
        cfg = self.config
        separator = cfg.INDENT + cfg.ROW_SEPARATOR * (state.width * 2 - 1) + cfg.NEWLINE

        rows = []
        for y in range(state.height):
            cells = [self.render_cell(state, x, y) for x in range(state.width)]
            rows.append(cfg.INDENT + cfg.COLUMN_SEPARATOR.join(cells) + cfg.NEWLINE)

        return separator.join(rows)

    def render(self, state: GameState) -> str:
        """Full frame: instructions, board and current player."""
        cfg = self.config
        return (
            self.instructions()
            + self.render_board(state)
            + cfg.NEWLINE
            + cfg.CURRENT_PLAYER.format(mark=state.current_player.symbol)
        )

    def outcome_message(self, outcome: Outcome) -> str:
        """
        Message appended below the frame when the game ends.

        Returns:
            The message, or "" for an outcome that does not end the game.
        """
        cfg = self.config
        if outcome.kind == OutcomeKind.QUIT:
            text = cfg.MSG_EXIT
        elif outcome.kind == OutcomeKind.WIN:
            text = cfg.MSG_WIN.format(mark=outcome.winner.symbol)
        elif outcome.kind == OutcomeKind.DRAW:
            text = cfg.MSG_DRAW
        else:
            return ""
        return cfg.NEWLINE + cfg.NEWLINE + text

    def occupied_notice(self) -> str:
        return self.config.NEWLINE + self.config.NEWLINE + self.config.MSG_OCCUPIED

    def draw(self, terminal, state: GameState):
        """Clear the screen and draw the current frame."""
        terminal.clear_screen()
        terminal.write(self.render(state))
