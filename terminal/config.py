"""
Terminal configuration for TicTacToe.
Escape sequences, drawing characters and every message shown on screen.
"""

from colorama import Cursor, Style
from colorama.ansi import clear_screen


class TerminalConfig:
    """
    Configuration class for terminal output.
    Raw mode does not translate "\\n", so every line break is "\\r\\n".
    """

    # ==================== ESCAPE SEQUENCES ====================
    HIDE_CURSOR = "\033[?25l"
    SHOW_CURSOR = "\033[?25h"
    REVERSE_VIDEO = "\033[7m"
    RESET_STYLE = Style.RESET_ALL
    CLEAR_SCREEN = clear_screen() + Cursor.POS(1, 1)  # clear, then home

    # ==================== LAYOUT ====================
    NEWLINE = "\r\n"
    INDENT = " " * 7  # tabs don't render in raw mode
    CURSOR_BLOCK = "█"  # full block, shown on an empty cursor cell
    COLUMN_SEPARATOR = "|"
    ROW_SEPARATOR = "-"

    INSTRUCTIONS = [
        "- Enter 'q' to quit",
        "- WASD to control up-left-down-right",
        "- SPACE to input move",
    ]

    # ==================== MESSAGES ====================
    CURRENT_PLAYER = "Current Player: {mark}"
    MSG_EXIT = "Exiting..."
    MSG_WIN = "Player '{mark}' wins!"
    MSG_DRAW = "Draw!"
    MSG_OCCUPIED = "Position already filled!"
