"""
Terminal module for TicTacToe.
Handles raw-mode input and drawing the board.
"""

from .config import TerminalConfig
from .driver import TerminalDriver, TerminalError, TerminalSetupError, InputReadError
from .renderer import Renderer
