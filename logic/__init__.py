"""
Logic module for terminal TicTacToe.
Handles game state, rules and win detection.
"""

from .config import GameConfig
from .game_state import GameState, Mark, Direction, Outcome, OutcomeKind, CellOccupied
from .win_checker import WinChecker, winning_lines
