"""
Game configuration for terminal TicTacToe.
Board size, key bindings and the cosmetic pauses between screens.
"""


class GameConfig:
    """
    Configuration class for game rules and controls.
    Override values on an instance (the CLI does this for --size / --no-delay).
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is 3x3, the win check works for any NxN
    BOARD_SIZE = 3
    MIN_BOARD_SIZE = 3
    MAX_BOARD_SIZE = 9  # bigger boards don't fit a normal terminal

    # ==================== KEY BINDINGS ====================
    # Each entry lists every character that triggers the action
    KEYS_UP = "wW"
    KEYS_LEFT = "aA"
    KEYS_DOWN = "sS"
    KEYS_RIGHT = "dD"
    KEY_PLACE = " "
    KEY_QUIT = "q"  # lowercase only

    # ==================== DELAYS (seconds) ====================
    QUIT_DELAY = 0.3    # after "Exiting..."
    END_DELAY = 0.5     # after a win or a draw
    NOTICE_DELAY = 0.5  # after "Position already filled!"

    def disable_delays(self):
        """Turn off all cosmetic pauses (used by --no-delay and in tests)."""
        self.QUIT_DELAY = 0.0
        self.END_DELAY = 0.0
        self.NOTICE_DELAY = 0.0
