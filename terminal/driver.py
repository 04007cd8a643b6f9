"""
Terminal driver for TicTacToe.
Handles raw mode, cursor visibility, screen clearing and key reads.

Unix only (termios).
"""

import io
import logging
import os
import sys
import termios
import tty
from typing import Optional, TextIO

from .config import TerminalConfig


log = logging.getLogger("terminal")


class TerminalError(Exception):
    """Base class for terminal failures."""


class TerminalSetupError(TerminalError):
    """Raw mode could not be entered."""


class InputReadError(TerminalError):
    """Reading a key failed or the input stream was closed."""


class TerminalDriver:
    """
    Wraps stdin/stdout of a terminal.

    Use it as a context manager so the original terminal mode is
    restored on every way out of the game:

        with TerminalDriver() as term:
            key = term.read_key()
    """

    def __init__(
        self,
        config: Optional[TerminalConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        """
        Initialize the driver.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
            stdin: Input stream (default: sys.stdin).
            stdout: Output stream (default: sys.stdout).
        """
        self.config = config or TerminalConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.is_raw = False
        self._fd: Optional[int] = None
        self._saved_attrs = None

    def enter_raw_mode(self):
        """
        Switch stdin to raw mode and hide the cursor.

        Raises:
            TerminalSetupError: If stdin is not a terminal or termios fails.
        """
        if self.is_raw:
            return

        try:
            fd = self.stdin.fileno()
        except (AttributeError, ValueError, io.UnsupportedOperation) as e:
            raise TerminalSetupError(f"stdin has no file descriptor: {e}") from e

        if not os.isatty(fd):
            raise TerminalSetupError("stdin is not a terminal")

        try:
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            if self._saved_attrs is not None:
                termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_attrs)
                self._saved_attrs = None
            raise TerminalSetupError(f"could not enter raw mode: {e}") from e

        self._fd = fd
        self.is_raw = True
        self.write(self.config.HIDE_CURSOR)
        log.debug("Raw mode on (fd=%d)", fd)

    def exit_raw_mode(self):
        """Restore the saved terminal mode, show the cursor and clear the screen."""
        if not self.is_raw:
            return

        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
        finally:
            self.is_raw = False
            self._saved_attrs = None
            self.write(self.config.SHOW_CURSOR)
            self.clear_screen()
            log.debug("Raw mode off")

    def clear_screen(self):
        self.write(self.config.CLEAR_SCREEN)

    def read_key(self) -> str:
        """
        Block until one character is available.

        Returns:
            The character read.

        Raises:
            InputReadError: On EOF or an OS level read failure.
        """
        try:
            key = self.stdin.read(1)
        except UnicodeDecodeError:
            # Undecodable byte (Alt combos, non UTF-8 terminal), treated as an unknown key
            log.debug("Undecodable input byte")
            return "\ufffd"
        except (OSError, ValueError) as e:
            raise InputReadError(f"could not read input: {e}") from e

        if not key:
            raise InputReadError("input stream closed")
        return key

    def write(self, text: str):
        self.stdout.write(text)
        self.stdout.flush()

    def __enter__(self):
        """Context manager entry."""
        self.enter_raw_mode()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.exit_raw_mode()
