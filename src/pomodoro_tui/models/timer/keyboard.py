"""Non-blocking keyboard input for timer controls."""

import codecs
import os
import select
import sys
import termios
import tty
from typing import Optional

from pomodoro_tui.utils.logger import get_logger


class KeyboardHandler:
    """Non-blocking keyboard input handler.

    Bytes are read straight from the file descriptor. Reading through the
    stream's buffer would pull a whole escape sequence or a burst of keys
    into Python, where ``select`` can no longer see it.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self.old_settings = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode so keys arrive unbuffered."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            get_logger().warning("could not enter cbreak mode: %s", e)
            self.old_settings = None

    def get_key(self) -> Optional[str]:
        """
        Get a single keypress without blocking.

        Returns the key character or None if no key pressed. A multi-byte
        character is returned once its last byte has been read.
        """
        readable, _, _ = select.select([self.fd], [], [], 0)
        if not readable:
            return None
        data = os.read(self.fd, 1)
        if not data:
            return None
        return self._decoder.decode(data) or None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None
