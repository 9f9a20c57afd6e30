"""Non-blocking terminal input and output over a curses-style window."""

from __future__ import annotations

import time

_NO_KEY = -1


class Terminal:
    """Wraps a window offering getch, addstr, clear, refresh and nodelay."""

    def __init__(self, screen) -> None:
        self.screen = screen
        self._pending: str | None = None
        self.screen.nodelay(True)

    def _read(self) -> str | None:
        code = self.screen.getch()
        if code == _NO_KEY:
            return None
        return chr(code)

    def has_char(self) -> bool:
        """Return True if a key is waiting, without consuming it."""
        if self._pending is None:
            self._pending = self._read()
        return self._pending is not None

    def get_char(self) -> str:
        """Return the next key, or an empty string if none is waiting."""
        if self._pending is not None:
            char, self._pending = self._pending, None
            return char
        return self._read() or ""

    def clear(self) -> None:
        self.screen.clear()

    def write(self, text: str) -> None:
        self.screen.addstr(text)

    def delay(self, seconds: float) -> None:
        """Flush the screen, then pause."""
        self.screen.refresh()
        time.sleep(seconds)

    def wait_for_key(self, message: str = "\nPress Any Key to Shut Down\n") -> str:
        """Show *message* and block until a key is pressed; return that key."""
        self.write(message)
        self.screen.refresh()
        self._pending = None
        self.screen.nodelay(False)
        try:
            code = self.screen.getch()
        finally:
            self.screen.nodelay(True)
        return "" if code == _NO_KEY else chr(code)