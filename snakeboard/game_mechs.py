"""Shared game state: flags, score, board size and the latest key."""

from __future__ import annotations


class GameMechs:
    """Holds the state that every part of the game consults."""

    def __init__(self, board_x: int = 30, board_y: int = 15, terminal=None) -> None:
        self.board_x = board_x
        self.board_y = board_y
        self.terminal = terminal
        self.input = ""
        self.exit_flag = False
        self.lose_flag = False
        self.score = 0

    def read_input(self) -> str:
        """Take a key from the terminal if one is waiting; return the current input."""
        if self.terminal is not None and self.terminal.has_char():
            self.input = self.terminal.get_char()
        return self.input

    def clear_input(self) -> None:
        self.input = ""

    def set_exit(self) -> None:
        self.exit_flag = True

    def set_lose(self) -> None:
        """Mark the game as lost, which also ends it."""
        self.lose_flag = True
        self.exit_flag = True

    def increment_score(self, amount: int = 1) -> None:
        self.score += amount