"""A terminal snake game with wraparound walls and two kinds of food."""

__version__ = "0.1.0"