"""Game library, play queue, history and scoreboards, with small text games."""

__version__ = "0.1.0"