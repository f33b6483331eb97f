"""Set card game: card generation, set validation and timed sessions."""

__version__ = "0.1.0"
