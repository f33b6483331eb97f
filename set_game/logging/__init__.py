"""Game logging module."""

from .formatters import format_board, format_card, format_cards
from .game_logger import GameLogger

__all__ = [
    "GameLogger",
    "format_board",
    "format_card",
    "format_cards",
]
