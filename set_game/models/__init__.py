"""Game models."""

from .card import (
    Board,
    Card,
    CardAttributes,
    Color,
    Count,
    Shape,
    Style,
    identity_domain,
)
from .session_state import CellState, Difficulty, SessionState

__all__ = [
    "Board",
    "Card",
    "CardAttributes",
    "Color",
    "Count",
    "Shape",
    "Style",
    "identity_domain",
    "CellState",
    "Difficulty",
    "SessionState",
]
