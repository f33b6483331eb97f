"""Game logic."""

from .generator import CardGenerator
from .session import GameSession, SelectionOutcome, SelectionStatus
from .validator import (
    SetValidator,
    ValidationResult,
    find_all_sets,
    find_first_set,
    is_set,
)

__all__ = [
    "CardGenerator",
    "GameSession",
    "SelectionOutcome",
    "SelectionStatus",
    "SetValidator",
    "ValidationResult",
    "find_all_sets",
    "find_first_set",
    "is_set",
]
