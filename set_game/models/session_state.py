"""Session state models."""

from enum import Enum

from pydantic import BaseModel


class Difficulty(str, Enum):
    """Board difficulty."""

    EASY = "easy"  # Style fixed, smaller board
    STANDARD = "standard"


class CellState(str, Enum):
    """State of a single board slot."""

    EMPTY = "empty"
    OCCUPIED = "occupied"
    SELECTED = "selected"


class SessionState(BaseModel):
    """Mutable state of one game session."""

    session_number: int = 1
    difficulty: Difficulty = Difficulty.STANDARD

    # Countdown
    time_limit: int = 0
    remaining_seconds: int = 0
    is_running: bool = False
    timed_out: bool = False  # Set only when the countdown reaches zero

    # Progress
    set_count: int = 0
    refresh_count: int = 0
    refresh_enabled: bool = False

    @property
    def is_easy(self) -> bool:
        """Check if the session uses easy difficulty."""
        return self.difficulty == Difficulty.EASY

    @property
    def is_expired(self) -> bool:
        """Check if the countdown has run out."""
        return self.timed_out

    def reset_for_new_session(self, difficulty: Difficulty, time_limit: int) -> None:
        """Reset progress and start the countdown."""
        self.difficulty = difficulty
        self.time_limit = time_limit
        self.remaining_seconds = time_limit
        self.is_running = True
        self.timed_out = False
        self.set_count = 0
        self.refresh_count = 0
        self.refresh_enabled = True

    def stop(self) -> None:
        """Stop the countdown."""
        self.is_running = False
        self.remaining_seconds = 0

    def __str__(self) -> str:
        parts = [f"Session {self.session_number}", f"[{self.difficulty.value}]"]
        parts.append(f"sets={self.set_count}")
        parts.append(f"time={self.remaining_seconds}s")
        if not self.is_running:
            parts.append("[STOPPED]")
        return " ".join(parts)
