"""Game logger for detailed session replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from set_game.config import GameLogConfig
from set_game.models.card import Board, Card
from set_game.models.session_state import SessionState

from .formatters import format_board, format_cards


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of a session.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, state: SessionState) -> None:
        """Log session start with difficulty and countdown.

        Args:
            state: Session state right after start.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "session": state.session_number,
            "difficulty": state.difficulty.value,
            "time_limit": state.time_limit,
        })

    def log_board_dealt(self, session_num: int, board: Board, reason: str) -> None:
        """Log a freshly dealt board.

        Args:
            session_num: Session number.
            board: Board after dealing.
            reason: "start" or "refresh".
        """
        self._write({
            "type": "board_dealt",
            "session": session_num,
            "reason": reason,
            "board": format_board(board),
        })

    def log_selection(
        self,
        state: SessionState,
        slots: list[int],
        cards: list[Card],
        is_set: bool,
        replacements: list[Card],
    ) -> None:
        """Log the evaluation of a three-card selection.

        Args:
            state: Session state after the selection.
            slots: Board slots that were selected.
            cards: Cards that were evaluated.
            is_set: Whether the cards formed a set.
            replacements: Cards dealt into the slots (empty if not a set).
        """
        self._write({
            "type": "selection",
            "session": state.session_number,
            "slots": slots,
            "cards": format_cards(cards),
            "result": "set" if is_set else "not_a_set",
            "replacements": format_cards(replacements),
            "set_count": state.set_count,
            "remaining_seconds": state.remaining_seconds,
        })

    def log_refresh(self, state: SessionState) -> None:
        """Log a board refresh request.

        Args:
            state: Session state at the time of refresh.
        """
        self._write({
            "type": "refresh",
            "session": state.session_number,
            "refresh_count": state.refresh_count,
            "remaining_seconds": state.remaining_seconds,
        })

    def log_time_up(self, state: SessionState) -> None:
        """Log countdown expiry.

        Args:
            state: Session state after expiry.
        """
        self._write({
            "type": "time_up",
            "session": state.session_number,
            "set_count": state.set_count,
        })

    def log_session_end(
        self,
        total_sessions: int,
        set_counts: dict[int, int],
    ) -> None:
        """Log end of all sessions with final results.

        Args:
            total_sessions: Number of sessions played.
            set_counts: Dict mapping session number to sets found.
        """
        self._write({
            "type": "session_end",
            "total_sessions": total_sessions,
            "set_counts": {str(k): v for k, v in set_counts.items()},
            "total_sets": sum(set_counts.values()),
        })
