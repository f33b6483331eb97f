"""Logging utilities and session display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from set_game.game.session import SelectionOutcome
    from set_game.models.card import Board
    from set_game.models.session_state import SessionState


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class SessionDisplay:
    """Display session progress to stdout."""

    def __init__(self, show_board: bool = False):
        """Initialize display.

        Args:
            show_board: Whether to print the board after each deal
        """
        self.show_board = show_board

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_session_start(self, state: "SessionState", num_sessions: int) -> None:
        """Print session start message."""
        self.print_separator()
        print(
            f"SESSION {state.session_number}/{num_sessions} "
            f"[{state.difficulty.value}] {state.time_limit}s"
        )
        self.print_separator()

    def print_board(self, board: "Board") -> None:
        """Print the board slot by slot (if show_board is enabled)."""
        if not self.show_board:
            return

        print("\nBoard:")
        for slot in range(board.size):
            card = board.get(slot)
            print(f"  {slot + 1:2d}: {card if card is not None else '-'}")

    def print_set_found(self, outcome: "SelectionOutcome") -> None:
        """Print a found set."""
        cards = ", ".join(str(c) for c in outcome.cards)
        print(f"  {outcome.message} {cards}")

    def print_refresh(self, state: "SessionState") -> None:
        """Print a board refresh."""
        print(f"  No set on board, refreshed (#{state.refresh_count})")

    def print_session_end(self, state: "SessionState") -> None:
        """Print session results."""
        print(f"\nSession {state.session_number} finished: {state.set_count} set(s) found")

    def print_final_results(self, set_counts: dict[int, int]) -> None:
        """Print results across all sessions."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        for session_num, count in sorted(set_counts.items()):
            print(f"  Session {session_num}: {count} set(s)")
        print(f"  Total: {sum(set_counts.values())} set(s)")
