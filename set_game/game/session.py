"""Game session: board, countdown and three-card selection."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from set_game.config import Config
from set_game.errors import SessionStateError
from set_game.logging import GameLogger
from set_game.models.card import Board, Card
from set_game.models.session_state import CellState, Difficulty, SessionState

from .generator import CardGenerator
from .validator import SET_SIZE, SetValidator

logger = logging.getLogger(__name__)

SET_MESSAGE = "SET!"
NOT_A_SET_MESSAGE = "Not a Set"


class SelectionStatus(str, Enum):
    """Outcome of selecting a board slot."""

    SELECTED = "selected"
    DESELECTED = "deselected"
    SET_FOUND = "set_found"
    NOT_A_SET = "not_a_set"


@dataclass
class SelectionOutcome:
    """Result of GameSession.select()."""

    status: SelectionStatus
    slots: list[int] = field(default_factory=list)
    cards: list[Card] = field(default_factory=list)
    replacements: list[Card] = field(default_factory=list)
    message: str = ""

    @property
    def is_evaluated(self) -> bool:
        """Check if a full selection was judged."""
        return self.status in (SelectionStatus.SET_FOUND, SelectionStatus.NOT_A_SET)


class GameSession:
    """Owns the board, the countdown and the current selection.

    The caller drives the clock by calling tick(); nothing runs in the
    background.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize session.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for card generation
        """
        self.config = config or Config()
        self.game_logger = game_logger

        self.generator = CardGenerator(
            rng=rng,
            easy_style=self.config.rules.easy_style,
            include_count=self.config.rules.count_in_identity,
        )
        self.validator = SetValidator()

        self.state = SessionState(difficulty=self.config.rules.difficulty)
        self.board = Board(self.config.board.size_for(self.state.difficulty))
        self._selected: list[int] = []

        self._on_set_found: Callable[[SelectionOutcome], None] | None = None
        self._on_time_up: Callable[[SessionState], None] | None = None

    def set_callbacks(
        self,
        on_set_found: Callable[[SelectionOutcome], None] | None = None,
        on_time_up: Callable[[SessionState], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_set_found: Called after a set is found and replaced
            on_time_up: Called when the countdown reaches zero
        """
        self._on_set_found = on_set_found
        self._on_time_up = on_time_up

    # === Lifecycle ===

    def start(
        self,
        difficulty: Difficulty | None = None,
        time_limit: int | None = None,
    ) -> None:
        """Start a new session and deal a fresh board.

        Args:
            difficulty: Board difficulty (uses config if not specified)
            time_limit: Countdown in seconds (uses config if not specified)
        """
        difficulty = difficulty or self.config.rules.difficulty
        if time_limit is None:
            time_limit = self.config.timer.time_limit
        if time_limit <= 0:
            raise ValueError(f"Time limit must be positive: {time_limit}")

        # Deal first so a failed deal leaves the previous state untouched
        board = self._new_board(difficulty)

        self.state.reset_for_new_session(difficulty, time_limit)
        self.board = board
        self._selected = []

        logger.info(
            f"Session {self.state.session_number} started "
            f"({difficulty.value}, {time_limit}s)"
        )
        if self.game_logger:
            self.game_logger.log_session_start(self.state)

        self._log_deal("start")

    def stop(self) -> None:
        """Stop the countdown and clear the board."""
        self.state.stop()
        self.state.refresh_enabled = False
        self._selected = []
        self.board.clear()
        logger.info(f"Session {self.state.session_number} stopped")

    def reset(self) -> None:
        """Stop and start again with the same difficulty and time limit."""
        difficulty = self.state.difficulty
        time_limit = self.state.time_limit or self.config.timer.time_limit
        self.stop()
        self.start(difficulty, time_limit)

    def tick(self, seconds: int | None = None) -> int:
        """Advance the countdown.

        Args:
            seconds: Seconds elapsed (uses config tick if not specified)

        Returns:
            Remaining seconds (never negative)

        Raises:
            ValueError: seconds is negative.
        """
        seconds = self.config.timer.tick_seconds if seconds is None else seconds
        if seconds < 0:
            raise ValueError(f"Tick must not be negative: {seconds}")

        if not self.state.is_running:
            return self.state.remaining_seconds

        self.state.remaining_seconds = max(0, self.state.remaining_seconds - seconds)

        if self.state.remaining_seconds <= 0:
            self._expire()
        return self.state.remaining_seconds

    def _expire(self) -> None:
        """Stop play once the countdown is over."""
        self.state.stop()
        self.state.timed_out = True
        self.state.refresh_enabled = False
        self._selected = []

        logger.info(
            f"Time up for session {self.state.session_number}: "
            f"{self.state.set_count} set(s) found"
        )
        if self.game_logger:
            self.game_logger.log_time_up(self.state)
        if self._on_time_up:
            self._on_time_up(self.state)

    # === Board ===

    def _new_board(self, difficulty: Difficulty) -> Board:
        """Build a full board of unique cards for a difficulty.

        Raises:
            DomainExhaustedError: The board is larger than the free identities.
        """
        board = Board(self.config.board.size_for(difficulty))
        cards = self.generator.generate_board(board.size, difficulty == Difficulty.EASY)
        for card in cards:
            board.add(card)
        return board

    def _deal(self, reason: str) -> None:
        """Replace the board with a fresh deal."""
        self.board = self._new_board(self.state.difficulty)
        self._selected = []
        self._log_deal(reason)

    def _log_deal(self, reason: str) -> None:
        logger.debug(f"Board dealt ({reason}): {self.board}")
        if self.game_logger:
            self.game_logger.log_board_dealt(self.state.session_number, self.board, reason)

    def refresh(self) -> None:
        """Replace the whole board with a new deal.

        Raises:
            SessionStateError: Refresh is disabled (session stopped or expired).
        """
        if not self.state.refresh_enabled:
            raise SessionStateError("Refresh is not available")

        self.state.refresh_count += 1
        logger.info(f"Board refreshed (#{self.state.refresh_count})")
        if self.game_logger:
            self.game_logger.log_refresh(self.state)

        self._deal("refresh")

    def cell_state(self, slot: int) -> CellState:
        """Get the state of a board slot."""
        if self.board.get(slot) is None:
            return CellState.EMPTY
        if slot in self._selected:
            return CellState.SELECTED
        return CellState.OCCUPIED

    def selected_slots(self) -> list[int]:
        """Get currently selected slots in selection order."""
        return list(self._selected)

    def hint(self) -> tuple[int, int, int] | None:
        """Get the slots of the first valid set on the board."""
        found = self.validator.find_first_set(self.board.cards())
        if found is None:
            return None
        # Identities are unique on the board, so each maps to one slot
        slot_by_identity = {
            self.board.get(s).identity: s for s in self.board.occupied_slots()
        }
        a, b, c = (slot_by_identity[card.identity] for card in found)
        return (a, b, c)

    # === Selection ===

    def select(self, slot: int) -> SelectionOutcome:
        """Toggle a slot's selection and judge a full selection.

        Args:
            slot: Board slot index

        Returns:
            SelectionOutcome

        Raises:
            SessionStateError: The session is not running.
            IndexError: The slot is out of range.
            ValueError: The slot is empty.
        """
        if not self.state.is_running:
            raise SessionStateError("Session is not running")
        if self.board.get(slot) is None:
            raise ValueError(f"Slot {slot} is empty")

        if slot in self._selected:
            self._selected.remove(slot)
            return SelectionOutcome(status=SelectionStatus.DESELECTED, slots=[slot])

        self._selected.append(slot)
        if len(self._selected) < SET_SIZE:
            return SelectionOutcome(status=SelectionStatus.SELECTED, slots=[slot])

        # All three return to occupied whatever the result
        slots = self._selected
        self._selected = []
        return self._evaluate(slots)

    def _evaluate(self, slots: list[int]) -> SelectionOutcome:
        """Judge three selected slots, replacing them on a set."""
        cards = [self.board.get(s) for s in slots]
        result = self.validator.validate(cards)

        if not result.is_valid:
            logger.debug(f"Not a set: {result.error_message}")
            if self.game_logger:
                self.game_logger.log_selection(self.state, slots, cards, False, [])
            return SelectionOutcome(
                status=SelectionStatus.NOT_A_SET,
                slots=slots,
                cards=cards,
                message=NOT_A_SET_MESSAGE,
            )

        self.state.set_count += 1

        # Free the old identities before generating replacements
        for s in slots:
            self.board.remove(s)
        replacements: list[Card] = []
        for s in slots:
            card = self.generator.generate_card(self.board.identities(), self.state.is_easy)
            self.board.place(s, card)
            replacements.append(card)

        logger.info(
            f"Set found ({self.state.set_count}): "
            f"{', '.join(str(c) for c in cards)}"
        )
        if self.game_logger:
            self.game_logger.log_selection(self.state, slots, cards, True, replacements)

        outcome = SelectionOutcome(
            status=SelectionStatus.SET_FOUND,
            slots=slots,
            cards=cards,
            replacements=replacements,
            message=SET_MESSAGE,
        )
        if self._on_set_found:
            self._on_set_found(outcome)
        return outcome
