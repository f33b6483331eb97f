"""Main entry point for automatic Set sessions."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from set_game.config import GameLogConfig, load_config
from set_game.game.session import GameSession, SelectionStatus
from set_game.logging import GameLogger
from set_game.models.session_state import Difficulty
from set_game.utils.logger import SessionDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, difficulty: Difficulty) -> str:
    """Generate log filename with timestamp and difficulty.

    Format: {ISO timestamp}_{difficulty}.jsonl

    Args:
        log_dir: Directory for log files.
        difficulty: Difficulty of the sessions.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    filename = f"{timestamp}_{difficulty.value}.jsonl"
    return str(Path(log_dir) / filename)


def play_session(
    session: GameSession,
    display: SessionDisplay,
    max_steps: int,
) -> int:
    """Play a started session until time runs out.

    Each step spends one tick of the countdown, then selects the first
    set on the board or refreshes when there is none.

    Args:
        session: Started GameSession
        display: Output display
        max_steps: Upper bound on steps

    Returns:
        Number of sets found
    """
    display.print_board(session.board)

    steps = 0
    while session.state.is_running and steps < max_steps:
        steps += 1
        session.tick()
        if not session.state.is_running:
            break

        slots = session.hint()
        if slots is None:
            session.refresh()
            display.print_refresh(session.state)
            display.print_board(session.board)
            continue

        for slot in slots:
            outcome = session.select(slot)
        if outcome.status == SelectionStatus.SET_FOUND:
            display.print_set_found(outcome)

    set_count = session.state.set_count
    if session.state.is_running:
        logger.warning(f"Step limit {max_steps} reached before time ran out")
        session.stop()
    return set_count


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Set card game: play automatic timed sessions"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--easy",
        action="store_true",
        help="Use easy difficulty (overrides config)",
    )
    parser.add_argument(
        "-t",
        "--time-limit",
        type=int,
        help="Countdown in seconds (overrides config)",
    )
    parser.add_argument(
        "-n",
        "--num-sessions",
        type=int,
        help="Number of sessions to play (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for card generation",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-board",
        action="store_true",
        help="Show the board after each deal",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.easy:
        config.rules.difficulty = Difficulty.EASY
    if args.time_limit is not None:
        config.timer.time_limit = args.time_limit
    if args.num_sessions is not None:
        if args.num_sessions < 1:
            parser.error(f"--num-sessions must be at least 1, got {args.num_sessions}")
        config.session.num_sessions = args.num_sessions
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_board:
        config.logging.show_board = True

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = SessionDisplay(show_board=config.logging.show_board)

    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir, config.rules.difficulty)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            session = GameSession(config, game_logger, rng=random.Random(args.seed))

            set_counts: dict[int, int] = {}
            num_sessions = config.session.num_sessions
            for session_num in range(1, num_sessions + 1):
                session.state.session_number = session_num
                session.start()
                display.print_session_start(session.state, num_sessions)

                set_counts[session_num] = play_session(
                    session, display, config.session.max_steps
                )
                display.print_session_end(session.state)

            game_logger.log_session_end(num_sessions, set_counts)
            display.print_final_results(set_counts)

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Session error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
