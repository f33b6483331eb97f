"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel

from set_game.models.card import Style
from set_game.models.session_state import Difficulty


class BoardConfig(BaseModel):
    """Board configuration."""

    easy_size: int = 9
    standard_size: int = 12

    def size_for(self, difficulty: Difficulty) -> int:
        """Get the board size for a difficulty."""
        if difficulty == Difficulty.EASY:
            return self.easy_size
        return self.standard_size


class RulesConfig(BaseModel):
    """Rules configuration."""

    difficulty: Difficulty = Difficulty.STANDARD
    easy_style: Style = Style.SOLID

    # Count is left out of the card identity unless enabled
    count_in_identity: bool = False


class TimerConfig(BaseModel):
    """Countdown configuration."""

    time_limit: int = 180  # Seconds
    tick_seconds: int = 1


class SessionConfig(BaseModel):
    """Automatic play configuration."""

    num_sessions: int = 1
    max_steps: int = 1000


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_board: bool = False


class GameLogConfig(BaseModel):
    """Game event log configuration."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    board: BoardConfig = BoardConfig()
    rules: RulesConfig = RulesConfig()
    timer: TimerConfig = TimerConfig()
    session: SessionConfig = SessionConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
