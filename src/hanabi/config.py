"""
Configuration for Hanabi games and the hat protocol tooling.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Game configuration."""

    num_players: int = 3
    hand_size: Optional[int] = None  # If None, derived from num_players (5 for 2-3 players, 4 otherwise)
    num_hints: int = 8
    num_lives: int = 3
    seed: Optional[int] = None

    def get_hand_size(self) -> int:
        """Get hand size, falling back to the standard table."""
        if self.hand_size is not None:
            return self.hand_size
        return 5 if self.num_players <= 3 else 4


@dataclass
class LoggingConfig:
    """Logging configuration for entry points."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    """General configuration."""

    game: GameConfig = None
    logging: LoggingConfig = None

    def __post_init__(self):
        """Initialize default values."""
        if self.game is None:
            self.game = GameConfig()
        if self.logging is None:
            self.logging = LoggingConfig()


# Default configuration
DEFAULT_CONFIG = Config()
