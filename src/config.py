"""
Configuration parameters for Othello.
"""
import os
import logging
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json

from .othello.piece import BLACK, COLORS

@dataclass
class GameConfig:
    """Configuration for a game session and its display."""
    first_player: str = BLACK
    black_symbol: str = "B"
    white_symbol: str = "W"
    empty_symbol: str = " "

    def __post_init__(self):
        if self.first_player not in COLORS:
            raise ValueError(f"first_player must be one of {COLORS}, got {self.first_player!r}")

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True
    verbose: bool = True

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            game=GameConfig(**config_dict.get('game', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
