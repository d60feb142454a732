"""
Logging utilities for Othello.
"""
import os
import logging
from datetime import datetime
from typing import Optional, Sequence, Tuple

from .config import Config

class Logger:
    """Logger for game sessions."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        level = logging.getLevelName(config.logging.log_level)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # One child logger per session so handlers never leak between instances
        self.logger = logging.getLogger(config.project_name).getChild(self.run_name)
        self.logger.setLevel(level)
        self.logger.propagate = False
        self.handlers = []

        # Set up console logging
        self.console = None
        if config.logging.verbose:
            self.console = logging.StreamHandler()
            self.console.setLevel(level)
            self.console.setFormatter(formatter)
            self.handlers.append(self.console)

        # Set up file logging
        self.log_file = None
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.log_file = os.path.join(self.run_dir, 'game.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        for handler in self.handlers:
            self.logger.addHandler(handler)

    def log_move(self, color: str, pos: Tuple[int, int], flipped: int, score: Sequence[int]):
        """Log a placed piece and the resulting score."""
        self.logger.info(f"{color} plays {tuple(pos)}, flips {flipped} "
                         f"(black={score[0]}, white={score[1]})")

    def log_pass(self, color: str):
        """Log a turn passed for lack of legal moves."""
        self.logger.info(f"{color} has no legal move and passes")

    def log_result(self, winner: Optional[str], score: Sequence[int]):
        """Log the end of a game."""
        outcome = "draw" if winner is None else f"{winner} wins"
        self.logger.info(f"Game over: {outcome} (black={score[0]}, white={score[1]})")

    def close(self):
        """Close the handlers this logger opened. Safe to call more than once."""
        while self.handlers:
            handler = self.handlers.pop()
            self.logger.removeHandler(handler)
            handler.close()

    def __del__(self):
        """Ensure resources are properly released."""
        if hasattr(self, 'handlers'):
            self.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
