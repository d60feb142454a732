"""
Test script for game logging.
"""
import gc

from src.config import Config, LoggingConfig
from src.logger import setup_logger
from src.othello import OthelloGame


def test_moves_written_to_log_file(tmp_path):
    config = Config(logging=LoggingConfig(log_dir=str(tmp_path), verbose=False))
    logger = setup_logger(config)

    game = OthelloGame(logger=logger)
    game.make_move(2, 3)
    logger.log_result(None, game.get_score())
    logger.close()

    with open(logger.log_file) as f:
        text = f.read()
    assert "black plays (2, 3), flips 1 (black=4, white=1)" in text
    assert "Game over: draw" in text


def test_no_file_when_disabled(tmp_path):
    config = Config(logging=LoggingConfig(log_dir=str(tmp_path), log_to_file=False, verbose=False))
    logger = setup_logger(config)
    logger.log_pass("white")
    logger.close()

    assert logger.log_file is None
    assert list(tmp_path.iterdir()) == []


def test_sessions_keep_their_own_handlers(tmp_path):
    config = Config(logging=LoggingConfig(log_dir=str(tmp_path), verbose=False))
    first = setup_logger(config)
    second = setup_logger(config)
    assert first.run_dir != second.run_dir
    first_file = first.log_file

    first.logger.info("first session")
    del first
    gc.collect()
    second.log_pass("white")
    second.close()
    second.close()

    with open(second.log_file) as f:
        lines = f.read().splitlines()
    assert len(lines) == 1, f"Expected only the pass line, got {lines}"
    assert lines[0].endswith("white has no legal move and passes")

    with open(first_file) as f:
        assert f.read().count("first session") == 1
