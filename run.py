"""
Main script to play a two-player game of Othello in the console.
"""
import os
import sys
from dataclasses import replace
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import Config, get_default_config
from src.logger import setup_logger
from src.othello import OthelloGame, InvalidMove

def parse_move(text):
    """Parse 'row col' (or 'row,col') into a (row, col) tuple."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError("enter a move as: row col")
    return int(parts[0]), int(parts[1])

def play(game, input_fn=input):
    """Run the move loop until the game ends or the players quit."""
    while not game.is_game_over():
        print(f"\n{game}")
        print(f"Valid moves: {game.get_valid_moves()}")
        try:
            text = input_fn(f"{game.get_current_player()}> ").strip()
        except EOFError:
            print()
            return False
        if text.lower() in ('q', 'quit', 'exit'):
            return False
        try:
            row, col = parse_move(text)
            game.make_move(row, col)
        except InvalidMove as e:
            print(e)
            continue
        except ValueError as e:
            print(f"Could not read move: {e}")
            continue

        last = game.get_move_history()[-1]
        if last['move'] is None:
            print(f"{last['player'].capitalize()} has no legal move and passes.")

    print(f"\n{game}")
    return True

def main():
    """Play a hot-seat game with the specified configuration."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello in the console')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                      help='Path to config file')
    parser.add_argument('--log-level', type=str, default=None,
                      help='Override the configured log level')
    parser.add_argument('--no-log-file', action='store_true',
                      help='Do not write a log file')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.log_level:
        config.logging = replace(config.logging, log_level=args.log_level)
    if args.no_log_file:
        config.logging.log_to_file = False

    logger = setup_logger(config)
    game = OthelloGame(
        first_player=config.game.first_player,
        logger=logger,
        symbols={
            'black': config.game.black_symbol,
            'white': config.game.white_symbol,
            'empty': config.game.empty_symbol,
        },
    )

    try:
        play(game)
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        logger.close()

if __name__ == "__main__":
    main()
