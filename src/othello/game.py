"""
Othello game module.
Handles turn order, passes and the end of the game on top of a Board.
"""
from typing import List, Tuple, Optional, Dict, Any
import numpy as np

from .board import Board, InvalidMove
from .piece import BLACK, WHITE, COLORS, opposite

class OthelloGame:
    """
    A single game session that alternates turns between black and white.
    """

    def __init__(self, first_player: str = BLACK, logger=None,
                 symbols: Optional[Dict[str, str]] = None):
        """
        Initialize a new Othello game.

        Args:
            first_player: Color that moves first (default: black)
            logger: Optional Logger that records moves, passes and the result
            symbols: Optional mapping with 'black', 'white' and 'empty'
                display symbols used by __str__
        """
        if first_player not in COLORS:
            raise ValueError(f"Unknown color: {first_player!r}")
        self.first_player = first_player
        self.logger = logger
        self.symbols = {BLACK: 'B', WHITE: 'W', 'empty': ' '}
        if symbols:
            self.symbols.update(symbols)
        self.reset()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self.current_player = self.first_player
        self.game_over = False
        self.winner = None
        self.move_history = []

    def make_move(self, row: int, col: int) -> None:
        """
        Place the current player's piece and hand over the turn.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Raises:
            InvalidMove: if the move is illegal or the game has ended
        """
        player = self.current_player
        if self.game_over:
            raise InvalidMove((row, col), player, "game is over")

        flipped = len(self.board.captures((row, col), player))
        self.board.place_piece((row, col), player)

        self.move_history.append({'player': player, 'move': (row, col), 'flipped': flipped})
        if self.logger is not None:
            self.logger.log_move(player, (row, col), flipped, self.board.get_score())

        self._advance_turn()

    def _advance_turn(self) -> None:
        opponent = opposite(self.current_player)
        if self.board.has_move(opponent):
            self.current_player = opponent
            return

        if self.board.has_move(self.current_player):
            # Opponent is stuck, the same player moves again
            self.move_history.append({'player': opponent, 'move': None, 'flipped': 0})
            if self.logger is not None:
                self.logger.log_pass(opponent)
            return

        self.game_over = True
        self.winner = self._determine_winner()
        if self.logger is not None:
            self.logger.log_result(self.winner, self.get_score())

    def _determine_winner(self) -> Optional[str]:
        """Determine the winner based on piece counts, None for a draw."""
        black_count, white_count = self.board.get_score()
        if black_count > white_count:
            return BLACK
        if white_count > black_count:
            return WHITE
        return None

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) tuples representing valid moves
        """
        if self.game_over:
            return []
        return self.board.valid_moves(self.current_player)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.game_over

    def get_winner(self) -> Optional[str]:
        """
        Get the winner of the game.

        Returns:
            'black' or 'white', None for a draw or while the game is running
        """
        return self.winner if self.game_over else None

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.get_score()

    def get_board_state(self) -> np.ndarray:
        """Get the current board state as a numpy array."""
        return self.board.get_board_state()

    def get_current_player(self) -> str:
        """Get the color whose turn it is."""
        return self.current_player

    def get_move_history(self) -> List[Dict[str, Any]]:
        """
        Get the move history.

        Returns:
            List of dictionaries with player, move and flipped count;
            a pass is recorded with move None
        """
        return self.move_history.copy()

    def __str__(self) -> str:
        """String representation of the game state."""
        result = self.board.render(self.symbols[BLACK], self.symbols[WHITE], self.symbols['empty'])
        black, white = self.get_score()
        result += f"\nScore - Black: {black}, White: {white}"

        if self.game_over:
            if self.winner is None:
                result += "\nGame over! It's a draw!"
            else:
                result += f"\nGame over! {self.winner.capitalize()} wins!"
        else:
            result += f"\nCurrent player: {self.current_player.capitalize()}"

        return result
