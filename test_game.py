"""
Test script for the Othello game implementation.
"""
import numpy as np
import pytest

from src.othello import OthelloGame, Board, InvalidMove, BLACK, WHITE

EMPTY_ROW = "........"


def test_initial_game():
    """Test the initial game setup."""
    game = OthelloGame()
    board = game.get_board_state()

    assert board.shape == (8, 8), "Board should be 8x8"
    assert board[3][3] == Board.WHITE_CODE
    assert board[4][4] == Board.WHITE_CODE
    assert board[3][4] == Board.BLACK_CODE
    assert board[4][3] == Board.BLACK_CODE
    assert np.sum(board == Board.EMPTY_CODE) == 60, "Should have 60 empty squares initially"

    assert game.get_current_player() == BLACK
    assert not game.is_game_over()
    assert game.get_winner() is None


def test_valid_moves():
    """Test valid move generation."""
    game = OthelloGame()
    expected_moves = [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert game.get_valid_moves() == expected_moves, \
        f"Expected valid moves {expected_moves}, got {game.get_valid_moves()}"


def test_make_move():
    """Test making moves and capturing pieces."""
    game = OthelloGame()
    game.make_move(2, 3)
    board = game.get_board_state()

    assert board[2][3] == Board.BLACK_CODE, "Move should place black piece"
    assert board[3][3] == Board.BLACK_CODE, "Should capture white piece"
    assert game.get_current_player() == WHITE, "Should be white's turn"
    assert game.get_score() == (4, 1)
    assert game.get_move_history() == [{'player': BLACK, 'move': (2, 3), 'flipped': 1}]


def test_illegal_move_keeps_turn():
    game = OthelloGame()
    with pytest.raises(InvalidMove):
        game.make_move(0, 0)
    assert game.get_current_player() == BLACK
    assert game.get_move_history() == []


def test_white_first():
    game = OthelloGame(first_player=WHITE)
    assert game.get_current_player() == WHITE
    assert game.get_valid_moves() == [(2, 4), (3, 5), (4, 2), (5, 3)]

    with pytest.raises(ValueError):
        OthelloGame(first_player="green")


def test_pass_and_game_over():
    """White runs out of moves, black moves twice and the game ends."""
    game = OthelloGame()
    game.board = Board.from_layout(["BW......"] + [EMPTY_ROW] * 6 + ["BW......"])

    game.make_move(0, 2)
    assert game.get_current_player() == BLACK, "White has no move, black should play again"
    assert game.get_move_history()[-1] == {'player': WHITE, 'move': None, 'flipped': 0}
    assert not game.is_game_over()

    game.make_move(7, 2)
    assert game.is_game_over()
    assert game.get_winner() == BLACK
    assert game.get_score() == (6, 0)
    assert game.get_valid_moves() == []

    with pytest.raises(InvalidMove):
        game.make_move(1, 1)


def test_draw():
    game = OthelloGame()
    game.board = Board.from_layout(["B......."] + [EMPTY_ROW] * 6 + [".......W"])
    assert game._determine_winner() is None


def test_full_game():
    """Play the first legal move each turn until the game ends."""
    game = OthelloGame()
    for _ in range(100):
        if game.is_game_over():
            break
        row, col = game.get_valid_moves()[0]
        game.make_move(row, col)

    assert game.is_game_over()
    assert game.board.is_over()
    black, white = game.get_score()
    if black > white:
        assert game.get_winner() == BLACK
    elif white > black:
        assert game.get_winner() == WHITE
    else:
        assert game.get_winner() is None


def test_reset():
    game = OthelloGame()
    game.make_move(2, 3)
    game.reset()
    assert game.get_score() == (2, 2)
    assert game.get_current_player() == BLACK
    assert game.get_move_history() == []


def test_str():
    game = OthelloGame(symbols={'empty': '.'})
    text = str(game)
    assert "Score - Black: 2, White: 2" in text
    assert "Current player: Black" in text
    assert "3| .  .  .  W  B  .  .  . |" in text


if __name__ == "__main__":
    pytest.main([__file__])
