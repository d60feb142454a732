"""
Othello game module.
This package contains the core rule engine for Othello.
"""

from .piece import Piece, BLACK, WHITE, COLORS, opposite
from .board import Board, InvalidMove
from .game import OthelloGame

__all__ = ['Piece', 'BLACK', 'WHITE', 'COLORS', 'opposite', 'Board', 'InvalidMove', 'OthelloGame']
