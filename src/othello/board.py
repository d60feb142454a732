"""
Board module for Othello.
Handles the grid state, move validation and the capture (flipping) mechanic.
"""
from typing import List, Optional, Sequence, Tuple
import numpy as np

from .piece import BLACK, WHITE, COLORS, Piece

Position = Tuple[int, int]
Direction = Tuple[int, int]


class InvalidMove(ValueError):
    """Raised when a piece is placed where the rules do not allow it."""

    def __init__(self, pos: Position, color: str, reason: str = "no pieces to capture"):
        self.pos = tuple(pos)
        self.color = color
        self.reason = reason
        super().__init__(f"Invalid move for {color} at {self.pos}: {reason}")


class Board:
    """
    Represents the 8x8 Othello board.

    Pieces live in a flat list; the grid is a numpy array of indices into
    that list (-1 for an empty cell). Flipping a captured piece changes the
    stored record, so the same piece stays on its cell with a new color.
    """

    SIZE = 8

    # Codes used by get_board_state()
    EMPTY_CODE = 0
    BLACK_CODE = 1
    WHITE_CODE = 2

    # E, SE, S, SW, W, NW, N, NE
    DIRS: Tuple[Direction, ...] = (
        (0, 1), (1, 1), (1, 0),
        (1, -1), (0, -1), (-1, -1),
        (-1, 0), (-1, 1),
    )

    def __init__(self):
        """Set up the standard starting position."""
        self.pieces: List[Piece] = []
        self._cells = np.full((self.SIZE, self.SIZE), -1, dtype=np.int16)

        self._put((3, 3), WHITE)
        self._put((4, 4), WHITE)
        self._put((3, 4), BLACK)
        self._put((4, 3), BLACK)

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight rows of 'B', 'W' and '.' characters.
        Spaces inside a row are ignored.

        Args:
            rows: Row strings, top row first

        Returns:
            Board holding exactly the pieces in the layout
        """
        if len(rows) != cls.SIZE:
            raise ValueError(f"Layout needs {cls.SIZE} rows, got {len(rows)}")

        board = cls.__new__(cls)
        board.pieces = []
        board._cells = np.full((cls.SIZE, cls.SIZE), -1, dtype=np.int16)

        colors = {'B': BLACK, 'W': WHITE}
        for i, row in enumerate(rows):
            cells = row.replace(' ', '')
            if len(cells) != cls.SIZE:
                raise ValueError(f"Row {i} must have {cls.SIZE} cells: {row!r}")
            for j, ch in enumerate(cells):
                if ch in colors:
                    board._put((i, j), colors[ch])
                elif ch != '.':
                    raise ValueError(f"Unknown cell {ch!r} in row {i}")
        return board

    def _put(self, pos: Position, color: str) -> Piece:
        piece = Piece(color)
        self.pieces.append(piece)
        self._cells[pos[0], pos[1]] = len(self.pieces) - 1
        return piece

    # Position and occupancy queries

    def is_valid_pos(self, pos: Position) -> bool:
        """Check if a given position is on the board."""
        row, col = pos
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def get_piece(self, pos: Position) -> Optional[Piece]:
        """
        Return the piece at a position, or None if the cell is empty.
        Raises IndexError for a position off the board.
        """
        if not self.is_valid_pos(pos):
            raise IndexError(f"Position {tuple(pos)} is not on the board")
        index = int(self._cells[pos[0], pos[1]])
        return self.pieces[index] if index >= 0 else None

    def is_occupied(self, pos: Position) -> bool:
        """Check if a given position has a piece on it."""
        return self.is_valid_pos(pos) and bool(self._cells[pos[0], pos[1]] >= 0)

    def is_mine(self, pos: Position, color: str) -> bool:
        """Check if the piece at a given position matches a given color."""
        if not self.is_occupied(pos):
            return False
        return self.get_piece(pos).color == color

    # Capture scan

    def _scan(self, start: Position, color: str, direction: Direction) -> Optional[List[Piece]]:
        """
        Walk from start along direction, collecting opposing pieces until a
        piece of color closes the line.

        Returns the collected pieces (possibly empty when the first cell is
        already our own), or None when the line runs off the board or hits
        an empty cell first.
        """
        dr, dc = direction
        row, col = start
        line = []
        while True:
            pos = (row, col)
            if not self.is_occupied(pos):
                # Off the board or a gap: nothing on this line is captured
                return None
            piece = self.get_piece(pos)
            if piece.color == color:
                return line
            line.append(piece)
            row += dr
            col += dc

    def _captures_in(self, pos: Position, color: str, direction: Direction) -> List[Piece]:
        line = self._scan((pos[0] + direction[0], pos[1] + direction[1]), color, direction)
        return line or []

    def captures(self, pos: Position, color: str) -> List[Piece]:
        """
        Get every piece that placing color at pos would flip, in DIRS order.
        The position itself is not checked for occupancy.
        """
        pieces = []
        for direction in self.DIRS:
            pieces.extend(self._captures_in(pos, color, direction))
        return pieces

    # Move validation

    def valid_move(self, pos: Position, color: str) -> bool:
        """
        Check that a position is free and that taking it would flip at
        least one piece of the opposite color.
        """
        if not self.is_valid_pos(pos) or self.is_occupied(pos):
            return False
        return any(self._captures_in(pos, color, d) for d in self.DIRS)

    def valid_moves(self, color: str) -> List[Position]:
        """Get all legal positions for a color in row-major order."""
        return [
            (row, col)
            for row in range(self.SIZE)
            for col in range(self.SIZE)
            if self.valid_move((row, col), color)
        ]

    def has_move(self, color: str) -> bool:
        """Check if there are any valid moves for the given color."""
        return any(
            self.valid_move((row, col), color)
            for row in range(self.SIZE)
            for col in range(self.SIZE)
        )

    # Move application

    def place_piece(self, pos: Position, color: str) -> None:
        """
        Add a new piece of color at pos and flip every captured piece.

        Raises:
            InvalidMove: if the color is unknown, or pos is off the board,
                taken or captures nothing.
                The board is left untouched in that case.
        """
        if color not in COLORS:
            raise InvalidMove(pos, color, "unknown color")
        if not self.is_valid_pos(pos):
            raise InvalidMove(pos, color, "position is off the board")
        if self.is_occupied(pos):
            raise InvalidMove(pos, color, "position is occupied")

        # Scanned once, before the new piece goes down
        flipped = self.captures(pos, color)
        if not flipped:
            raise InvalidMove(pos, color)

        self._put(pos, color)
        for piece in flipped:
            piece.flip()

    # Terminal state

    def is_over(self) -> bool:
        """Check if both the white player and the black player are out of moves."""
        return not self.has_move(WHITE) and not self.has_move(BLACK)

    # Summaries and rendering

    def count(self, color: str) -> int:
        """Number of pieces of a color currently on the board."""
        return sum(1 for index in self._cells.flat if index >= 0 and self.pieces[index].color == color)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return (self.count(BLACK), self.count(WHITE))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            8x8 array of EMPTY_CODE, BLACK_CODE and WHITE_CODE values
        """
        codes = np.array([self.BLACK_CODE if p.color == BLACK else self.WHITE_CODE for p in self.pieces] + [self.EMPTY_CODE],
                         dtype=int)
        # Index -1 picks the trailing EMPTY_CODE
        return codes[self._cells]

    def render(self, black: str = 'B', white: str = 'W', empty: str = ' ') -> str:
        """Return the grid with a column header and row labels."""
        symbols = {BLACK: black, WHITE: white}
        lines = ["   " + "  ".join(str(j) for j in range(self.SIZE))]
        for i in range(self.SIZE):
            cells = []
            for j in range(self.SIZE):
                piece = self.get_piece((i, j))
                cells.append(f" {symbols[piece.color] if piece else empty} ")
            lines.append(f"{i}|{''.join(cells)}|")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
