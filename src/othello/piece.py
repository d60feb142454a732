"""
Piece module for Othello.
A piece keeps its identity for the whole game; only its color changes.
"""

BLACK = "black"
WHITE = "white"
COLORS = (BLACK, WHITE)


def opposite(color: str) -> str:
    """Return the other color."""
    if color == BLACK:
        return WHITE
    if color == WHITE:
        return BLACK
    raise ValueError(f"Unknown color: {color!r}")


class Piece:
    """A single two-colored disc on the board."""

    SYMBOLS = {BLACK: 'B', WHITE: 'W'}

    def __init__(self, color: str):
        if color not in COLORS:
            raise ValueError(f"Unknown color: {color!r}")
        self.color = color

    def flip(self) -> None:
        """Turn the piece over to the opposite color."""
        self.color = opposite(self.color)

    def __str__(self) -> str:
        return self.SYMBOLS[self.color]

    def __repr__(self) -> str:
        return f"Piece({self.color!r})"
