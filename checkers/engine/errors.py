from typing import Optional

from checkers.engine.move import Move


class MoveRejected(ValueError):
    """A move was refused; the game state is left untouched."""

    def __init__(self, message: str, x: int, y: int, move: Optional[Move] = None):
        super().__init__(message)
        self.x = x
        self.y = y
        self.move = move


class WrongPlayerError(MoveRejected):
    """The origin cell holds no piece of the side to move."""


class NoLegalMovesError(MoveRejected):
    """The piece has no legal move in the current position."""


class InvalidMoveError(MoveRejected):
    """The move is not among the piece's legal moves."""
