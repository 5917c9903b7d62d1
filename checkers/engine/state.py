import logging
from typing import List, Optional

from checkers.engine.board import Board
from checkers.engine.errors import InvalidMoveError, NoLegalMovesError, WrongPlayerError
from checkers.engine.move import Jump, Move, Slide
from checkers.engine.piece import Piece, BLACK, COLORS
from checkers.engine.rules import check_victory, get_legal_moves, opponent

logger = logging.getLogger(__name__)


class GameState:
    """One game: the board, the side to move and the last legal-move list.

    Each game owns its own instance; nothing here is shared between games.
    """

    def __init__(self, board: Optional[Board] = None, turn: str = BLACK):
        if turn not in COLORS:
            raise ValueError(f"Unknown side to move: {turn!r}")
        self.board = board if board is not None else Board.setup_start()
        self.turn = turn
        self.legal_moves: List[Move] = []
        self.winner: Optional[str] = None

    @property
    def over(self) -> bool:
        return self.winner is not None

    def get_legal_moves(self, piece: Piece, x: int, y: int) -> List[Move]:
        self.legal_moves = get_legal_moves(self.board, piece, x, y)
        return self.legal_moves

    def apply_move(self, x: int, y: int, move: Move) -> Optional[str]:
        """Validate and play `move` for the piece at (x, y).

        Raises a MoveRejected subclass, without touching the state, when the
        piece is not the side to move's, has no legal move, or `move` is not
        one of them. Returns the winner, if the move decided the game.
        """
        piece = self.board.get_piece((x, y))
        if piece is None or piece.color != self.turn:
            self._reject(WrongPlayerError(f"No {self.turn} piece at {(x, y)}", x, y, move))

        legal = get_legal_moves(self.board, piece, x, y)
        if not legal:
            self._reject(NoLegalMovesError(f"Piece at {(x, y)} has no legal moves", x, y, move))
        if move not in legal:
            self._reject(InvalidMoveError(f"Illegal move {move!r} for piece at {(x, y)}", x, y, move))

        self.legal_moves = legal
        self.board.set_piece((x, y), None)
        if isinstance(move, Slide):
            self.board.set_piece(move.to, piece)
        elif isinstance(move, Jump):
            for pos in move.captures:
                self.board.set_piece(pos, None)
            self.board.set_piece(move.to, piece)
        logger.debug("%s played %r from %s", self.turn, move, (x, y))

        self.winner = check_victory(self.board)
        if self.winner is not None:
            logger.info("%s wins", self.winner)
        self.next_turn()
        return self.winner

    def next_turn(self) -> None:
        self.turn = opponent(self.turn)

    @staticmethod
    def _reject(error):
        logger.warning("Illegal move! %s", error)
        raise error
