import logging
from typing import Dict, List, Optional, Tuple

from checkers.engine.board import Board
from checkers.engine.move import Jump, Move, Pos, Slide
from checkers.engine.piece import Piece, BLACK, WHITE

logger = logging.getLogger(__name__)

_ALL_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# (color, king) -> allowed diagonal steps. Dark pawns head towards x == 0,
# light pawns towards the last row.
DIRECTIONS: Dict[Tuple[str, bool], Tuple[Tuple[int, int], ...]] = {
    (BLACK, False): ((-1, -1), (-1, 1)),
    (WHITE, False): ((1, -1), (1, 1)),
    (BLACK, True): _ALL_DIAGONALS,
    (WHITE, True): _ALL_DIAGONALS,
}


def opponent(color: str) -> str:
    return BLACK if color == WHITE else WHITE


def directions_for(piece: Piece) -> Tuple[Tuple[int, int], ...]:
    return DIRECTIONS[(piece.color, piece.king)]


def _find_slides(board: Board, piece: Piece, start: Pos) -> List[Move]:
    moves: List[Move] = []
    for dx, dy in directions_for(piece):
        to = (start[0] + dx, start[1] + dy)
        if board.in_bounds(to) and board.get_piece(to) is None:
            moves.append(Slide(*to))
    return moves


def _find_jumps(board: Board, piece: Piece, start: Pos) -> List[Move]:
    """Return every jump chain from start, including each partial chain.

    The board is never modified: captured pieces stay in place during the
    search and the origin stays occupied, so a chain cannot end back on it.
    """
    results: List[Move] = []

    def dfs(current: Pos, captures: Tuple[Pos, ...], landings: Tuple[Pos, ...]):
        for dx, dy in directions_for(piece):
            mid = (current[0] + dx, current[1] + dy)
            land = (current[0] + 2 * dx, current[1] + 2 * dy)
            if not board.in_bounds(land) or board.get_piece(land) is not None:
                continue
            mid_piece = board.get_piece(mid)
            if mid_piece is None or mid_piece.color == piece.color:
                continue
            # a piece is only captured once per chain
            if mid in captures:
                continue
            # tuples give each branch its own copy of the chain
            chain_caps = captures + (mid,)
            chain_lands = landings + (land,)
            results.append(Jump(chain_caps, chain_lands))
            dfs(land, chain_caps, chain_lands)

    dfs(start, (), ())
    return results


def get_legal_moves(board: Board, piece: Piece, x: int, y: int) -> List[Move]:
    """All slides then all jump chains for `piece` standing at (x, y)."""
    start = (x, y)
    moves = _find_slides(board, piece, start) + _find_jumps(board, piece, start)
    logger.debug("%d legal moves for %s at %s", len(moves), piece.tag, start)
    return moves


def all_legal_moves(board: Board, color: str) -> List[Tuple[Pos, Move]]:
    """Every legal move of every piece of `color`, paired with its origin."""
    found: List[Tuple[Pos, Move]] = []
    for pos, p in board.pieces():
        if p.color == color:
            found.extend((pos, m) for m in get_legal_moves(board, p, *pos))
    return found


def count_pieces(board: Board, color: str) -> int:
    """Count pieces (pawns and kings) of a given color on the board."""
    return board.count_pieces(color)


def check_victory(board: Board) -> Optional[str]:
    """Return the winning color once the other color has no piece left."""
    white_pieces = count_pieces(board, WHITE)
    black_pieces = count_pieces(board, BLACK)
    if white_pieces == 0:
        return BLACK
    if black_pieces == 0:
        return WHITE
    return None
