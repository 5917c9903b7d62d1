from copy import deepcopy
from typing import Iterable, Iterator, List, Optional, Tuple
from checkers.engine.piece import Piece, BLACK, WHITE
from checkers.engine.move import Pos


BoardArray = List[List[Optional[Piece]]]

_GLYPHS = {'b': '●', 'w': '○', 'bk': '◆', 'wk': '◇'}


class Board:
    SIZE = 10

    def __init__(self, size: int = SIZE):
        if size < 3:
            raise ValueError("Board size must be at least 3")
        self.size = size
        # initialize empty board
        self.grid: BoardArray = [[None for _ in range(size)] for _ in range(size)]

    @classmethod
    def setup_start(cls, size: int = SIZE):
        if size < 6:
            raise ValueError(f"Start position needs at least 6 rows, got {size}")
        b = cls(size)
        # Light pieces on rows 0..2, dark pieces on the last three rows, on odd squares
        for x in range(3):
            for y in range(size):
                if (x + y) % 2 == 1:
                    b.grid[x][y] = Piece(WHITE)
        for x in range(size - 3, size):
            for y in range(size):
                if (x + y) % 2 == 1:
                    b.grid[x][y] = Piece(BLACK)
        return b

    @classmethod
    def from_layout(cls, rows: Iterable[str]) -> 'Board':
        """Build a board from rows of whitespace-separated tags.

        '.' is an empty cell, 'b'/'w' are pawns and 'bk'/'wk' kings. Row i of
        the layout is x == i. The layout must be square.
        """
        cells = [row.split() for row in rows]
        size = len(cells)
        if any(len(row) != size for row in cells):
            raise ValueError(f"Layout must be square, got {size} rows of lengths {[len(r) for r in cells]}")
        b = cls(size)
        for x, row in enumerate(cells):
            for y, tag in enumerate(row):
                if tag != '.':
                    b.grid[x][y] = Piece.from_tag(tag)
        return b

    @classmethod
    def from_layout_file(cls, path: str) -> 'Board':
        with open(path, encoding='utf-8') as fh:
            rows = [line.split('#', 1)[0] for line in fh]
        return cls.from_layout(row for row in rows if row.strip())

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def get_piece(self, pos: Pos) -> Optional[Piece]:
        if self.in_bounds(pos):
            x, y = pos
            return self.grid[x][y]
        return None

    def set_piece(self, pos: Pos, piece: Optional[Piece]):
        if not self.in_bounds(pos):
            raise IndexError("Position out of board")
        x, y = pos
        self.grid[x][y] = piece

    def pieces(self) -> Iterator[Tuple[Pos, Piece]]:
        for x in range(self.size):
            for y in range(self.size):
                if self.grid[x][y] is not None:
                    yield (x, y), self.grid[x][y]

    def clone(self) -> 'Board':
        newb = Board(self.size)
        newb.grid = deepcopy(self.grid)
        return newb

    def count_pieces(self, color: str) -> int:
        return sum(1 for _, p in self.pieces() if p.color == color)

    def to_layout(self) -> List[str]:
        return [' '.join('.' if p is None else p.tag for p in row) for row in self.grid]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.grid == other.grid

    def __str__(self):
        return render_board(self)

    def __repr__(self):
        return '\n'.join(self.to_layout())


def render_board(board: Board) -> str:
    """Framed text rendering of the board, one glyph per piece."""
    rule = '_' * (board.size * 4 + 4)
    lines = [rule]
    for row in board.grid:
        lines.append('|' + ''.join(' ' + (' ' if p is None else _GLYPHS[p.tag]) + ' |' for p in row))
    lines.append(rule)
    return '\n'.join(lines)
