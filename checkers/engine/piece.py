from dataclasses import dataclass

BLACK = 'black'
WHITE = 'white'
COLORS = (BLACK, WHITE)

_TAG_TO_COLOR = {'b': BLACK, 'w': WHITE}


@dataclass(frozen=True)
class Piece:
    """Represents a checkers piece.
    color: 'black' (dark) or 'white' (light)
    king: False for a pawn, True for a king
    """
    color: str
    king: bool = False

    def __post_init__(self):
        if self.color not in COLORS:
            raise ValueError(f"Unknown piece color: {self.color!r}")

    @classmethod
    def from_tag(cls, tag: str) -> 'Piece':
        """Parse one of the tags 'b', 'w', 'bk', 'wk'."""
        if tag not in ('b', 'w', 'bk', 'wk'):
            raise ValueError(f"Unknown piece tag: {tag!r}")
        return cls(_TAG_TO_COLOR[tag[0]], king=tag.endswith('k'))

    @property
    def tag(self) -> str:
        return self.color[0] + ('k' if self.king else '')

    def __repr__(self):
        return f"Piece(color={self.color!r}, king={self.king})"
