from dataclasses import dataclass
from typing import Tuple, Union

Pos = Tuple[int, int]  # (x, y), x indexes rows


@dataclass(frozen=True)
class Slide:
    """A non-capturing one-step diagonal move to (x, y)."""
    x: int
    y: int

    @property
    def to(self) -> Pos:
        return (self.x, self.y)

    def is_capture(self):
        return False

    def __repr__(self):
        return f"Slide(-> {self.to})"


@dataclass(frozen=True)
class Jump:
    """A capture chain from the piece's origin.
    captures[i] is the cell jumped over to reach landings[i]; the piece
    rests on the last landing only.
    """
    captures: Tuple[Pos, ...]
    landings: Tuple[Pos, ...]

    def __post_init__(self):
        object.__setattr__(self, 'captures', tuple(tuple(p) for p in self.captures))
        object.__setattr__(self, 'landings', tuple(tuple(p) for p in self.landings))
        if not self.captures or len(self.captures) != len(self.landings):
            raise ValueError("Jump needs equal, non-empty captures and landings")

    @property
    def to(self) -> Pos:
        return self.landings[-1]

    def is_capture(self):
        return True

    def __len__(self):
        return len(self.captures)

    def __repr__(self):
        return f"Jump(-> {self.to}, captures={list(self.captures)}, landings={list(self.landings)})"


Move = Union[Slide, Jump]
