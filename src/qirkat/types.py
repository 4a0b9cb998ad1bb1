"""Core value types for Qirkat.

Rule reminders:
- WHITE starts on rows 1-2 and advances toward row 5; BLACK the opposite way.
- A move is a single slide, a single jump, or a chain of jumps made in one turn.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .squares import BOARD_SIDE, square_name, valid_square


class PieceColor(Enum):
    """Contents of a square: empty or a piece of either side."""

    EMPTY = "-"
    WHITE = "w"
    BLACK = "b"

    @property
    def symbol(self) -> str:
        return self.value

    def opponent(self) -> "PieceColor":
        """Return the opposing color; EMPTY has no opponent and maps to itself."""

        if self is PieceColor.WHITE:
            return PieceColor.BLACK
        if self is PieceColor.BLACK:
            return PieceColor.WHITE
        return PieceColor.EMPTY

    @classmethod
    def from_symbol(cls, symbol: str) -> "PieceColor":
        try:
            return cls(symbol.lower())
        except ValueError as exc:
            raise ValueError(f"Unknown piece symbol '{symbol}'") from exc

    def __str__(self) -> str:
        return self.name.capitalize()


def _delta(from_index: int, to_index: int) -> Tuple[int, int]:
    dc = to_index % BOARD_SIDE - from_index % BOARD_SIDE
    dr = to_index // BOARD_SIDE - from_index // BOARD_SIDE
    return dc, dr


def _is_slide_step(from_index: int, to_index: int) -> bool:
    dc, dr = _delta(from_index, to_index)
    return max(abs(dc), abs(dr)) == 1


def _is_jump_step(from_index: int, to_index: int) -> bool:
    dc, dr = _delta(from_index, to_index)
    return dc in (-2, 0, 2) and dr in (-2, 0, 2) and (dc, dr) != (0, 0)


@dataclass(frozen=True)
class Move:
    """A turn's worth of movement, stored as the path of squares visited.

    ``path`` holds linearized square indices. Two entries describe a slide
    (adjacent squares) or a single jump (two squares apart in a straight
    line). Longer paths are jump chains, each step landing where the next
    one starts.
    """

    path: Tuple[int, ...]

    def __post_init__(self) -> None:
        path = tuple(self.path)
        object.__setattr__(self, "path", path)
        if len(path) < 2:
            raise ValueError("a move needs at least two squares")
        if not all(valid_square(k) for k in path):
            raise ValueError(f"square index out of bounds in {path}")
        first_from, first_to = path[0], path[1]
        if len(path) == 2 and _is_slide_step(first_from, first_to):
            return
        for a, b in zip(path, path[1:]):
            if not _is_jump_step(a, b):
                raise ValueError(f"{square_name(a)}-{square_name(b)} is neither a slide nor a jump")

    @classmethod
    def slide(cls, from_index: int, to_index: int) -> "Move":
        move = cls((from_index, to_index))
        if move.is_jump:
            raise ValueError("squares of a slide must be adjacent")
        return move

    @classmethod
    def jump(cls, from_index: int, to_index: int) -> "Move":
        move = cls((from_index, to_index))
        if not move.is_jump:
            raise ValueError("squares of a jump must be two apart")
        return move

    @classmethod
    def chain(cls, first: "Move", *rest: "Move") -> "Move":
        """Join jumps end to start into a single chained move."""

        path: List[int] = list(first.path)
        for move in rest:
            if move.from_index != path[-1]:
                raise ValueError("chained jumps must start where the previous one landed")
            path.extend(move.path[1:])
        chained = cls(tuple(path))
        if rest and not chained.is_jump:
            raise ValueError("only jumps can be chained")
        return chained

    @property
    def from_index(self) -> int:
        return self.path[0]

    @property
    def to_index(self) -> int:
        return self.path[-1]

    @property
    def is_jump(self) -> bool:
        return _is_jump_step(self.path[0], self.path[1])

    @property
    def is_horizontal(self) -> bool:
        """Whether this is a single sideways step along a row."""

        if self.is_jump or len(self.path) != 2:
            return False
        return _delta(self.path[0], self.path[1])[1] == 0

    def steps(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(from_index, to_index)`` for each step of the move."""

        return zip(self.path, self.path[1:])

    def jumped_index(self) -> Optional[int]:
        """Index of the square captured by the first step, or ``None`` for a slide."""

        if not self.is_jump:
            return None
        return (self.path[0] + self.path[1]) // 2

    def captured_indices(self) -> List[int]:
        if not self.is_jump:
            return []
        return [(a + b) // 2 for a, b in self.steps()]

    def jump_tail(self) -> Optional["Move"]:
        """The rest of a chain after its first jump, or ``None``."""

        if len(self.path) <= 2:
            return None
        return Move(self.path[1:])

    def __len__(self) -> int:
        return len(self.path) - 1

    def __str__(self) -> str:
        return "-".join(square_name(k) for k in self.path)
