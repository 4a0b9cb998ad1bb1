"""Board state machine and move generator for Qirkat.

Rules:
- The board is 5x5; squares are addressed by linearized index (see ``squares``).
- Orthogonal lines connect every square; diagonal lines pass only through
  squares with an even index.
- WHITE slides forward toward row 5, BLACK toward row 1. Either side may
  also slide sideways, except on the row farthest from its start, and a
  piece may not undo its own last sideways slide on its next move.
- Captures are forced: when any jump exists, the legal moves are exactly
  the maximal jump chains of the side to move.
- A side with no legal move has lost; ``game_over`` records this when the
  moves are generated.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .squares import BOARD_SIDE, COLUMNS, MAX_INDEX, ROWS, index, offset, row, valid_square
from .types import Move, PieceColor

_log = logging.getLogger(__name__)

EMPTY = PieceColor.EMPTY
WHITE = PieceColor.WHITE
BLACK = PieceColor.BLACK

INITIAL_LAYOUT = "wwwwwwwwwwbb-wwbbbbbbbbbb"

NORTH = (0, 1)
SOUTH = (0, -1)
WEST = (-1, 0)
EAST = (1, 0)
SOUTH_EAST = (1, -1)
NORTH_WEST = (-1, 1)
SOUTH_WEST = (-1, -1)
NORTH_EAST = (1, 1)
ORTHOGONAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = (NORTH, SOUTH, WEST, EAST)
DIAGONAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = (SOUTH_EAST, NORTH_WEST, SOUTH_WEST, NORTH_EAST)

_LAYOUT_PATTERN = re.compile(r"^[bw-]{25}$", re.IGNORECASE)


class IllegalMoveError(ValueError):
    """Raised when a move outside the current legal set is applied."""


@dataclass(frozen=True)
class UndoRecord:
    """Board contents before a completed turn."""

    cells: Tuple[PieceColor, ...]
    turn: PieceColor
    game_over: bool
    last_horizontal: Tuple[Optional[int], ...]


def _directions_from(k: int) -> Tuple[Tuple[int, int], ...]:
    if k % 2 == 0:
        return ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS
    return ORTHOGONAL_DIRECTIONS


def _forward(color: PieceColor) -> int:
    return 1 if color is WHITE else -1


def _far_row(color: PieceColor) -> str:
    return ROWS[-1] if color is WHITE else ROWS[0]


def _single_jumps(cells: List[PieceColor], k: int, color: PieceColor) -> List[Tuple[int, int]]:
    """Return ``(captured, landing)`` pairs for every one-step jump from ``k``."""

    jumps: List[Tuple[int, int]] = []
    enemy = color.opponent()
    for dc, dr in _directions_from(k):
        landing = offset(k, dc, dr, 2)
        if landing is None:
            continue
        captured = offset(k, dc, dr, 1)
        if cells[captured] is enemy and cells[landing] is EMPTY:
            jumps.append((captured, landing))
    return jumps


def _collect_chains(cells: List[PieceColor], path: List[int], color: PieceColor, moves: List[Move]) -> None:
    """Append to ``moves`` every maximal jump chain that extends ``path``.

    ``cells`` is a scratch position with the chain so far already played.
    """

    k = path[-1]
    extended = False
    for captured, landing in _single_jumps(cells, k, color):
        scratch = list(cells)
        scratch[landing] = scratch[k]
        scratch[k] = EMPTY
        scratch[captured] = EMPTY
        _collect_chains(scratch, path + [landing], color, moves)
        extended = True
    if not extended and len(path) > 1:
        moves.append(Move(tuple(path)))


class Board:
    """A Qirkat board: 25 cells, the side to move, and an undo history.

    ``Board(other)`` makes an independent deep copy of ``other``.
    """

    def __init__(self, other: Optional["Board"] = None) -> None:
        self._cells: List[PieceColor] = [EMPTY] * (MAX_INDEX + 1)
        self._turn: PieceColor = WHITE
        self._game_over = False
        # _last_horizontal[s] == t: the piece now on t got there by sliding sideways from s.
        self._last_horizontal: List[Optional[int]] = [None] * (MAX_INDEX + 1)
        self._history: List[UndoRecord] = []
        if other is None:
            self.clear()
        else:
            self.copy_from(other)

    # ------------------------------------------------------------------
    # Setup and copying

    def clear(self) -> None:
        """Reset to the opening position with WHITE to move."""

        self.set_pieces(INITIAL_LAYOUT, WHITE)

    def set_pieces(self, text: str, turn: PieceColor) -> None:
        """Load a position from 25 ``w``/``b``/``-`` characters, bottom row first.

        Whitespace is ignored. All squares start free of sideways-move
        restrictions and the undo history is emptied.
        """

        if turn is None or turn is EMPTY:
            raise ValueError("bad player color")
        compact = re.sub(r"\s", "", text)
        if not _LAYOUT_PATTERN.match(compact):
            raise ValueError(f"bad board description '{text}'")
        self._cells = [PieceColor.from_symbol(ch) for ch in compact]
        self._turn = turn
        self._game_over = False
        self._last_horizontal = [None] * (MAX_INDEX + 1)
        self._history = []

    def copy_from(self, other: "Board") -> None:
        self._cells = list(other._cells)
        self._turn = other._turn
        self._game_over = other._game_over
        self._last_horizontal = list(other._last_horizontal)
        self._history = list(other._history)

    def clone(self) -> "Board":
        """Return a deep copy of the board."""

        return Board(self)

    # ------------------------------------------------------------------
    # Queries

    @property
    def turn(self) -> PieceColor:
        """The side to move."""

        return self._turn

    @property
    def game_over(self) -> bool:
        """True once move generation has found no move for the side to move."""

        return self._game_over

    def get(self, k: int) -> Optional[PieceColor]:
        if not valid_square(k):
            return None
        return self._cells[k]

    def get_square(self, c: str, r: str) -> Optional[PieceColor]:
        """Return the contents of square ``c r``, or ``None`` if it is off the board."""

        if not valid_square(c, r):
            return None
        return self._cells[index(c, r)]

    def number(self, color: PieceColor) -> int:
        return sum(1 for cell in self._cells if cell is color)

    def can_undo(self) -> bool:
        return bool(self._history)

    # ------------------------------------------------------------------
    # Move generation

    def legal_moves(self) -> List[Move]:
        """Return all legal moves for the side to move and update ``game_over``."""

        moves: List[Move] = []
        if self.jump_possible():
            for k in range(MAX_INDEX + 1):
                if self._cells[k] is self._turn:
                    _collect_chains(self._cells, [k], self._turn, moves)
        else:
            for k in range(MAX_INDEX + 1):
                if self._cells[k] is self._turn:
                    self._add_slides(moves, k)
        self._game_over = not moves
        return moves

    def is_legal(self, move: Move) -> bool:
        return move in self.legal_moves()

    def jump_possible_at(self, k: int) -> bool:
        """Whether the piece of the side to move on square ``k`` can capture."""

        if self.get(k) is not self._turn:
            return False
        return bool(_single_jumps(self._cells, k, self._turn))

    def jump_possible(self) -> bool:
        return any(self.jump_possible_at(k) for k in range(MAX_INDEX + 1))

    def _add_slides(self, moves: List[Move], k: int) -> None:
        color = self._turn
        forward = _forward(color)
        directions: List[Tuple[int, int]] = []
        if row(k) != _far_row(color):
            directions.extend((WEST, EAST))
        directions.append((0, forward))
        if k % 2 == 0:
            directions.extend(((-1, forward), (1, forward)))
        for dc, dr in directions:
            dest = offset(k, dc, dr)
            if dest is None or self._cells[dest] is not EMPTY:
                continue
            if dr == 0 and self._last_horizontal[dest] == k:
                continue
            moves.append(Move((k, dest)))

    # ------------------------------------------------------------------
    # Mutation

    def make_move(self, move: Move, validate: bool = True) -> None:
        """Play ``move`` for the side to move as one complete turn.

        With ``validate`` (the default) the move is checked against
        :meth:`legal_moves` first; an illegal move raises
        :class:`IllegalMoveError` and leaves the board untouched. Callers
        that took ``move`` from :meth:`legal_moves` on this very position
        may skip the check.
        """

        if validate and not self.is_legal(move):
            _log.warning("Rejected illegal move %s for %s", move, self._turn)
            raise IllegalMoveError(f"illegal move {move} for {self._turn}")

        self._history.append(
            UndoRecord(
                cells=tuple(self._cells),
                turn=self._turn,
                game_over=self._game_over,
                last_horizontal=tuple(self._last_horizontal),
            )
        )
        jump = move.is_jump
        for from_index, to_index in move.steps():
            self._apply_step(from_index, to_index, jump)
        self._turn = self._turn.opponent()
        self._game_over = False

    def _apply_step(self, from_index: int, to_index: int, jump: bool) -> None:
        cells = self._cells
        touched = {from_index, to_index}
        if jump:
            captured = (from_index + to_index) // 2
            cells[captured] = EMPTY
            touched.add(captured)
            for dc, dr in ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS:
                neighbor = offset(from_index, dc, dr)
                if neighbor is not None:
                    touched.add(neighbor)
        cells[to_index] = cells[from_index]
        cells[from_index] = EMPTY

        memory = self._last_horizontal
        for k in range(MAX_INDEX + 1):
            if k in touched or memory[k] in touched:
                memory[k] = None
        if not jump and from_index // BOARD_SIDE == to_index // BOARD_SIDE:
            memory[from_index] = to_index

    def undo(self) -> None:
        """Restore the position before the last completed turn; no-op without history."""

        if not self._history:
            _log.debug("Nothing to undo")
            return
        record = self._history.pop()
        self._cells = list(record.cells)
        self._turn = record.turn
        self._game_over = record.game_over
        self._last_horizontal = list(record.last_horizontal)

    # ------------------------------------------------------------------
    # Rendering

    def render(self, legend: bool = False) -> str:
        """Return a text picture of the board, top row first.

        With ``legend`` each line is indented and prefixed with its row
        number, and a line of column letters is appended:

        ``"  5  b b b b b"`` ... ``"  1  w w w w w"``, then ``"    a b c d e"``.
        """

        lines: List[str] = []
        for r in range(BOARD_SIDE - 1, -1, -1):
            cells = " ".join(self._cells[r * BOARD_SIDE + c].symbol for c in range(BOARD_SIDE))
            lines.append(f"  {ROWS[r]}  {cells}" if legend else f"  {cells}")
        if legend:
            lines.append("    " + " ".join(COLUMNS))
        return "\n".join(lines)

    def layout(self) -> str:
        """Return the 25-character description accepted by :meth:`set_pieces`."""

        return "".join(cell.symbol for cell in self._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.name}, layout='{self.layout()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._turn is other._turn
            and self._game_over == other._game_over
        )

    __hash__ = None  # type: ignore[assignment]
