"""Agents for playing Qirkat."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board
from .types import Move, PieceColor

_log = logging.getLogger(__name__)

MAX_DEPTH = 5
WINNING_VALUE = 1_000_000
INFTY = float("inf")


@dataclass
class SearchConfig:
    """Tunable parameters of :class:`AlphaBetaAgent`."""

    depth: int = MAX_DEPTH
    winning_value: int = WINNING_VALUE

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("search depth must be at least 1")


@dataclass
class SearchStats:
    """Aggregated statistics from a single search."""

    nodes: int
    cutoffs: int
    best_score: float
    elapsed_ms: float


class Agent:
    """Base class for agents."""

    def choose_move(self, board: Board) -> Optional[Move]:  # noqa: D401
        """Return a move for the side to move on ``board``, or ``None`` if it has none."""

        raise NotImplementedError

    def _order_moves(self, board: Board, moves: List[Move]) -> List[Move]:
        """Return moves without reordering; subclasses may override."""

        return list(moves)


class AlphaBetaAgent(Agent):
    """Agent using fixed-depth minimax with alpha-beta pruning.

    Scores are piece-count differences seen from the side to move at the
    root, which always maximizes. Ties keep the first move found, so the
    choice is deterministic for a given position.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.last_stats: Optional[SearchStats] = None
        self._nodes = 0
        self._cutoffs = 0

    def choose_move(self, board: Board) -> Optional[Move]:
        self._nodes = 0
        self._cutoffs = 0
        start_time = time.monotonic()

        work = board.clone()
        root = work.turn
        value, move = self._search(
            work,
            self.config.depth,
            maximizing=True,
            root=root,
            alpha=-INFTY,
            beta=INFTY,
        )

        elapsed_ms = (time.monotonic() - start_time) * 1000.0
        self.last_stats = SearchStats(
            nodes=self._nodes,
            cutoffs=self._cutoffs,
            best_score=value,
            elapsed_ms=elapsed_ms,
        )
        _log.debug(
            "%s search: move=%s score=%s nodes=%d cutoffs=%d elapsed_ms=%.1f",
            root,
            move,
            value,
            self._nodes,
            self._cutoffs,
            elapsed_ms,
        )
        return move

    def static_score(self, board: Board, player: PieceColor) -> float:
        """Heuristic value of ``board`` for ``player``.

        At a terminal position the side with more pieces is treated as the
        winner. Equal counts credit the side that is not stuck, i.e. the
        terminal side to move loses.
        """

        own = board.number(player)
        other = board.number(player.opponent())
        if board.game_over:
            if own > other or (own == other and board.turn is not player):
                return self.config.winning_value
            return -self.config.winning_value
        return own - other

    def _search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        root: PieceColor,
        alpha: float,
        beta: float,
    ) -> Tuple[float, Optional[Move]]:
        self._nodes += 1
        moves = board.legal_moves()
        if depth == 0 or board.game_over:
            return self.static_score(board, root), None

        best_value = -INFTY if maximizing else INFTY
        best_move: Optional[Move] = None
        for move in self._order_moves(board, moves):
            board.make_move(move, validate=False)
            try:
                value, _ = self._search(board, depth - 1, not maximizing, root, alpha, beta)
            finally:
                board.undo()
            if maximizing:
                if value > best_value:
                    best_value, best_move = value, move
                alpha = max(alpha, best_value)
            else:
                if value < best_value:
                    best_value, best_move = value, move
                beta = min(beta, best_value)
            if beta <= alpha and best_move is not None:
                self._cutoffs += 1
                break
        return best_value, best_move
