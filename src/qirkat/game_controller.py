"""Game controller utilities for scripted or interactive play.

This module keeps front-end concerns separate from the board so the
sequencing and validation of a game can be tested without a terminal.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .agents import Agent
from .board import Board
from .notation import parse_move
from .types import Move, PieceColor

_log = logging.getLogger(__name__)

ChangeCallback = Callable[[Board], None]


class GameController:
    """Manage a single Qirkat game: the board, the agents, and the moves played.

    An agent of ``None`` means that side is played by a human through
    :meth:`apply_move` or :meth:`apply_text_move`. ``on_change`` is called
    with the board after every successful mutation.
    """

    def __init__(
        self,
        white_agent: Optional[Agent] = None,
        black_agent: Optional[Agent] = None,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        self.white_agent = white_agent
        self.black_agent = black_agent
        self.on_change = on_change
        self.board = Board()
        self.moves_played: List[Tuple[PieceColor, Move]] = []
        self.new_game()

    def new_game(self) -> None:
        """Reset to the opening position."""

        self.board.clear()
        self.moves_played = []
        self._notify()

    def set_position(self, layout: str, turn: PieceColor) -> None:
        """Start from a custom position; see :meth:`Board.set_pieces`."""

        self.board.set_pieces(layout, turn)
        self.moves_played = []
        self._notify()

    def legal_moves(self) -> List[Move]:
        return self.board.legal_moves()

    def apply_move(self, move: Move) -> Move:
        """Play ``move`` for the side to move; raises ``IllegalMoveError`` if it is not legal."""

        player = self.board.turn
        self.board.make_move(move)
        self.moves_played.append((player, move))
        _log.info("%s moves %s", player, move)
        self._notify()
        return move

    def apply_text_move(self, raw: str) -> Move:
        """Parse and apply a move string against the current position."""

        move = parse_move(raw)
        return self.apply_move(move)

    def undo(self) -> bool:
        """Take back the last turn; returns False when there is nothing to undo."""

        if not self.board.can_undo():
            return False
        self.board.undo()
        if self.moves_played:
            self.moves_played.pop()
        self._notify()
        return True

    def current_agent(self) -> Optional[Agent]:
        return self.white_agent if self.board.turn is PieceColor.WHITE else self.black_agent

    def compute_ai_move(self) -> Optional[Move]:
        """Ask the current side's agent for a move; ``None`` means it has no move."""

        agent = self.current_agent()
        if agent is None:
            raise ValueError("No agent configured for current player")
        move = agent.choose_move(self.board)
        if move is None:
            # Generating on the real board records game over.
            self.board.legal_moves()
        return move

    def step_ai(self) -> Optional[Move]:
        move = self.compute_ai_move()
        if move is not None:
            self.apply_move(move)
        return move

    def is_over(self) -> bool:
        if not self.board.game_over:
            self.board.legal_moves()
        return self.board.game_over

    def winner(self) -> Optional[PieceColor]:
        """Return the winner if the game is over: the side that is not stuck."""

        if not self.is_over():
            return None
        return self.board.turn.opponent()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.board)
