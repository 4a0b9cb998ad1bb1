"""Qirkat game package."""

from .types import Move, PieceColor
from .board import INITIAL_LAYOUT, Board, IllegalMoveError
from .agents import Agent, AlphaBetaAgent, SearchConfig, SearchStats
from .notation import MoveSyntaxError, format_move, parse_move
from .game_controller import GameController

__all__ = [
    "Agent",
    "AlphaBetaAgent",
    "Board",
    "GameController",
    "IllegalMoveError",
    "INITIAL_LAYOUT",
    "Move",
    "MoveSyntaxError",
    "PieceColor",
    "SearchConfig",
    "SearchStats",
    "format_move",
    "parse_move",
]
