import pytest

from qirkat.agents import AlphaBetaAgent, SearchConfig
from qirkat.board import Board
from qirkat.types import PieceColor

SWEEP_LAYOUT = "wb----b-b--b----bb---b---"
STUCK_LAYOUT = "b---------------------w--"


def test_opening_search_returns_legal_move():
    board = Board()
    agent = AlphaBetaAgent()
    assert agent.config.depth == 5

    move = agent.choose_move(board)

    assert move in board.legal_moves()
    assert agent.last_stats is not None
    assert agent.last_stats.nodes > 0


def test_search_does_not_touch_caller_board():
    board = Board()
    board.make_move(board.legal_moves()[0])
    before = (board.layout(), board.turn, board.can_undo())

    AlphaBetaAgent(SearchConfig(depth=3)).choose_move(board)

    assert (board.layout(), board.turn, board.can_undo()) == before
    board.undo()
    assert board == Board()


def test_search_is_deterministic():
    board = Board()
    board.make_move(board.legal_moves()[1])
    first = AlphaBetaAgent(SearchConfig(depth=3)).choose_move(board)
    second = AlphaBetaAgent(SearchConfig(depth=3)).choose_move(board)
    assert first == second


def test_search_finds_winning_chain():
    board = Board()
    board.set_pieces(SWEEP_LAYOUT, PieceColor.WHITE)
    agent = AlphaBetaAgent(SearchConfig(depth=2))

    move = agent.choose_move(board)

    board.make_move(move)
    assert board.number(PieceColor.BLACK) == 0
    assert agent.last_stats.best_score == agent.config.winning_value


def test_black_search_maximizes_for_black():
    board = Board()
    board.make_move(board.legal_moves()[1])  # c2-c3, black must recapture
    move = AlphaBetaAgent(SearchConfig(depth=2)).choose_move(board)
    assert str(move) == "c4-c2"


def test_no_move_returns_none():
    board = Board()
    board.set_pieces(STUCK_LAYOUT, PieceColor.WHITE)
    agent = AlphaBetaAgent(SearchConfig(depth=3))
    assert agent.choose_move(board) is None
    board.legal_moves()
    assert board.game_over


def test_terminal_score_uses_piece_counts():
    agent = AlphaBetaAgent()
    win = agent.config.winning_value

    board = Board()
    board.set_pieces("wb-----b-----b-----------", PieceColor.WHITE)
    board.make_move(board.legal_moves()[0])
    board.legal_moves()
    assert agent.static_score(board, PieceColor.WHITE) == win
    assert agent.static_score(board, PieceColor.BLACK) == -win


def test_terminal_tie_credits_side_with_moves():
    # Named assumption: equal counts at a terminal favour the side that can still move.
    agent = AlphaBetaAgent()
    board = Board()
    board.set_pieces(STUCK_LAYOUT, PieceColor.WHITE)
    board.legal_moves()
    assert agent.static_score(board, PieceColor.WHITE) == -agent.config.winning_value
    assert agent.static_score(board, PieceColor.BLACK) == agent.config.winning_value


def test_static_score_is_material_difference():
    agent = AlphaBetaAgent()
    board = Board()
    board.set_pieces("------w----bbb-----------", PieceColor.WHITE)
    assert agent.static_score(board, PieceColor.WHITE) == -2
    assert agent.static_score(board, PieceColor.BLACK) == 2


def test_config_rejects_zero_depth():
    with pytest.raises(ValueError):
        SearchConfig(depth=0)
