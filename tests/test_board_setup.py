import pytest

from qirkat.board import INITIAL_LAYOUT, Board
from qirkat.types import PieceColor

INIT_BOARD = "  b b b b b\n  b b b b b\n  b b - w w\n  w w w w w\n  w w w w w"


def test_initial_position():
    board = Board()
    assert str(board) == INIT_BOARD
    assert board.layout() == INITIAL_LAYOUT
    assert board.turn is PieceColor.WHITE
    assert not board.game_over
    assert board.number(PieceColor.WHITE) == 12
    assert board.number(PieceColor.BLACK) == 12
    assert board.number(PieceColor.EMPTY) == 1


def test_render_with_legend():
    board = Board()
    lines = board.render(legend=True).split("\n")
    assert lines[0] == "  5  b b b b b"
    assert lines[4] == "  1  w w w w w"
    assert lines[5] == "    a b c d e"


def test_set_pieces_reads_bottom_row_first():
    board = Board()
    board.set_pieces("------w----bbb-----------", PieceColor.WHITE)
    assert board.get_square("b", "2") is PieceColor.WHITE
    assert board.get_square("c", "3") is PieceColor.BLACK
    assert board.get(0) is PieceColor.EMPTY
    assert str(board) == "  - - - - -\n  - - - - -\n  - b b b -\n  - w - - -\n  - - - - -"


def test_set_pieces_ignores_whitespace_and_case():
    board = Board()
    board.set_pieces("WWWWW wwwww bb-ww bbbbb BBBBB", PieceColor.BLACK)
    assert board.layout() == INITIAL_LAYOUT
    assert board.turn is PieceColor.BLACK


def test_set_pieces_rejects_bad_input():
    board = Board()
    for text in ["", "w" * 24, "x" * 25, "w" * 26]:
        with pytest.raises(ValueError):
            board.set_pieces(text, PieceColor.WHITE)
    with pytest.raises(ValueError):
        board.set_pieces(INITIAL_LAYOUT, PieceColor.EMPTY)
    assert board.layout() == INITIAL_LAYOUT


def test_invalid_squares_return_none():
    board = Board()
    assert board.get(25) is None
    assert board.get(-1) is None
    assert board.get_square("f", "1") is None
    assert board.get_square("a", "6") is None


def test_copy_is_independent():
    board = Board()
    copy = Board(board)
    assert copy == board
    copy.make_move(copy.legal_moves()[0])
    assert copy != board
    assert board.layout() == INITIAL_LAYOUT
    assert board.turn is PieceColor.WHITE

    clone = copy.clone()
    assert clone == copy
    clone.undo()
    assert clone == board
    assert copy.can_undo()
