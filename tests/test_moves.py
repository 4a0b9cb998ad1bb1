from qirkat.board import Board
from qirkat.notation import parse_move
from qirkat.types import Move, PieceColor


def moves_text(board):
    return [str(mv) for mv in board.legal_moves()]


def test_opening_moves():
    board = Board()
    assert moves_text(board) == ["b2-c3", "c2-c3", "d2-c3", "d3-c3"]


def test_black_slides_toward_row_one():
    board = Board()
    board.set_pieces("-------------------b-----", PieceColor.BLACK)
    # e4 has an odd index: no diagonal slides, and no east square.
    assert moves_text(board) == ["e4-d4", "e4-e3"]


def test_diagonal_slides_only_from_even_squares():
    board = Board()
    board.set_pieces("------------w------------", PieceColor.WHITE)
    assert moves_text(board) == ["c3-b3", "c3-d3", "c3-c4", "c3-b4", "c3-d4"]

    board.set_pieces("-------w-----------------", PieceColor.WHITE)
    assert moves_text(board) == ["c2-b2", "c2-d2", "c2-c3"]


def test_no_sideways_slides_on_far_row():
    board = Board()
    board.set_pieces("-----------------w-------", PieceColor.WHITE)
    assert moves_text(board) == ["c4-b4", "c4-d4", "c4-c5"]

    board.make_move(parse_move("c4-c5"))
    board.set_pieces(board.layout(), PieceColor.WHITE)
    assert board.legal_moves() == []
    assert board.game_over


def test_stuck_side_ends_game():
    board = Board()
    board.set_pieces("b---------------------w--", PieceColor.WHITE)
    assert not board.game_over
    assert board.legal_moves() == []
    assert board.game_over


def test_piece_counts_always_sum_to_25():
    board = Board()
    for _ in range(12):
        moves = board.legal_moves()
        if not moves:
            break
        board.make_move(moves[-1])
        total = sum(board.number(color) for color in PieceColor)
        assert total == 25


def test_legality_check():
    board = Board()
    assert board.is_legal(parse_move("c2-c3"))
    assert not board.is_legal(parse_move("c2-c4"))
    assert not board.is_legal(Move.slide(17, 12))
