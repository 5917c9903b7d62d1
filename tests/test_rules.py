from checkers.engine.board import Board
from checkers.engine.move import Jump, Slide
from checkers.engine.piece import Piece
from checkers.engine.rules import all_legal_moves, check_victory, get_legal_moves

DARK = Piece('black')
LIGHT = Piece('white')
DARK_KING = Piece('black', king=True)
LIGHT_KING = Piece('white', king=True)


def _board(*placements):
    b = Board()
    for pos, piece in placements:
        b.set_piece(pos, piece)
    return b


def test_pawn_slides_forward_only():
    b = _board(((5, 4), DARK), ((5, 6), LIGHT))
    assert get_legal_moves(b, DARK, 5, 4) == [Slide(4, 3), Slide(4, 5)]
    assert get_legal_moves(b, LIGHT, 5, 6) == [Slide(6, 5), Slide(6, 7)]


def test_king_slides_all_diagonals():
    b = _board(((5, 4), LIGHT_KING))
    moves = get_legal_moves(b, LIGHT_KING, 5, 4)
    assert set(moves) == {Slide(4, 3), Slide(4, 5), Slide(6, 3), Slide(6, 5)}


def test_slides_stay_on_board():
    b = _board(((9, 0), DARK_KING))
    assert get_legal_moves(b, DARK_KING, 9, 0) == [Slide(8, 1)]


def test_initial_scenario_capture():
    b = Board.setup_start()
    b.set_piece((6, 1), LIGHT)
    moves = get_legal_moves(b, DARK, 7, 0)
    assert moves == [Jump([(6, 1)], [(5, 2)])]


def test_no_jump_over_own_piece():
    b = _board(((5, 4), DARK), ((4, 3), DARK_KING), ((4, 5), DARK))
    assert get_legal_moves(b, DARK, 5, 4) == []


def test_no_jump_over_empty_or_onto_occupied():
    b = _board(((5, 4), DARK), ((4, 5), LIGHT), ((3, 6), LIGHT))
    moves = get_legal_moves(b, DARK, 5, 4)
    assert moves == [Slide(4, 3)]


def test_no_jump_off_grid():
    b = _board(((1, 1), DARK), ((0, 0), LIGHT), ((0, 2), LIGHT))
    assert get_legal_moves(b, DARK, 1, 1) == []


def test_chain_emits_every_prefix():
    b = _board(((9, 0), DARK), ((8, 1), LIGHT), ((6, 3), LIGHT), ((4, 5), LIGHT))
    moves = get_legal_moves(b, DARK, 9, 0)
    assert moves == [
        Jump([(8, 1)], [(7, 2)]),
        Jump([(8, 1), (6, 3)], [(7, 2), (5, 4)]),
        Jump([(8, 1), (6, 3), (4, 5)], [(7, 2), (5, 4), (3, 6)]),
    ]
    jumps = [m for m in moves if m.is_capture()]
    for j in jumps:
        if len(j) > 1:
            assert Jump(j.captures[:-1], j.landings[:-1]) in jumps


def test_sibling_branches_do_not_share_captures():
    b = _board(((6, 4), DARK), ((5, 3), LIGHT), ((5, 5), LIGHT))
    moves = get_legal_moves(b, DARK, 6, 4)
    assert set(moves) == {Jump([(5, 3)], [(4, 2)]), Jump([(5, 5)], [(4, 6)])}


def test_chain_may_change_direction():
    b = _board(((6, 4), DARK), ((5, 5), LIGHT), ((3, 5), LIGHT))
    moves = get_legal_moves(b, DARK, 6, 4)
    assert Jump([(5, 5), (3, 5)], [(4, 6), (2, 4)]) in moves


def test_king_chain_never_recaptures():
    b = _board(((7, 1), DARK_KING), ((6, 2), LIGHT), ((4, 4), LIGHT))
    moves = get_legal_moves(b, DARK_KING, 7, 1)
    jumps = [m for m in moves if m.is_capture()]
    assert jumps == [
        Jump([(6, 2)], [(5, 3)]),
        Jump([(6, 2), (4, 4)], [(5, 3), (3, 5)]),
    ]
    assert len(moves) == 5


def test_moves_never_target_occupied_or_off_board_cells():
    b = Board.setup_start()
    b.set_piece((6, 1), LIGHT)
    b.set_piece((5, 4), LIGHT_KING)
    for pos, move in all_legal_moves(b, 'black') + all_legal_moves(b, 'white'):
        mover = b.get_piece(pos)
        targets = move.landings if move.is_capture() else (move.to,)
        for t in targets:
            assert b.in_bounds(t)
            assert b.get_piece(t) is None
        if move.is_capture():
            assert all(b.get_piece(c).color != mover.color for c in move.captures)


def test_all_legal_moves_for_start_position():
    b = Board.setup_start()
    origins = {pos for pos, _ in all_legal_moves(b, 'black')}
    assert origins == {(7, 0), (7, 2), (7, 4), (7, 6), (7, 8)}
    assert len(all_legal_moves(b, 'black')) == 9


def test_victory_only_at_zero_pieces():
    b = _board(((5, 4), DARK), ((2, 1), LIGHT))
    assert check_victory(b) is None
    b.set_piece((2, 1), None)
    assert check_victory(b) == 'black'
    b = _board(((2, 1), LIGHT_KING))
    assert check_victory(b) == 'white'
