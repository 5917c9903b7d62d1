import pytest

pygame = pytest.importorskip('pygame')

from checkers.engine.board import Board
from checkers.engine.move import Jump, Slide
from checkers.engine.piece import Piece
from checkers.engine.state import GameState
from checkers.ui import CROWN_COLOR, PIECE_COLORS, PygameUI, piece_palette


def _click_px(ui, pos):
    x, y = pos
    return (ui.margin + y * ui.square_size + 5, ui.margin + x * ui.square_size + 5)


def test_mouse_to_board():
    ui = PygameUI(GameState(), square_size=64, margin=20)
    assert ui._mouse_to_board(_click_px(ui, (7, 2))) == (7, 2)
    assert ui._mouse_to_board((5, 5)) is None
    assert ui._mouse_to_board((ui.board_px + 10, 30)) is None


def test_select_and_play_slide():
    ui = PygameUI(GameState())
    ui._handle_board_click((7, 2))
    assert ui.selected == (7, 2)
    assert ui.legal_moves == [Slide(6, 1), Slide(6, 3)]

    ui._handle_board_click((6, 3))
    assert ui.animating
    ui._finish_move_animation()
    assert not ui.animating
    assert ui.selected is None
    assert ui.state.board.get_piece((6, 3)) == Piece('black')
    assert ui.state.turn == 'white'


def test_cannot_select_opponent_piece():
    ui = PygameUI(GameState())
    ui._handle_board_click((2, 1))
    assert ui.selected is None
    assert ui.legal_moves == []


def test_click_elsewhere_changes_selection():
    ui = PygameUI(GameState())
    ui._handle_board_click((7, 2))
    ui._handle_board_click((7, 4))
    assert ui.selected == (7, 4)
    ui._handle_board_click((4, 4))
    assert ui.selected is None


def test_longest_chain_played_for_destination():
    b = Board()
    b.set_piece((9, 0), Piece('black'))
    for pos in ((8, 1), (6, 3), (0, 9)):
        b.set_piece(pos, Piece('white'))
    ui = PygameUI(GameState(b))
    ui._handle_board_click((9, 0))
    assert ui._move_to((5, 4)) == Jump([(8, 1), (6, 3)], [(7, 2), (5, 4)])
    ui._handle_board_click((5, 4))
    ui._finish_move_animation()
    assert ui.state.board.count_pieces('white') == 1


def test_clicks_ignored_after_victory_and_reset_restores():
    b = Board()
    b.set_piece((7, 0), Piece('black'))
    b.set_piece((6, 1), Piece('white'))
    start = b.clone()
    ui = PygameUI(GameState(b))
    ui._handle_board_click((7, 0))
    ui._handle_board_click((5, 2))
    ui._finish_move_animation()
    assert ui.state.winner == 'black'
    assert ui.message == 'black wins!'

    ui._handle_board_click((5, 2))
    assert ui.selected is None

    ui._do_reset()
    assert ui.state.board == start
    assert ui.state.turn == 'black'
    assert not ui.state.over


def test_piece_palette_marks_kings():
    border, fill, crown = piece_palette(Piece('black', king=True))
    assert (border, fill) == PIECE_COLORS['black']
    assert crown == CROWN_COLOR
    assert piece_palette(Piece('white'))[2] is None
