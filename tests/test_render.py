from mineterm.driver import GameState
from mineterm.engine import Board, Cell, CellStatus
from mineterm.render import (BANNER_LOST, BANNER_WON, INSTRUCTIONS, banner, cell_glyph,
                             frame_lines, frame_size, render_ascii, status_line)


def test_glyph_table():
    assert cell_glyph(Cell(), 3) == '#'
    assert cell_glyph(Cell(status=CellStatus.FLAGGED), 0) == 'F'
    assert cell_glyph(Cell(status=CellStatus.CLEARED), 0) == '.'
    assert cell_glyph(Cell(status=CellStatus.CLEARED), 7) == '7'
    assert cell_glyph(Cell(mine=True, status=CellStatus.FLAGGED), 2, True) == 'x'
    assert cell_glyph(Cell(mine=True), 0, True) == 'x'
    assert cell_glyph(Cell(mine=True), 0) == '#'


def test_banners():
    assert banner(GameState.LOST) == 'oops you hit the mine' == BANNER_LOST
    assert banner(GameState.WON) == "hooray you're a winner!!!" == BANNER_WON
    assert banner(GameState.RUNNING) == INSTRUCTIONS
    assert banner(GameState.QUIT) == INSTRUCTIONS


def test_lost_frame_shows_every_mine():
    board = Board.from_layout([
        '*..',
        '...',
        '.*.',
    ])
    board.toggle_flag(0, 0)
    assert frame_lines(board, GameState.RUNNING) == ['F # #', '# # #', '# # #']
    assert frame_lines(board, GameState.LOST) == ['x # #', '# # #', '# x #']


def test_status_line_counts_flags():
    board = Board(4, 4, 3, seed=5)
    board.toggle_flag(1, 1)
    board.toggle_flag(2, 1)
    assert status_line(board) == 'Mines: 3  Flags: 2'


def test_frame_size_covers_instructions_and_board():
    cols, rows = frame_size(Board(21, 11, 20, seed=0))
    assert cols == len(INSTRUCTIONS)
    assert rows == 14
    cols, _ = frame_size(Board(60, 2, 1, seed=0))
    assert cols == 119


def test_render_ascii_glyphs():
    board = Board.from_layout([
        '*..',
        '...',
        '...',
    ])
    board.reveal(2, 2)
    board.toggle_flag(0, 0)
    assert render_ascii(board) == '\n'.join([
        'F 1 .',
        '1 1 .',
        '. . .',
    ])
    assert render_ascii(board, reveal_mines=True).startswith('x 1 .')
