
from __future__ import annotations
from typing import List

from .driver import GameState
from .engine import Board, Cell, CellStatus

BANNER_LOST = 'oops you hit the mine'
BANNER_WON = "hooray you're a winner!!!"
INSTRUCTIONS = 'arrow keys / hjkl: move cursor      d / enter: dig     f: flag'


def cell_glyph(cell: Cell, adj: int, reveal_mines: bool = False) -> str:
    if reveal_mines and cell.mine:
        return 'x'
    if cell.status is CellStatus.FLAGGED:
        return 'F'
    if cell.status is CellStatus.UNKNOWN:
        return '#'
    return '.' if adj == 0 else str(adj)


def render_ascii(board: Board, reveal_mines: bool = False) -> str:
    rows = []
    for y in range(board.height):
        rows.append(' '.join(cell_glyph(board.grid[y][x], int(board.adjacency[y, x]), reveal_mines)
                             for x in range(board.width)))
    return '\n'.join(rows)


def banner(state: GameState) -> str:
    if state is GameState.LOST:
        return BANNER_LOST
    if state is GameState.WON:
        return BANNER_WON
    return INSTRUCTIONS


def status_line(board: Board) -> str:
    return f'Mines: {board.num_mines}  Flags: {board.flag_count()}'


def frame_lines(board: Board, state: GameState) -> List[str]:
    # Cell (x, y) sits at column 2 * x of row y
    return render_ascii(board, reveal_mines=(state is GameState.LOST)).split('\n')


def frame_size(board: Board) -> tuple[int, int]:
    """(columns, rows) a full text frame needs: status line, board, blank, banner."""
    cols = max(2 * board.width - 1, len(INSTRUCTIONS), len(status_line(board)))
    return cols, board.height + 3
