"""curses front end: renderer, keyboard source and the scoped terminal session."""

from __future__ import annotations
import curses
from typing import Iterator

from .driver import Command, GameDriver, GameState
from .engine import Board
from .render import banner, cell_glyph, frame_lines, frame_size, status_line

KEY_COMMANDS = {
    curses.KEY_UP: Command.MOVE_UP,
    ord('k'): Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    ord('j'): Command.MOVE_DOWN,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    ord('h'): Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord('l'): Command.MOVE_RIGHT,
    10: Command.REVEAL,
    13: Command.REVEAL,
    curses.KEY_ENTER: Command.REVEAL,
    ord('d'): Command.REVEAL,
    ord('f'): Command.TOGGLE_FLAG,
    27: Command.QUIT,
    ord('q'): Command.QUIT,
}


def command_for_key(key: int) -> Command:
    return KEY_COMMANDS.get(key, Command.NOOP)


def key_commands(stdscr) -> Iterator[Command]:
    while True:
        key = stdscr.getch()
        if key == -1:
            continue
        yield command_for_key(key)


class CursesRenderer:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.skipped_frames = 0

    def render(self, board: Board, adjacency, cursor, state: GameState) -> None:
        self.stdscr.erase()
        need_cols, need_rows = frame_size(board)
        rows, cols = self.stdscr.getmaxyx()
        try:
            # Leave the last column free; curses errors on writes to the bottom-right cell
            if rows < need_rows or cols <= need_cols:
                self._draw_too_small(need_cols + 1, need_rows, cols, rows)
            else:
                self._draw_frame(board, adjacency, cursor, state)
        except curses.error:
            self.skipped_frames += 1
        self.stdscr.refresh()

    def _draw_too_small(self, need_cols: int, need_rows: int, cols: int, rows: int) -> None:
        self.skipped_frames += 1
        lines = [
            'terminal too small',
            f'need {need_cols}x{need_rows}',
            f'have {cols}x{rows}',
        ]
        for i, line in enumerate(lines[:max(0, rows - 1)]):
            self.stdscr.addstr(i, 0, line[:max(0, cols - 1)])

    def _draw_frame(self, board: Board, adjacency, cursor, state: GameState) -> None:
        lost = state is GameState.LOST
        self.stdscr.addstr(0, 0, status_line(board))
        for y, line in enumerate(frame_lines(board, state)):
            self.stdscr.addstr(1 + y, 0, line)
        cx, cy = cursor
        ch = cell_glyph(board.grid[cy][cx], int(adjacency[cy, cx]), lost)
        self.stdscr.addstr(1 + cy, 2 * cx, ch, curses.A_REVERSE)
        self.stdscr.addstr(board.height + 2, 0, banner(state))


def play(board: Board) -> GameDriver:
    """Run one game in the terminal; the screen is restored on every exit path."""

    def session(stdscr) -> GameDriver:
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        stdscr.keypad(True)
        driver = GameDriver(board, CursesRenderer(stdscr))
        driver.redraw()
        state = driver.run(key_commands(stdscr))
        if state in (GameState.LOST, GameState.WON):
            # Hold the final frame until any key
            stdscr.getch()
        return driver

    return curses.wrapper(session)
