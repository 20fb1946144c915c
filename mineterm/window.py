"""pygame front end, keyboard driven. Draws the same glyphs as the terminal."""

from __future__ import annotations
from typing import Iterator, Optional

import pygame as pg

from .driver import Command, GameDriver, GameState
from .engine import Board, CellStatus
from .render import banner, cell_glyph, status_line

WHITE = (250, 250, 250)
BLACK = (20, 20, 20)
GRAY = (210, 210, 210)
RED = (234, 67, 53)
GREEN = (52, 168, 83)
AMBER = (251, 188, 5)
BACKGROUND = (245, 247, 250)

CELL_COLORS = {
    1: (25, 118, 210),
    2: (56, 142, 60),
    3: (211, 47, 47),
    4: (123, 31, 162),
    5: (93, 64, 55),
    6: (0, 151, 167),
    7: (69, 90, 100),
    8: (158, 158, 158),
}

CELL = 28
PADDING = 12
HEADER = 36
FOOTER = 44

KEY_COMMANDS = {
    pg.K_UP: Command.MOVE_UP,
    pg.K_k: Command.MOVE_UP,
    pg.K_DOWN: Command.MOVE_DOWN,
    pg.K_j: Command.MOVE_DOWN,
    pg.K_LEFT: Command.MOVE_LEFT,
    pg.K_h: Command.MOVE_LEFT,
    pg.K_RIGHT: Command.MOVE_RIGHT,
    pg.K_l: Command.MOVE_RIGHT,
    pg.K_RETURN: Command.REVEAL,
    pg.K_KP_ENTER: Command.REVEAL,
    pg.K_d: Command.REVEAL,
    pg.K_f: Command.TOGGLE_FLAG,
    pg.K_ESCAPE: Command.QUIT,
    pg.K_q: Command.QUIT,
}


def command_for_event(event) -> Optional[Command]:
    if event.type == pg.QUIT:
        return Command.QUIT
    if event.type == pg.KEYDOWN:
        return KEY_COMMANDS.get(event.key, Command.NOOP)
    return None


def key_commands() -> Iterator[Command]:
    while True:
        command = command_for_event(pg.event.wait())
        if command is not None:
            yield command


def window_size(board: Board) -> tuple[int, int]:
    width = max(board.width * CELL + PADDING * 2, 640)
    height = board.height * CELL + PADDING * 2 + HEADER + FOOTER
    return width, height


class WindowRenderer:
    def __init__(self, screen):
        self.screen = screen
        self.font = pg.font.SysFont('Inter,Arial', 18)
        self.font_sm = pg.font.SysFont('Inter,Arial', 16, bold=True)

    def render(self, board: Board, adjacency, cursor, state: GameState) -> None:
        self.screen.fill(BACKGROUND)
        text = self.font.render(status_line(board), True, BLACK)
        self.screen.blit(text, (PADDING, PADDING))
        lost = state is GameState.LOST
        oy = PADDING + HEADER
        for y in range(board.height):
            for x in range(board.width):
                rect = pg.Rect(PADDING + x * CELL, oy + y * CELL, CELL, CELL)
                c = board.grid[y][x]
                ch = cell_glyph(c, int(adjacency[y, x]), lost)
                if (x, y) == tuple(cursor):
                    bg, fg = BLACK, WHITE
                elif ch == 'x':
                    bg, fg = RED, WHITE
                elif c.status is CellStatus.FLAGGED:
                    bg, fg = AMBER, BLACK
                elif c.status is CellStatus.UNKNOWN:
                    bg, fg = GRAY, (120, 120, 120)
                else:
                    bg, fg = WHITE, CELL_COLORS.get(int(adjacency[y, x]), (120, 120, 120))
                pg.draw.rect(self.screen, bg, rect, border_radius=4)
                glyph = self.font_sm.render(ch, True, fg)
                self.screen.blit(glyph, glyph.get_rect(center=rect.center))
                pg.draw.rect(self.screen, (180, 180, 180), rect, 1, border_radius=4)
        color = RED if lost else GREEN if state is GameState.WON else BLACK
        text = self.font.render(banner(state), True, color)
        self.screen.blit(text, (PADDING, oy + board.height * CELL + PADDING))
        pg.display.flip()


def play(board: Board) -> GameDriver:
    pg.init()
    try:
        screen = pg.display.set_mode(window_size(board))
        pg.display.set_caption('mineterm')
        driver = GameDriver(board, WindowRenderer(screen))
        driver.redraw()
        state = driver.run(key_commands())
        if state in (GameState.LOST, GameState.WON):
            # Hold the final frame until a key press or the window closes
            next(key_commands())
        return driver
    finally:
        pg.quit()
