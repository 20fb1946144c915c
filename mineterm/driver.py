
from __future__ import annotations
from enum import Enum
from typing import Iterable, Protocol, Tuple

import numpy as np

from .engine import Board, Outcome

Coordinate = Tuple[int, int]


class Command(Enum):
    MOVE_UP = 'up'
    MOVE_DOWN = 'down'
    MOVE_LEFT = 'left'
    MOVE_RIGHT = 'right'
    REVEAL = 'reveal'
    TOGGLE_FLAG = 'flag'
    QUIT = 'quit'
    NOOP = 'noop'


class GameState(Enum):
    RUNNING = 'running'
    LOST = 'lost'
    WON = 'won'
    QUIT = 'quit'

    @property
    def terminal(self) -> bool:
        return self is not GameState.RUNNING


class Renderer(Protocol):
    def render(self, board: Board, adjacency: np.ndarray, cursor: Coordinate, state: GameState) -> None:
        ...


MOVES = {
    Command.MOVE_UP: (0, -1),
    Command.MOVE_DOWN: (0, 1),
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
}


class GameDriver:
    """Feeds semantic commands into a board and redraws after each one."""

    def __init__(self, board: Board, renderer: Renderer):
        self.board = board
        self.renderer = renderer
        self.cursor: Coordinate = (0, 0)
        self.state = GameState.RUNNING
        self.last_outcome = Outcome.NOOP

    def redraw(self) -> None:
        self.renderer.render(self.board, self.board.adjacency, self.cursor, self.state)

    def handle(self, command: Command) -> GameState:
        if self.state.terminal:
            return self.state
        if command in MOVES:
            dx, dy = MOVES[command]
            cx, cy = self.cursor
            self.cursor = (min(max(cx + dx, 0), self.board.width - 1),
                           min(max(cy + dy, 0), self.board.height - 1))
        elif command is Command.REVEAL:
            self.last_outcome = self.board.reveal(*self.cursor)
            if self.last_outcome is Outcome.MINE_HIT:
                self.state = GameState.LOST
            elif self.last_outcome is Outcome.WIN:
                self.state = GameState.WON
        elif command is Command.TOGGLE_FLAG:
            self.board.toggle_flag(*self.cursor)
        elif command is Command.QUIT:
            self.state = GameState.QUIT
        self.redraw()
        return self.state

    def run(self, commands: Iterable[Command]) -> GameState:
        for command in commands:
            if self.handle(command).terminal:
                break
        return self.state
