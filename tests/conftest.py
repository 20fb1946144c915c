import os

import pytest

from mineterm.engine import Board
from mineterm.render import render_ascii

os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')


class RecordingRenderer:
    """Keeps a text snapshot of every frame it is asked to draw."""

    def __init__(self):
        self.frames = []

    def render(self, board, adjacency, cursor, state):
        self.frames.append((render_ascii(board), tuple(cursor), state))


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def two_mine_board():
    # mines at (0,0) and (2,2)
    return Board.from_layout([
        '*..',
        '...',
        '..*',
    ])
