
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional, Sequence

import numpy as np

from .adjacency import compute_adjacency
from .layout import MineLayout

Coordinate = Tuple[int, int]


class CellStatus(Enum):
    UNKNOWN = 'unknown'
    FLAGGED = 'flagged'
    CLEARED = 'cleared'


class Outcome(Enum):
    NOOP = 'noop'
    SAFE = 'safe'
    MINE_HIT = 'mine_hit'
    WIN = 'win'


@dataclass
class Cell:
    mine: bool = False
    status: CellStatus = CellStatus.UNKNOWN


class Board:
    """Grid of cells, the parallel adjacency grid and the reveal/flag rules.

    Cells live in `grid[y][x]`; adjacency in the (height, width) numpy array
    `adjacency`. Adjacency is derived from the mine layout and rebuilt only when
    the layout changes (construction and first-move relocation).
    """

    def __init__(self, width: int, height: int, num_mines: int,
                 seed: Optional[int] = None, permutation: Optional[Sequence[int]] = None):
        self.layout = MineLayout(width, height, num_mines, seed=seed, permutation=permutation)
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.grid: List[List[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]
        for (x, y) in self.layout.initial_mines():
            self.grid[y][x].mine = True
        self.adjacency = compute_adjacency(self.mine_mask())
        self.first_move = True

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> 'Board':
        """Build a board from literal rows, '.' for a safe cell and '*' for a mine."""
        width = len(rows[0])
        assert all(len(r) == width for r in rows), 'ragged layout'
        mines, safe = [], []
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                (mines if ch == '*' else safe).append(y * width + x)
        return cls(width, len(rows), len(mines), permutation=mines + safe)

    # ---------- Cell access ----------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        assert self.in_bounds(x, y), f'({x}, {y}) outside {self.width}x{self.height} board'
        return self.grid[y][x]

    def status_at(self, x: int, y: int) -> CellStatus:
        return self.cell_at(x, y).status

    def adj_at(self, x: int, y: int) -> int:
        assert self.in_bounds(x, y), f'({x}, {y}) outside {self.width}x{self.height} board'
        return int(self.adjacency[y, x])

    def set_status(self, x: int, y: int, status: CellStatus) -> None:
        self.cell_at(x, y).status = status

    def set_mine(self, x: int, y: int, mine: bool) -> None:
        self.cell_at(x, y).mine = mine

    def orthogonal_neighbors(self, x: int, y: int) -> List[Coordinate]:
        coords = []
        for dx, dy in ((0, -1), (0, 1), (1, 0), (-1, 0)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                coords.append((nx, ny))
        return coords

    # ---------- Layout ----------
    def mine_mask(self) -> np.ndarray:
        return np.array([[c.mine for c in row] for row in self.grid], dtype=bool)

    def rebuild_adjacency(self) -> None:
        self.adjacency = compute_adjacency(self.mine_mask())

    def relocate_mine(self, x: int, y: int) -> Coordinate:
        """Move the mine at (x, y) to the next free cell of the retained permutation."""
        self.set_mine(x, y, False)
        target = self.layout.replacement_for(lambda nx, ny: self.grid[ny][nx].mine)
        # num_mines < width * height, so the tail always holds a free cell
        assert target is not None
        self.set_mine(target[0], target[1], True)
        assert self.mine_count() == self.num_mines
        self.rebuild_adjacency()
        return target

    # ---------- Moves ----------
    def reveal(self, x: int, y: int) -> Outcome:
        if self.status_at(x, y) is not CellStatus.UNKNOWN:
            return Outcome.NOOP
        if self.first_move:
            self.first_move = False
            if self.grid[y][x].mine:
                self.relocate_mine(x, y)
        if self.grid[y][x].mine:
            return Outcome.MINE_HIT
        self._flood_fill(x, y)
        return Outcome.WIN if self.is_won() else Outcome.SAFE

    def _flood_fill(self, x: int, y: int) -> int:
        cleared = 0
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            c = self.grid[cy][cx]
            if c.status is CellStatus.CLEARED:
                continue
            c.status = CellStatus.CLEARED
            cleared += 1
            # Cascade is orthogonal even though adjacency counts all eight neighbours
            if self.adjacency[cy, cx] == 0:
                stack.extend(self.orthogonal_neighbors(cx, cy))
        return cleared

    def toggle_flag(self, x: int, y: int) -> None:
        c = self.cell_at(x, y)
        if c.status is CellStatus.UNKNOWN:
            c.status = CellStatus.FLAGGED
        elif c.status is CellStatus.FLAGGED:
            c.status = CellStatus.UNKNOWN

    # ---------- Queries ----------
    def is_won(self) -> bool:
        return all(c.status is CellStatus.CLEARED for row in self.grid for c in row if not c.mine)

    def mine_count(self) -> int:
        return sum(1 for row in self.grid for c in row if c.mine)

    def cleared_count(self) -> int:
        return sum(1 for row in self.grid for c in row if c.status is CellStatus.CLEARED)

    def flag_count(self) -> int:
        return sum(1 for row in self.grid for c in row if c.status is CellStatus.FLAGGED)
