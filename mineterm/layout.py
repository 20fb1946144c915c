
from __future__ import annotations
import random
from typing import List, Optional, Sequence, Tuple

Coordinate = Tuple[int, int]


class MineLayout:
    """Random mine placement backed by a retained permutation of cell indices.

    The first `num_mines` entries of the permutation are the initial mines. The
    tail is kept so a mine can later be moved to a cell that is guaranteed not
    to hold one already.
    """

    def __init__(self, width: int, height: int, num_mines: int,
                 seed: Optional[int] = None, permutation: Optional[Sequence[int]] = None):
        assert width >= 1 and height >= 1
        assert 0 <= num_mines < width * height
        self.width = width
        self.height = height
        self.num_mines = num_mines
        if permutation is None:
            rng = random.Random(int(seed)) if seed is not None else random.Random()
            order = list(range(width * height))
            rng.shuffle(order)
        else:
            order = [int(i) for i in permutation]
            assert sorted(order) == list(range(width * height)), 'not a permutation of the cell indices'
        self.permutation: List[int] = order

    def to_coord(self, index: int) -> Coordinate:
        return index % self.width, index // self.width

    def initial_mines(self) -> List[Coordinate]:
        return [self.to_coord(i) for i in self.permutation[:self.num_mines]]

    def replacement_for(self, is_mine) -> Optional[Coordinate]:
        # Walk the unused tail; the first cell without a mine takes the moved one
        for index in self.permutation[self.num_mines:]:
            x, y = self.to_coord(index)
            if not is_mine(x, y):
                return x, y
        return None
