
from __future__ import annotations
import numpy as np

# Offsets of the Moore neighbourhood, centre excluded
OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


def compute_adjacency(mines: np.ndarray) -> np.ndarray:
    """Count mines among the eight neighbours of every cell.

    `mines` is a (height, width) boolean mask. The result has the same shape,
    dtype int8, values 0..8. A cell never counts itself.
    """
    height, width = mines.shape
    padded = np.pad(mines.astype(np.int8), 1)
    counts = np.zeros((height, width), dtype=np.int8)
    for dx, dy in OFFSETS:
        counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
    return counts
