from __future__ import annotations
from typing import List
import numpy as np
from interfaces import Snapshot

# cell codes in encode_cells(); later entries overwrite earlier ones
EMPTY, FOOD, OBSTACLE, BODY, HEAD = 0, 1, 2, 3, 4

_CHARS = {EMPTY: ".", FOOD: "F", OBSTACLE: "#", BODY: "o", HEAD: "H"}


def encode_cells(snap: Snapshot) -> np.ndarray:
    """(grid_h, grid_w) int8 board of cell codes, indexed [y, x]."""
    grid = np.zeros((snap.grid_h, snap.grid_w), dtype=np.int8)
    fx, fy = snap.food
    grid[fy, fx] = FOOD
    for (x, y) in snap.obstacles:
        grid[y, x] = OBSTACLE
    for (x, y) in snap.snake[1:]:
        grid[y, x] = BODY
    hx, hy = snap.head
    grid[hy, hx] = HEAD
    return grid


def to_text(snap: Snapshot) -> List[str]:
    grid = encode_cells(snap)
    return ["".join(_CHARS[int(v)] for v in row) for row in grid]
