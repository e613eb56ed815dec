from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np


Coordinate = Tuple[int, int]

ROWS = 20
COLS = 10
EMPTY = 0


class Grid:
    """Fixed 20x10 matrix of locked cells.

    The grid uses EMPTY (0) for free cells and positive integers for filled
    cells. Integer values are color indices (one per piece kind).
    Row 0 is the top of the well.
    """

    def __init__(self, cells: Optional[np.ndarray] = None) -> None:
        self.height = ROWS
        self.width = COLS
        if cells is None:
            self.cells = np.full((ROWS, COLS), EMPTY, dtype=np.int8)
        else:
            cells = np.asarray(cells, dtype=np.int8)
            if cells.shape != (ROWS, COLS):
                raise ValueError(f"grid must be {ROWS}x{COLS}, got {cells.shape}")
            self.cells = cells.copy()

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def filled(self, x: int, y: int) -> bool:
        # Walls and floor count as filled so one predicate covers every collision
        if not self.is_inside(x, y):
            return True
        return bool(self.cells[y, x] != EMPTY)

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        return not any(self.filled(x, y) for x, y in cells)

    def paint(self, cells: Iterable[Coordinate], color: int) -> "Grid":
        for x, y in cells:
            # numpy would wrap negative indices onto the far edge
            if not self.is_inside(x, y):
                raise IndexError(f"cell ({x}, {y}) is outside the grid")
            self.cells[y, x] = color
        return self

    def row_full(self, y: int) -> bool:
        return bool(np.all(self.cells[y] != EMPTY))

    def remove_row(self, y: int) -> None:
        """Drop row `y`, shifting every row above it down by one."""
        if y > 0:
            self.cells[1 : y + 1] = self.cells[0:y].copy()
        self.cells[0].fill(EMPTY)

    def render_snapshot(self) -> np.ndarray:
        return self.cells.copy()

    def copy(self) -> "Grid":
        return Grid(self.cells)
