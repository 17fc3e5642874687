"""Binary tile grid shared by the smoother and the carver."""

import numpy as np
from typing import List, Sequence


class TileGrid:
    """
    Rectangular map of 0/1 tiles (1 = active/carved, 0 = inactive).

    Coordinate convention: (x, y) with x the row index in [0, height) and
    y the column index in [0, width); cells are indexed as cells[x, y].
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    @classmethod
    def random(cls, width: int, height: int, rng: np.random.Generator,
               fill_probability: float = 0.5) -> "TileGrid":
        """Seed a grid with independent random tiles."""
        grid = cls(width, height)
        grid.cells = (rng.random((height, width)) < fill_probability).astype(np.int8)
        return grid

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "TileGrid":
        """Wrap a 2D array of 0/1 values (copied)."""
        cells = np.asarray(cells)
        if cells.ndim != 2:
            raise ValueError(f"Grid must be 2D, got shape {cells.shape}")
        height, width = cells.shape
        grid = cls(width, height)
        if not np.isin(cells, (0, 1)).all():
            raise ValueError("Grid values must be 0 or 1")
        grid.cells = cells.astype(np.int8, copy=True)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "TileGrid":
        """Build a grid from a list of equally sized rows."""
        if not rows or not rows[0]:
            raise ValueError("Grid must have at least one row and one column")
        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise ValueError(f"Ragged grid: expected rows of {width}, got {len(row)}")
        return cls.from_array(np.array(rows))

    def to_rows(self) -> List[List[int]]:
        """Return the grid as a list of row lists."""
        return [[int(v) for v in row] for row in self.cells]

    def copy(self) -> "TileGrid":
        grid = TileGrid(self.width, self.height)
        grid.cells = self.cells.copy()
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (row, column) lies inside the grid."""
        return 0 <= x < self.height and 0 <= y < self.width

    def mark(self, x: int, y: int) -> None:
        """Set a single tile active; out of bounds is ignored."""
        if self.in_bounds(x, y):
            self.cells[x, y] = 1

    def stamp_rectangle(self, x: int, y: int, size_x: int, size_y: int) -> int:
        """
        Fill a size_x by size_y block starting at (x, y), clipped to the grid.

        Returns the number of tiles covered.
        """
        # Clamp to grid boundaries
        x = max(0, x)
        y = max(0, y)
        x_end = min(self.height, x + size_x)
        y_end = min(self.width, y + size_y)
        if x_end <= x or y_end <= y:
            return 0
        self.cells[x:x_end, y:y_end] = 1
        return (x_end - x) * (y_end - y)

    def active_ratio(self) -> float:
        """Fraction of active tiles."""
        return float(self.cells.mean())

    def is_well_formed(self) -> bool:
        """Exactly height rows of width binary values."""
        return (self.cells.shape == (self.height, self.width)
                and bool(np.isin(self.cells, (0, 1)).all()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __repr__(self) -> str:
        return (f"TileGrid({self.width}x{self.height}, "
                f"active={self.active_ratio():.2f})")
