"""Cellular automata smoothing pass."""

import numpy as np
from typing import Tuple
from scipy.ndimage import convolve

from .grid import TileGrid


def neighborhood_size(radius: int) -> int:
    """Number of cells in a (2R+1) x (2R+1) window."""
    if radius < 0:
        raise ValueError(f"Neighborhood radius must be >= 0, got {radius}")
    side = 2 * radius + 1
    return side * side


def count_neighborhood(grid: TileGrid, x: int, y: int,
                       radius: int) -> Tuple[int, int]:
    """
    Count active cells around (x, y), including the cell itself.

    Out-of-bounds cells count as active. Returns (active, total).
    """
    if radius < 0:
        raise ValueError(f"Neighborhood radius must be >= 0, got {radius}")
    active = 0
    total = 0
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny):
                active += int(grid.cells[nx, ny])
            else:
                active += 1
            total += 1
    return active, total


class CellularAutomataSmoother:
    """
    Density-threshold smoothing over a square neighborhood.

    A cell becomes active when the share of active cells in its
    (2R+1) x (2R+1) window is strictly greater than the threshold U.
    Cells beyond the border count as active, which closes off the edges.

    Two update modes:
    - snapshot: every cell reads the prior state (order independent)
    - in_place: row-major sweep where later cells read already updated
      neighbors (the fast, order-dependent variant)
    """

    def __init__(self, radius: int, threshold: float, mode: str = "snapshot"):
        if radius < 0:
            raise ValueError(f"Neighborhood radius must be >= 0, got {radius}")
        if mode not in ("snapshot", "in_place"):
            raise ValueError(f"Unknown smoothing mode: {mode}")
        self.radius = radius
        self.threshold = threshold
        self.mode = mode

        side = 2 * radius + 1
        self.kernel = np.ones((side, side), dtype=np.int32)
        self.total = neighborhood_size(radius)

    def apply(self, grid: TileGrid) -> TileGrid:
        """Run one pass using the configured mode."""
        if self.mode == "in_place":
            return self.smooth_in_place(grid)
        return self.smooth(grid)

    def active_counts(self, grid: TileGrid) -> np.ndarray:
        """Active-cell count of every window, computed from a frozen copy."""
        r = self.radius
        # Pad with walls so out-of-bounds cells count as active
        padded = np.pad(grid.cells.astype(np.int32), r,
                        mode='constant', constant_values=1)
        counts = convolve(padded, self.kernel, mode='constant', cval=1)
        return counts[r:r + grid.height, r:r + grid.width]

    def smooth(self, grid: TileGrid) -> TileGrid:
        """Return a new smoothed grid; the input is left untouched."""
        ratio = self.active_counts(grid) / self.total
        result = TileGrid(grid.width, grid.height)
        result.cells = (ratio > self.threshold).astype(np.int8)
        return result

    def smooth_in_place(self, grid: TileGrid) -> TileGrid:
        """Sweep rows then columns, overwriting cells as they are computed."""
        for x in range(grid.height):
            for y in range(grid.width):
                active, total = count_neighborhood(grid, x, y, self.radius)
                ratio = active / total
                grid.cells[x, y] = 1 if ratio > self.threshold else 0
        return grid
