"""State snapshot dataclasses for the cave generator."""

from dataclasses import dataclass
from typing import Dict, List
import numpy as np


@dataclass(frozen=True)
class AgentState:
    """Drunk agent position carried from one carve to the next."""
    x: int  # row
    y: int  # column


@dataclass
class GenerationState:
    """Complete snapshot of the generator after a given iteration."""
    iteration: int               # 0 = freshly seeded grid
    cells: np.ndarray            # Copy of the tile grid
    agent: AgentState
    metrics: Dict[str, float]    # active_ratio, rooms_stamped, steps_taken, ...

    def to_rows(self) -> List[List[int]]:
        """Grid rows as plain integers."""
        return [[int(v) for v in row] for row in self.cells]
