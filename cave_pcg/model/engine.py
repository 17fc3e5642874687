"""Generation engine alternating smoothing and carving passes."""

import logging
import numpy as np
from typing import Iterator, TYPE_CHECKING

from .grid import TileGrid
from .smoother import CellularAutomataSmoother
from .carver import DrunkAgentCarver
from .state import AgentState, GenerationState

if TYPE_CHECKING:
    from ..config import GenerationConfig

logger = logging.getLogger(__name__)


class GenerationEngine:
    """
    Orchestrates the generation loop.

    Implements:
    1. Random seeding of the grid
    2. Smoothing pass (snapshot or in-place)
    3. Carving pass, threading the agent position between iterations
    4. State snapshot generation
    """

    def __init__(self, config: "GenerationConfig"):
        config.validate()
        self.config = config
        self.current_iteration = 0
        self.rng = np.random.default_rng(config.seed)

        # Initialize grid from random noise
        self.grid = TileGrid.random(
            config.grid.width, config.grid.height, self.rng,
            config.grid.fill_probability
        )

        ca = config.cellular_automata
        self.smoother = CellularAutomataSmoother(ca.radius, ca.threshold, ca.mode)
        self.carver = DrunkAgentCarver.from_config(config.drunk_agent)

        # Agent starts at the map center
        self.agent = AgentState(config.grid.height // 2, config.grid.width // 2)

        # Metrics tracking
        self.rooms_stamped = 0
        self.steps_taken = 0

    def initial_state(self) -> GenerationState:
        """Snapshot of the seeded grid before any pass has run."""
        return self._create_state_snapshot()

    def step(self) -> GenerationState:
        """
        Execute one iteration.

        1. Smooth the grid
        2. Carve with the persistent agent position
        3. Return current state snapshot
        """
        self.current_iteration += 1

        self.grid = self.smoother.apply(self.grid)

        result = self.carver.carve(self.grid, self.agent, self.rng)
        self.grid = result.grid
        self.agent = result.agent
        self.rooms_stamped += result.rooms_stamped
        self.steps_taken += result.steps_taken

        logger.debug(
            "Iteration %d: agent=(%d, %d) rooms=%d active=%.3f",
            self.current_iteration, self.agent.x, self.agent.y,
            result.rooms_stamped, self.grid.active_ratio()
        )
        return self._create_state_snapshot()

    def run(self) -> Iterator[GenerationState]:
        """Step until finished, yielding each iteration's state."""
        while not self.is_finished():
            yield self.step()

    def _create_state_snapshot(self) -> GenerationState:
        """Create immutable snapshot of current generator state."""
        metrics = {
            'active_ratio': self.grid.active_ratio(),
            'rooms_stamped': self.rooms_stamped,
            'steps_taken': self.steps_taken,
        }
        return GenerationState(
            iteration=self.current_iteration,
            cells=self.grid.cells.copy(),
            agent=self.agent,
            metrics=metrics
        )

    def is_finished(self) -> bool:
        """Check if all iterations have run."""
        return self.current_iteration >= self.config.iterations

    def get_summary(self) -> dict:
        """Get summary statistics for the run."""
        return {
            'iterations': self.current_iteration,
            'active_ratio': self.grid.active_ratio(),
            'rooms_stamped': self.rooms_stamped,
            'steps_taken': self.steps_taken,
            'agent': (self.agent.x, self.agent.y),
        }
