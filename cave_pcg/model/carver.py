"""Drunk agent carver: a random walk that marks corridors and stamps rooms."""

import logging
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np

from .grid import TileGrid
from .state import AgentState

logger = logging.getLogger(__name__)


# Unit offsets in (row, column): up, down, left, right
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def escalate_probability(probability: float, increment: float) -> float:
    """Raise a probability after an event was skipped, capped at 1.0."""
    return min(1.0, probability + increment)


@dataclass
class CarveResult:
    """Outcome of a single carver invocation."""
    grid: TileGrid
    agent: AgentState
    rooms_stamped: int = 0
    steps_taken: int = 0


class DrunkAgentCarver:
    """
    Walks an agent across the grid, marking every visited cell.

    Room and direction-change events get more likely the longer they are
    avoided: each miss adds its increment to the probability, each hit
    resets it to the base value.
    """

    def __init__(self, outer_iterations: int, inner_steps: int,
                 room_size_x: int, room_size_y: int,
                 room_probability: float, room_probability_increment: float,
                 direction_change_probability: float,
                 direction_change_increment: float):
        self.outer_iterations = outer_iterations  # J
        self.inner_steps = inner_steps            # I
        self.room_size_x = room_size_x
        self.room_size_y = room_size_y
        self.room_probability = room_probability
        self.room_probability_increment = room_probability_increment
        self.direction_change_probability = direction_change_probability
        self.direction_change_increment = direction_change_increment

    @classmethod
    def from_config(cls, config) -> "DrunkAgentCarver":
        """Build from a DrunkAgentConfig."""
        return cls(
            outer_iterations=config.outer_iterations,
            inner_steps=config.inner_steps,
            room_size_x=config.room_size_x,
            room_size_y=config.room_size_y,
            room_probability=config.room_probability,
            room_probability_increment=config.room_probability_increment,
            direction_change_probability=config.direction_change_probability,
            direction_change_increment=config.direction_change_increment
        )

    def stamp_room(self, grid: TileGrid, x: int, y: int) -> int:
        """Fill a room roughly centered on (x, y), clipped to the grid."""
        start_x = max(0, x - self.room_size_x // 2)
        start_y = max(0, y - self.room_size_y // 2)
        return grid.stamp_rectangle(start_x, start_y,
                                    self.room_size_x, self.room_size_y)

    def carve(self, grid: TileGrid, agent: AgentState,
              rng: np.random.Generator) -> CarveResult:
        """
        Run J walks of up to I steps each over a copy of the grid.

        An out-of-bounds agent is first moved to a random cell. A walk
        ends early when the next step would leave the grid.
        """
        result = grid.copy()
        x, y = agent.x, agent.y

        if not result.in_bounds(x, y):
            x = int(rng.integers(0, result.height))
            y = int(rng.integers(0, result.width))
            logger.debug("Agent out of bounds, reseeded at (%d, %d)", x, y)

        room_prob = self.room_probability
        dir_prob = self.direction_change_probability
        direction = int(rng.integers(len(DIRECTIONS)))

        rooms_stamped = 0
        steps_taken = 0

        for _ in range(self.outer_iterations):
            for _ in range(self.inner_steps):
                result.mark(x, y)

                if rng.random() < room_prob:
                    self.stamp_room(result, x, y)
                    rooms_stamped += 1
                    room_prob = self.room_probability
                else:
                    room_prob = escalate_probability(
                        room_prob, self.room_probability_increment)

                if rng.random() < dir_prob:
                    direction = int(rng.integers(len(DIRECTIONS)))
                    dir_prob = self.direction_change_probability
                else:
                    dir_prob = escalate_probability(
                        dir_prob, self.direction_change_increment)

                dx, dy = DIRECTIONS[direction]
                nx, ny = x + dx, y + dy
                if not result.in_bounds(nx, ny):
                    # Hit the border: turn and end this walk
                    direction = int(rng.integers(len(DIRECTIONS)))
                    break
                x, y = nx, ny
                steps_taken += 1

        logger.debug("Carve finished at (%d, %d): %d rooms, %d steps",
                     x, y, rooms_stamped, steps_taken)
        return CarveResult(
            grid=result,
            agent=AgentState(x, y),
            rooms_stamped=rooms_stamped,
            steps_taken=steps_taken
        )
