"""Configuration dataclasses and YAML loader for the cave generator."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import yaml


SMOOTHING_MODES = ("snapshot", "in_place")


@dataclass
class GridConfig:
    width: int = 20
    height: int = 10
    fill_probability: float = 0.5  # chance of a seed cell starting active


@dataclass
class CellularAutomataConfig:
    radius: int = 1         # R
    threshold: float = 0.5  # U (0.0-1.0)
    mode: str = "snapshot"  # "snapshot" or "in_place"


@dataclass
class DrunkAgentConfig:
    outer_iterations: int = 5   # J
    inner_steps: int = 10       # I
    room_size_x: int = 5        # rows covered by a room
    room_size_y: int = 3        # columns covered by a room
    room_probability: float = 0.1
    room_probability_increment: float = 0.05
    direction_change_probability: float = 0.2
    direction_change_increment: float = 0.03


@dataclass
class GenerationConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    cellular_automata: CellularAutomataConfig = field(default_factory=CellularAutomataConfig)
    drunk_agent: DrunkAgentConfig = field(default_factory=DrunkAgentConfig)
    iterations: int = 5

    # Output flags (can be overridden by CLI)
    quiet: bool = False
    summary: bool = True
    seed: Optional[int] = None

    def validate(self) -> None:
        """Reject parameters the generators cannot run with."""
        if self.grid.width <= 0 or self.grid.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got "
                f"{self.grid.width}x{self.grid.height}"
            )
        if self.cellular_automata.radius < 0:
            raise ValueError(
                f"Neighborhood radius must be >= 0, got {self.cellular_automata.radius}"
            )
        if self.cellular_automata.mode not in SMOOTHING_MODES:
            raise ValueError(f"Unknown smoothing mode: {self.cellular_automata.mode}")
        if self.iterations < 0:
            raise ValueError(f"Iteration count must be >= 0, got {self.iterations}")
        agent = self.drunk_agent
        if agent.outer_iterations < 0 or agent.inner_steps < 0:
            raise ValueError("Drunk agent step counts must be >= 0")
        if agent.room_size_x < 0 or agent.room_size_y < 0:
            raise ValueError("Room dimensions must be >= 0")


def default_config() -> GenerationConfig:
    """Reference parameters: 10x20 map, R=1, U=0.5, 5x10 agent steps, 5x3 rooms."""
    return GenerationConfig()


def _parse_grid(grid_raw: Dict[str, Any]) -> GridConfig:
    """Parse grid dimensions from raw YAML data."""
    defaults = GridConfig()
    return GridConfig(
        width=int(grid_raw.get('width', defaults.width)),
        height=int(grid_raw.get('height', defaults.height)),
        fill_probability=float(grid_raw.get('fill_probability', defaults.fill_probability))
    )


def _parse_cellular_automata(ca_raw: Dict[str, Any]) -> CellularAutomataConfig:
    """Parse smoother parameters from raw YAML data."""
    defaults = CellularAutomataConfig()
    mode = str(ca_raw.get('mode', defaults.mode))
    if mode not in SMOOTHING_MODES:
        raise ValueError(f"Unknown smoothing mode: {mode}")
    return CellularAutomataConfig(
        radius=int(ca_raw.get('radius', defaults.radius)),
        threshold=float(ca_raw.get('threshold', defaults.threshold)),
        mode=mode
    )


def _parse_drunk_agent(agent_raw: Dict[str, Any]) -> DrunkAgentConfig:
    """Parse carver parameters from raw YAML data."""
    defaults = DrunkAgentConfig()
    room_size = agent_raw.get('room_size')
    if room_size is not None:
        if len(room_size) != 2:
            raise ValueError(f"room_size must be [x, y], got {room_size}")
        room_size_x, room_size_y = int(room_size[0]), int(room_size[1])
    else:
        room_size_x = int(agent_raw.get('room_size_x', defaults.room_size_x))
        room_size_y = int(agent_raw.get('room_size_y', defaults.room_size_y))

    return DrunkAgentConfig(
        outer_iterations=int(agent_raw.get('outer_iterations', defaults.outer_iterations)),
        inner_steps=int(agent_raw.get('inner_steps', defaults.inner_steps)),
        room_size_x=room_size_x,
        room_size_y=room_size_y,
        room_probability=float(
            agent_raw.get('room_probability', defaults.room_probability)),
        room_probability_increment=float(
            agent_raw.get('room_probability_increment', defaults.room_probability_increment)),
        direction_change_probability=float(
            agent_raw.get('direction_change_probability', defaults.direction_change_probability)),
        direction_change_increment=float(
            agent_raw.get('direction_change_increment', defaults.direction_change_increment))
    )


def load_config(config_path: Path) -> GenerationConfig:
    """Load and validate YAML configuration file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    generation_raw = raw.get('generation', {})
    output_raw = raw.get('output', {})
    seed = generation_raw.get('seed')

    config = GenerationConfig(
        grid=_parse_grid(raw.get('grid', {})),
        cellular_automata=_parse_cellular_automata(raw.get('cellular_automata', {})),
        drunk_agent=_parse_drunk_agent(raw.get('drunk_agent', {})),
        iterations=int(generation_raw.get('iterations', 5)),
        quiet=bool(output_raw.get('quiet', False)),
        summary=bool(output_raw.get('summary', True)),
        seed=int(seed) if seed is not None else None
    )
    config.validate()
    return config
