"""Procedural cave/room map generation with cellular automata and a drunk agent."""

from .config import GenerationConfig, default_config, load_config
from .model import (
    AgentState,
    CellularAutomataSmoother,
    DrunkAgentCarver,
    GenerationEngine,
    GenerationState,
    TileGrid,
)

__all__ = [
    'AgentState',
    'CellularAutomataSmoother',
    'DrunkAgentCarver',
    'GenerationConfig',
    'GenerationEngine',
    'GenerationState',
    'TileGrid',
    'default_config',
    'load_config',
]
