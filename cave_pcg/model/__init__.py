"""Model package for the cave generator."""

from .state import AgentState, GenerationState
from .grid import TileGrid
from .smoother import CellularAutomataSmoother, count_neighborhood, neighborhood_size
from .carver import CarveResult, DrunkAgentCarver, escalate_probability
from .engine import GenerationEngine

__all__ = [
    'AgentState',
    'GenerationState',
    'TileGrid',
    'CellularAutomataSmoother',
    'count_neighborhood',
    'neighborhood_size',
    'CarveResult',
    'DrunkAgentCarver',
    'escalate_probability',
    'GenerationEngine',
]
