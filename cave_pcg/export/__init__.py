"""Console output package for the cave generator."""

from .console import ConsolePrinter, format_grid
from .reporter import Reporter

__all__ = ['ConsolePrinter', 'format_grid', 'Reporter']
