"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads the digraph from a text file
- DijkstraPathSolver: Finds minimum-weight paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraPathSolver
from .text_repository import TextGraphRepository

__all__ = ["TextGraphRepository", "DijkstraPathSolver"]
