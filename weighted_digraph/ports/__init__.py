"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the query service and the adapters
that load graphs and solve paths, so either side can be swapped in tests.
"""

from .graph import GraphRepositoryPort, PathSolverPort

__all__ = ["GraphRepositoryPort", "PathSolverPort"]
