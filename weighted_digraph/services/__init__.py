"""Services layer - Application orchestration.

Available services:
- DigraphQueryService: Loads the digraph and answers queries against it
"""

from .digraph_service import DigraphQueryService

__all__ = ["DigraphQueryService"]
