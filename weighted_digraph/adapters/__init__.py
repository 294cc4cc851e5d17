"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the query service to:
- Graph storage (text files)
- Path solving (Dijkstra)
"""
