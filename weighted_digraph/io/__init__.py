"""Input/output for the weighted digraph.

This subpackage reads the on-disk text description of a graph and turns
it into the arcs consumed by the builder.
"""

from .digraph_text import parse_digraph_text, read_digraph_file

__all__ = ["parse_digraph_text", "read_digraph_file"]
