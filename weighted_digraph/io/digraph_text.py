"""Reading the line-oriented text description of a weighted digraph.

The format is:

    <num_vertices>
    <from> <to> <weight>
    <from> <to> <weight>
    ...

Fields are whitespace-separated, one arc per line, consumed until end of
input. Blank lines are skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from ..domain.errors import GraphFormatError, GraphLoadError, VertexOutOfRangeError
from ..domain.models import Arc
from ..graph.builder import build_graph
from ..graph.store import GraphStore

logger = logging.getLogger(__name__)


def parse_digraph_text(lines: Iterable[str]) -> Tuple[int, Iterator[Arc]]:
    """Split a text description into its vertex count and arcs.

    Parameters
    ----------
    lines:
        Lines of the description, with or without trailing newlines.

    Returns
    -------
    int, Iterator[Arc]
        The vertex count from the first non-blank line and a lazy
        iterator over the remaining arcs in input order.

    Raises
    ------
    GraphFormatError
        If the header is missing or a line cannot be parsed. Arc lines
        are parsed lazily, so their errors surface during iteration.
    """
    numbered = (
        (number, line.strip())
        for number, line in enumerate(lines, start=1)
        if line.strip()
    )

    header = next(numbered, None)
    if header is None:
        raise GraphFormatError("Missing vertex count", line_number=1)

    number, text = header
    try:
        num_vertices = int(text.split()[0])
    except ValueError as e:
        raise GraphFormatError(
            f"Invalid vertex count on line {number}",
            line_number=number,
            cause=e,
        )

    return num_vertices, (_parse_arc(number, text) for number, text in numbered)


def _parse_arc(number: int, text: str) -> Arc:
    fields = text.split()
    if len(fields) < 3:
        raise GraphFormatError(
            f"Expected 'from to weight' on line {number}, got {text!r}",
            line_number=number,
        )
    try:
        return Arc(source=int(fields[0]), target=int(fields[1]), weight=float(fields[2]))
    except ValueError as e:
        raise GraphFormatError(
            f"Invalid arc on line {number}: {text!r}",
            line_number=number,
            cause=e,
        )


def read_digraph_file(path: Union[str, Path]) -> GraphStore:
    """Open a text description and build the graph from it.

    Raises:
        GraphLoadError: If the file cannot be opened, read or parsed.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            num_vertices, arcs = parse_digraph_text(f)
            return build_graph(num_vertices, arcs)
    except OSError as e:
        raise GraphLoadError(
            "cannot open file!",
            file_path=str(path),
            cause=e,
        )
    except (GraphFormatError, VertexOutOfRangeError, ValueError) as e:
        raise GraphLoadError(
            "Failed to parse graph",
            file_path=str(path),
            cause=e,
        )
