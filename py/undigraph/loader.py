"""Build a graph from its line-oriented text description."""
import logging
import re
from typing import Iterable, Optional, Tuple
from .types import Graph, COMMENT_PREFIX, EDGE_SEPARATOR, DEFAULT_WEIGHT
from .graph import create_graph, find_vertex, add_vertex, get_or_create_vertex, add_edge

logger = logging.getLogger(__name__)

# ASCII whitespace only, as C isspace; vertex names may hold any other character
_SPACE = " \t\n\v\f\r"
_TOKEN_SEPARATOR = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _parse_weight(token: str) -> int:
    """Read an integer prefix the way C atoi does; no digits gives 0."""
    match = _LEADING_INT.match(token)
    if match is None:
        return 0
    return int(match.group(1))


def _parse_edge(line: str) -> Optional[Tuple[str, str, int]]:
    """Split 'A -- B [weight]' into its parts, or None when B is missing."""
    left, _, right = line.partition(EDGE_SEPARATOR)
    tokens = [token for token in _TOKEN_SEPARATOR.split(right.strip(_SPACE)) if token]
    if not tokens:
        return None

    weight = _parse_weight(tokens[1]) if len(tokens) > 1 else DEFAULT_WEIGHT
    return left.strip(_SPACE), tokens[0], weight


def load(lines: Iterable[str]) -> Graph:
    """Load a graph from an iterable of text lines.

    Blank lines and ``//`` comments are skipped. The first remaining line is
    the graph name; each later line is an edge (``A -- B [weight]``) or an
    isolated vertex.
    """
    graph = create_graph()
    have_name = False

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip(_SPACE)
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        if not have_name:
            graph.name = line
            have_name = True
            continue

        if EDGE_SEPARATOR in line:
            parsed = _parse_edge(line)
            if parsed is None:
                logger.debug("line %d: edge without right-hand vertex skipped: %r", lineno, line)
                continue
            left, right, weight = parsed
            u = get_or_create_vertex(graph, left)
            v = get_or_create_vertex(graph, right)
            add_edge(graph, u, v, weight)
        elif find_vertex(graph, line) is None:
            add_vertex(graph, line)

    logger.debug(
        "loaded graph %r: %d vertices, %d edges",
        graph.name, len(graph.vertices), graph.edge_count
    )
    return graph


def loads(text: str) -> Graph:
    """Load a graph from a string."""
    return load(text.split("\n"))


def load_file(path: str, encoding: str = "utf-8") -> Graph:
    """Load a graph from a file path."""
    with open(path, "r", encoding=encoding, newline="\n") as f:
        return load(f)
