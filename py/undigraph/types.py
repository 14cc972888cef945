"""Type definitions and constants for the undirected graph engine."""
from typing import List, NamedTuple
from dataclasses import dataclass, field
import math


# Edge weight used when an edge line carries no weight token
DEFAULT_WEIGHT = 1

# Distance held by vertices that a shortest-path run never reaches
INFINITY = math.inf

COMMENT_PREFIX = "//"
EDGE_SEPARATOR = "--"


class Neighbor(NamedTuple):
    """One adjacency entry: the neighbor's index and the edge weight."""
    vertex: int
    weight: int


@dataclass
class Graph:
    """Internal graph representation using per-vertex adjacency lists.

    ``vertices[i]`` is the name of vertex ``i`` and ``adj[i]`` its entries.
    Indices are assigned in order of first appearance and never reused.
    """
    name: str = ""
    vertices: List[str] = field(default_factory=list)
    adj: List[List[Neighbor]] = field(default_factory=list)
    edge_count: int = 0
