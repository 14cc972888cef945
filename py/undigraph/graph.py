"""Graph creation, lookup and modification operations."""
import logging
from typing import Dict, List, Any, Optional, Tuple
from .types import Graph, Neighbor, DEFAULT_WEIGHT

logger = logging.getLogger(__name__)


def create_graph(name: str = "") -> Graph:
    """Create a new empty graph."""
    return Graph(name=name)


def find_vertex(graph: Optional[Graph], vertex_name: str) -> Optional[int]:
    """Return the index of a vertex by exact name, or None."""
    if graph is None:
        return None

    for index, existing in enumerate(graph.vertices):
        if existing == vertex_name:
            return index
    return None


def add_vertex(graph: Graph, vertex_name: str) -> int:
    """Append a vertex with an empty adjacency list and return its index."""
    graph.vertices.append(vertex_name)
    graph.adj.append([])
    return len(graph.vertices) - 1


def get_or_create_vertex(graph: Graph, vertex_name: str) -> int:
    """Return the index of a vertex, adding it if it does not exist."""
    index = find_vertex(graph, vertex_name)
    if index is None:
        index = add_vertex(graph, vertex_name)
    return index


def add_edge(graph: Graph, u: int, v: int, weight: int = DEFAULT_WEIGHT) -> None:
    """Add an undirected edge between two vertex indices.

    Both directions are recorded with the same weight. Self-loops and
    parallel edges are kept as given.
    """
    graph.adj[u].append(Neighbor(v, weight))
    graph.adj[v].append(Neighbor(u, weight))
    graph.edge_count += 1


def release(graph: Optional[Graph]) -> bool:
    """Drop all vertex and adjacency storage held by a graph."""
    if graph is None:
        return False

    logger.debug("releasing graph %r (%d vertices)", graph.name, len(graph.vertices))
    for entries in graph.adj:
        entries.clear()
    graph.adj.clear()
    graph.vertices.clear()
    graph.name = ""
    graph.edge_count = 0
    return True


def name(graph: Optional[Graph]) -> str:
    """Get the display name of the graph."""
    if graph is None:
        return ""
    return graph.name


def vertex_count(graph: Optional[Graph]) -> int:
    """Get the number of vertices."""
    if graph is None:
        return 0
    return len(graph.vertices)


def edge_count(graph: Optional[Graph]) -> int:
    """Get the number of undirected edges added."""
    if graph is None:
        return 0
    return graph.edge_count


def get_vertices(graph: Optional[Graph]) -> List[str]:
    """Get all vertex names in index order."""
    if graph is None:
        return []
    return list(graph.vertices)


def get_neighbors(graph: Optional[Graph], vertex_name: str) -> List[Tuple[str, int]]:
    """Get (neighbor name, weight) pairs of a vertex in insertion order."""
    index = find_vertex(graph, vertex_name)
    if index is None:
        return []

    return [(graph.vertices[entry.vertex], entry.weight) for entry in graph.adj[index]]


def get_graph_info(graph: Optional[Graph]) -> Dict[str, Any]:
    """Get a summary of the graph and every structural query."""
    # Import here to avoid circular imports
    from .components import component_count, is_bipartite
    from .paths import diameters
    from .cuts import cut_vertices, cut_edges

    return {
        "name": name(graph),
        "vertex_count": vertex_count(graph),
        "edge_count": edge_count(graph),
        "component_count": component_count(graph),
        "is_bipartite": is_bipartite(graph),
        "diameters": diameters(graph),
        "cut_vertices": cut_vertices(graph),
        "cut_edges": cut_edges(graph),
    }
