"""Shortest paths and per-component diameters."""
from typing import List, Optional, Union
from .types import Graph, INFINITY
from .traversal import mark_reachable

Distance = Union[int, float]


def dijkstra(graph: Optional[Graph], source: int) -> List[Distance]:
    """Dense O(V^2) Dijkstra from a source vertex index.

    Returns one distance per vertex; vertices that cannot be reached keep
    INFINITY. Weights are assumed non-negative.
    """
    if graph is None:
        return []

    n = len(graph.vertices)
    dist: List[Distance] = [INFINITY] * n
    visited = [False] * n
    dist[source] = 0

    for _ in range(n):
        node = -1
        best = INFINITY
        for candidate in range(n):
            if not visited[candidate] and dist[candidate] < best:
                best = dist[candidate]
                node = candidate
        if node < 0:
            break

        visited[node] = True
        for neighbor, weight in graph.adj[node]:
            new_dist = dist[node] + weight
            if new_dist < dist[neighbor]:
                dist[neighbor] = new_dist

    return dist


def _component_diameter(graph: Graph, members: List[int]) -> Distance:
    """Largest finite shortest-path distance between members of a component."""
    longest: Distance = 0
    for source in members:
        dist = dijkstra(graph, source)
        for target in members:
            if dist[target] != INFINITY and dist[target] > longest:
                longest = dist[target]
    return longest


def component_diameters(graph: Optional[Graph]) -> List[Distance]:
    """Diameter of every connected component in ascending order."""
    if graph is None:
        return []

    visited = [False] * len(graph.vertices)
    result = []
    for start in range(len(graph.vertices)):
        if not visited[start]:
            members = mark_reachable(graph, start, visited)
            result.append(_component_diameter(graph, members))

    return sorted(result)


def diameters(graph: Optional[Graph]) -> str:
    """Component diameters as a space-separated ascending string."""
    return " ".join(str(d) for d in component_diameters(graph))
