"""Connected components and bipartiteness."""
from typing import List, Optional
from .types import Graph
from .traversal import mark_reachable


def component_count(graph: Optional[Graph]) -> int:
    """Count connected components; isolated vertices count as one each."""
    if graph is None:
        return 0

    visited = [False] * len(graph.vertices)
    count = 0
    for start in range(len(graph.vertices)):
        if not visited[start]:
            count += 1
            mark_reachable(graph, start, visited)
    return count


def connected_components(graph: Optional[Graph]) -> List[List[str]]:
    """List the member names of each connected component."""
    if graph is None:
        return []

    visited = [False] * len(graph.vertices)
    components = []
    for start in range(len(graph.vertices)):
        if not visited[start]:
            members = mark_reachable(graph, start, visited)
            components.append([graph.vertices[i] for i in members])
    return components


def is_bipartite(graph: Optional[Graph]) -> bool:
    """Check whether the graph can be two-colored.

    Every component is colored by DFS starting at color 0. The first edge
    whose endpoints share a color ends the check.
    """
    if graph is None:
        return False

    UNCOLORED = -1
    color = [UNCOLORED] * len(graph.vertices)

    for start in range(len(graph.vertices)):
        if color[start] != UNCOLORED:
            continue

        color[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbor, _ in graph.adj[node]:
                if color[neighbor] == UNCOLORED:
                    color[neighbor] = 1 - color[node]
                    stack.append(neighbor)
                elif color[neighbor] == color[node]:
                    return False

    return True
