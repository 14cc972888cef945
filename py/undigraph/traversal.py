"""Depth-first reachability shared by the structural analyses."""
from typing import List
from .types import Graph


def mark_reachable(graph: Graph, start: int, visited: List[bool]) -> List[int]:
    """Mark every vertex reachable from start and return them in visit order.

    ``visited`` must be sized to the vertex count; vertices already marked are
    treated as walls. Uses an explicit stack so depth is not bounded by the
    interpreter's recursion limit.
    """
    visited[start] = True
    reached = [start]
    stack = [start]

    while stack:
        node = stack.pop()
        for neighbor, _ in graph.adj[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                reached.append(neighbor)
                stack.append(neighbor)

    return reached
