"""Articulation points and bridges via discovery times and low-links."""
from typing import List, Optional, Set, Tuple
from .types import Graph

_NO_PARENT = -1


class _LowLinkSearch:
    """State for one articulation point / bridge search over a graph.

    Discovery times start at 1 and are shared by every component of the
    search; 0 marks a vertex that has not been discovered yet.
    """

    def __init__(self, graph: Graph):
        n = len(graph.vertices)
        self.graph = graph
        self.disc = [0] * n
        self.low = [0] * n
        self.parent = [_NO_PARENT] * n
        self.time = 0
        self.cut_vertices: Set[int] = set()
        self.bridges: List[Tuple[int, int]] = []

    def run(self) -> "_LowLinkSearch":
        for root in range(len(self.graph.vertices)):
            if not self.disc[root]:
                self._search(root)
        return self

    def _discover(self, node: int) -> None:
        self.time += 1
        self.disc[node] = self.low[node] = self.time

    def _search(self, root: int) -> None:
        disc, low, parent = self.disc, self.low, self.parent
        adj = self.graph.adj

        # Frames are [vertex, adjacency cursor, DFS-tree children]
        self._discover(root)
        stack = [[root, 0, 0]]

        while stack:
            frame = stack[-1]
            node, cursor = frame[0], frame[1]

            if cursor < len(adj[node]):
                frame[1] += 1
                neighbor = adj[node][cursor].vertex
                if not disc[neighbor]:
                    parent[neighbor] = node
                    frame[2] += 1
                    self._discover(neighbor)
                    stack.append([neighbor, 0, 0])
                elif neighbor != parent[node]:
                    # Back edge
                    low[node] = min(low[node], disc[neighbor])
                continue

            stack.pop()
            if not stack:
                continue

            up = stack[-1]
            above = up[0]
            low[above] = min(low[above], low[node])

            if parent[above] == _NO_PARENT:
                if up[2] > 1:
                    self.cut_vertices.add(above)
            elif low[node] >= disc[above]:
                self.cut_vertices.add(above)

            if low[node] > disc[above]:
                self.bridges.append((above, node))


def articulation_points(graph: Optional[Graph]) -> List[str]:
    """Names of all cut vertices in alphabetical order."""
    if graph is None:
        return []

    search = _LowLinkSearch(graph).run()
    return sorted(graph.vertices[i] for i in search.cut_vertices)


def bridges(graph: Optional[Graph]) -> List[Tuple[str, str]]:
    """All cut edges as name pairs, each pair and the list sorted."""
    if graph is None:
        return []

    search = _LowLinkSearch(graph).run()
    pairs = []
    for u, v in search.bridges:
        a, b = graph.vertices[u], graph.vertices[v]
        pairs.append((a, b) if a < b else (b, a))
    return sorted(pairs)


def cut_vertices(graph: Optional[Graph]) -> str:
    """Cut vertices as a space-separated string, empty when there are none."""
    return " ".join(articulation_points(graph))


def cut_edges(graph: Optional[Graph]) -> str:
    """Cut edges as space-separated 'u v' pairs, empty when there are none."""
    return " ".join(f"{u} {v}" for u, v in bridges(graph))
