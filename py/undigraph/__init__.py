"""Undirected weighted graph engine - public API."""
from .types import Graph, Neighbor, DEFAULT_WEIGHT, INFINITY
from .graph import (
    create_graph, find_vertex, add_vertex, get_or_create_vertex, add_edge,
    release, name, vertex_count, edge_count, get_vertices, get_neighbors,
    get_graph_info
)
from .loader import load, loads, load_file
from .components import component_count, connected_components, is_bipartite
from .paths import dijkstra, component_diameters, diameters
from .cuts import articulation_points, bridges, cut_vertices, cut_edges

__all__ = [
    'Graph', 'Neighbor', 'DEFAULT_WEIGHT', 'INFINITY',
    'create_graph', 'find_vertex', 'add_vertex', 'get_or_create_vertex',
    'add_edge', 'release', 'name', 'vertex_count', 'edge_count',
    'get_vertices', 'get_neighbors', 'get_graph_info',
    'load', 'loads', 'load_file',
    'component_count', 'connected_components', 'is_bipartite',
    'dijkstra', 'component_diameters', 'diameters',
    'articulation_points', 'bridges', 'cut_vertices', 'cut_edges'
]
