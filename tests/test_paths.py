"""Tests for Dijkstra and component diameters."""
import pytest


class TestDijkstra:
    """Tests for dijkstra."""

    def test_source_distance_zero(self, lib):
        """Source is at distance 0."""
        g = lib.loads("g\nA\n")
        assert lib.dijkstra(g, 0) == [0]

    def test_weighted_shortcut(self, lib, build):
        """The cheaper two-hop route beats the direct edge."""
        g = build("""
            g
            A -- B 5
            B -- C 2
            A -- C 10
        """)
        assert lib.dijkstra(g, lib.find_vertex(g, "A")) == [0, 5, 7]

    def test_unreachable_is_infinite(self, lib, triangle_plus_isolated):
        """Vertices in other components keep the infinite sentinel."""
        g = triangle_plus_isolated
        dist = lib.dijkstra(g, lib.find_vertex(g, "A"))
        assert dist[lib.find_vertex(g, "D")] == lib.INFINITY
        assert dist[lib.find_vertex(g, "C")] == 1

    def test_parallel_edges_use_minimum(self, lib):
        """Relaxation keeps the lightest of parallel edges."""
        g = lib.loads("g\nA -- B 9\nA -- B 4\nA -- B 6\n")
        assert lib.dijkstra(g, 0) == [0, 4]

    def test_zero_weight(self, lib):
        """Zero-weight edges are allowed."""
        g = lib.loads("g\nA -- B 0\nB -- C 3\n")
        assert lib.dijkstra(g, 0) == [0, 0, 3]


class TestDiameters:
    """Tests for component_diameters and diameters."""

    def test_isolated_vertex(self, lib):
        """A singleton component has diameter 0."""
        g = lib.loads("g\nA\n")
        assert lib.component_diameters(g) == [0]
        assert lib.diameters(g) == "0"

    def test_unit_path(self, lib, build):
        """A path of k unit-weight vertices has diameter k-1."""
        g = build("""
            path
            A -- B
            B -- C
            C -- D
            D -- E
        """)
        assert lib.diameters(g) == "4"

    def test_round_trip_triangle(self, lib, triangle_plus_isolated):
        """Isolated D and the weighted triangle give '0 5'."""
        assert lib.diameters(triangle_plus_isolated) == "0 5"

    def test_sorted_ascending(self, lib, build):
        """Diameters are sorted regardless of component order."""
        g = build("""
            g
            A -- B 7
            C -- D 2
            D -- E 2
            F
        """)
        assert lib.component_diameters(g) == [0, 4, 7]
        assert lib.diameters(g) == "0 4 7"

    def test_duplicate_values_kept(self, lib):
        """Components with equal diameters each contribute a value."""
        g = lib.loads("g\nA -- B\nC -- D\n")
        assert lib.diameters(g) == "1 1"

    def test_empty_graph(self, lib):
        """No components, empty string."""
        assert lib.diameters(lib.loads("g")) == ""

    def test_weighted_star(self, lib, build):
        """Diameter is the longest shortest path through the hub."""
        g = build("""
            star
            H -- A 1
            H -- B 2
            H -- C 3
        """)
        assert lib.diameters(g) == "5"
